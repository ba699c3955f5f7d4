"""Warehouse stock items.

Electronics and groceries are kept in separate repositories; each type is
an independent frozen dataclass. Quantity changes go through the repository,
which stores an updated copy.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime

from wms.domain.exceptions import InvalidArgumentError
from wms.domain.model.entity import check_id, check_quantity, check_required_text


@dataclass(frozen=True)
class ElectronicItem:

    id: int
    name: str
    quantity: int
    brand: str
    warranty_months: int

    def __post_init__(self) -> None:
        check_id(self.id)
        check_required_text(self.name, "Item name")
        check_quantity(self.quantity)
        check_required_text(self.brand, "Brand")
        months = self.warranty_months
        if not isinstance(months, int) or isinstance(months, bool) or months < 0:
            raise InvalidArgumentError("Warranty months must be a non-negative integer")


@dataclass(frozen=True)
class GroceryItem:

    id: int
    name: str
    quantity: int
    expiry_date: date

    def __post_init__(self) -> None:
        check_id(self.id)
        check_required_text(self.name, "Item name")
        check_quantity(self.quantity)
        # datetime is a date subclass; a time part would not survive storage
        if not isinstance(self.expiry_date, date) or isinstance(self.expiry_date, datetime):
            raise InvalidArgumentError("Expiry date must be a date without a time")
