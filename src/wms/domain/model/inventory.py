"""InventoryRecord — one entry in the durable inventory log."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from wms.domain.exceptions import InvalidArgumentError
from wms.domain.model.entity import check_id, check_quantity, check_required_text


@dataclass(frozen=True)
class InventoryRecord:
    """A stock entry as it was recorded.

    Records are immutable; the log may hold several records with the
    same ``id`` (uniqueness is the repository's concern, not the log's).
    """

    id: int
    name: str
    quantity: int
    date_added: datetime

    def __post_init__(self) -> None:
        check_id(self.id)
        check_required_text(self.name, "Item name")
        check_quantity(self.quantity)
        if not isinstance(self.date_added, datetime):
            raise InvalidArgumentError("Date added must be a datetime")
