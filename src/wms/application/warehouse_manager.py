"""Warehouse manager — owns one repository per stock category.

Electronics and groceries never share a repository, so the same ID may
appear once in each.
"""

from __future__ import annotations

from datetime import date, timedelta

from wms.domain.model.items import ElectronicItem, GroceryItem
from wms.domain.repository.inventory_repository import InventoryRepository


class WarehouseManager:

    def __init__(
        self,
        electronics: InventoryRepository[ElectronicItem],
        groceries: InventoryRepository[GroceryItem],
    ) -> None:
        self.electronics = electronics
        self.groceries = groceries

    def seed_data(self, today: date | None = None) -> None:
        """Populate both repositories with sample stock.

        Raises DuplicateKeyError if called on an already-seeded warehouse.
        """
        today = today or date.today()

        self.electronics.add(ElectronicItem(1, "iPad", 10, "Apple", 35))
        self.electronics.add(ElectronicItem(2, "Microwave", 15, "Akai", 12))
        self.electronics.add(ElectronicItem(3, "Headphones", 20, "Oraimo", 6))

        self.groceries.add(GroceryItem(1, "Margarine", 50, today + timedelta(days=120)))
        self.groceries.add(GroceryItem(2, "Bread Spread", 30, today + timedelta(days=7)))
        self.groceries.add(GroceryItem(3, "Tomatoes", 100, today + timedelta(days=14)))
