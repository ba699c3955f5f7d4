"""Application service: Increase Stock use case."""

from __future__ import annotations

from wms.domain.repository.inventory_repository import InventoryRepository


class IncreaseStockHandler:

    def __init__(self, repo: InventoryRepository) -> None:
        self._repo = repo

    def handle(self, item_id: int, amount: int) -> int:
        """Add *amount* to an item's stock and return the new quantity.

        A negative *amount* is allowed as long as the result stays
        non-negative; the repository rejects anything below zero.
        """
        item = self._repo.get_by_id(item_id)
        new_quantity = item.quantity + amount
        self._repo.update_quantity(item_id, new_quantity)
        return new_quantity
