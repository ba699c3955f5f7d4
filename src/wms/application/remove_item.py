"""Application service: Remove Item use case."""

from __future__ import annotations

from wms.domain.repository.inventory_repository import InventoryRepository


class RemoveItemHandler:

    def __init__(self, repo: InventoryRepository) -> None:
        self._repo = repo

    def handle(self, item_id: int) -> None:
        self._repo.remove(item_id)
