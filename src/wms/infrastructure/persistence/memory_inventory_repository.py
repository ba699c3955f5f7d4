"""In-memory implementation of InventoryRepository.

Keeps entities in a dict keyed by ID. Entities are frozen, so handing out
the stored instance is safe; quantity updates store a replaced copy.
"""

from __future__ import annotations

import dataclasses
from typing import Generic

from wms.domain.exceptions import DuplicateKeyError, InvalidValueError, NotFoundError
from wms.domain.model.entity import field_names, require_entity_type, require_instance
from wms.domain.repository.inventory_repository import InventoryRepository, T


class InMemoryInventoryRepository(InventoryRepository[T], Generic[T]):

    def __init__(self, entity_type: type[T]) -> None:
        require_entity_type(entity_type)
        self._entity_type = entity_type
        self._has_quantity = "quantity" in field_names(entity_type)
        self._store: dict[int, T] = {}

    @property
    def entity_type(self) -> type[T]:
        return self._entity_type

    # --- InventoryRepository interface ----------------------------------------

    def add(self, item: T) -> None:
        require_instance(item, self._entity_type)
        if item.id in self._store:
            raise DuplicateKeyError(f"Item with ID {item.id} already exists")
        self._store[item.id] = item

    def get_by_id(self, item_id: int) -> T:
        try:
            return self._store[item_id]
        except KeyError:
            raise NotFoundError(f"Item with ID {item_id} not found") from None

    def remove(self, item_id: int) -> None:
        if item_id not in self._store:
            raise NotFoundError(f"Item with ID {item_id} not found")
        del self._store[item_id]

    def list_all(self) -> list[T]:
        return list(self._store.values())

    def update_quantity(self, item_id: int, new_quantity: int) -> None:
        if not self._has_quantity:
            raise TypeError(f"{self._entity_type.__name__} has no quantity field")
        if new_quantity < 0:
            raise InvalidValueError("Quantity cannot be negative")
        item = self.get_by_id(item_id)
        self._store[item_id] = dataclasses.replace(item, quantity=new_quantity)

    # --- Container protocol ---------------------------------------------------

    def __len__(self) -> int:
        return len(self._store)

    def __contains__(self, item_id: object) -> bool:
        return item_id in self._store
