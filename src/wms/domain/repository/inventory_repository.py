"""Abstract keyed repository for stock entities.

Defined in the domain layer so the domain never depends on
infrastructure. Concrete implementations live in the infrastructure layer.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

from wms.domain.model.entity import Entity

T = TypeVar("T", bound=Entity)


class InventoryRepository(ABC, Generic[T]):

    @abstractmethod
    def add(self, item: T) -> None:
        """Store a new entity.

        Raises DuplicateKeyError if an entity with the same ID exists.
        """

    @abstractmethod
    def get_by_id(self, item_id: int) -> T:
        """Return an entity by its ID. Raises NotFoundError if absent."""

    @abstractmethod
    def remove(self, item_id: int) -> None:
        """Delete an entity by its ID. Raises NotFoundError if absent."""

    @abstractmethod
    def list_all(self) -> list[T]:
        """Return every entity, in insertion order."""

    @abstractmethod
    def update_quantity(self, item_id: int, new_quantity: int) -> None:
        """Overwrite the stock level of an entity.

        Raises InvalidValueError for a negative quantity and
        NotFoundError if the entity does not exist.
        """
