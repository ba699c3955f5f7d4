"""Abstract ordered log of entities with file-backed save/load.

Unlike the repository, the log does not enforce unique IDs. Storage
operations never raise on I/O or format problems; they return a
StorageResult that the caller inspects (or escalates with
``raise_for_error()``).
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Generic, TypeVar

from wms.domain.exceptions import StorageError
from wms.domain.model.entity import Entity

T = TypeVar("T", bound=Entity)


class StorageStatus(Enum):
    SAVED = "SAVED"
    LOADED = "LOADED"
    NOT_FOUND = "NOT_FOUND"
    EMPTY = "EMPTY"
    FAILED = "FAILED"


@dataclass(frozen=True)
class StorageResult:
    """Outcome of a save or load.

    ``NOT_FOUND`` and ``EMPTY`` are expected on a first run and count as
    success; only ``FAILED`` carries an error.
    """

    status: StorageStatus
    error: StorageError | None = None

    @property
    def ok(self) -> bool:
        return self.status != StorageStatus.FAILED

    def raise_for_error(self) -> None:
        if self.error is not None:
            raise self.error

    @staticmethod
    def failed(error: StorageError) -> StorageResult:
        return StorageResult(StorageStatus.FAILED, error)


class InventoryLog(ABC, Generic[T]):

    @abstractmethod
    def add(self, item: T) -> None:
        """Append an entity. Raises InvalidArgumentError for None."""

    @abstractmethod
    def list_all(self) -> list[T]:
        """Return every entity, in append order."""

    @abstractmethod
    def save_to_file(self) -> StorageResult:
        """Replace the stored content with the current entities."""

    @abstractmethod
    def load_from_file(self) -> StorageResult:
        """Replace the current entities with the stored content."""
