"""JSON-file-backed implementation of InventoryLog."""

from __future__ import annotations

import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Generic

from wms.domain.exceptions import (
    DeserializationError,
    InvalidArgumentError,
    StorageIOError,
)
from wms.domain.model.entity import require_instance
from wms.domain.repository.inventory_log import (
    InventoryLog,
    StorageResult,
    StorageStatus,
    T,
)
from wms.infrastructure.persistence.record_codec import RecordCodec

logger = logging.getLogger(__name__)


class JsonInventoryLog(InventoryLog[T], Generic[T]):
    """Ordered entity log persisted as an indented JSON array.

    The file is only touched by ``save_to_file`` and ``load_from_file``;
    everything else works on the in-memory list.
    """

    def __init__(self, file_path: Path | str, entity_type: type[T]) -> None:
        if file_path is None:
            raise InvalidArgumentError("file_path is required")
        self._file_path = Path(file_path)
        self._entity_type = entity_type
        self._codec = RecordCodec(entity_type)
        self._log: list[T] = []

    @property
    def file_path(self) -> Path:
        return self._file_path

    # --- InventoryLog interface -----------------------------------------------

    def add(self, item: T) -> None:
        require_instance(item, self._entity_type)
        self._log.append(item)

    def list_all(self) -> list[T]:
        return list(self._log)

    def save_to_file(self) -> StorageResult:
        records = [self._codec.to_raw(item) for item in self._log]
        payload = json.dumps(records, indent=2) + "\n"
        try:
            self._write_atomic(payload)
        except OSError as exc:
            error = StorageIOError(f"Error saving to {self._file_path}: {exc}")
            logger.error("%s", error)
            return StorageResult.failed(error)

        logger.info("Saved %d records to %s", len(records), self._file_path)
        return StorageResult(StorageStatus.SAVED)

    def load_from_file(self) -> StorageResult:
        if not self._file_path.exists():
            logger.info("File %s not found, keeping current log", self._file_path)
            return StorageResult(StorageStatus.NOT_FOUND)

        try:
            with self._file_path.open("r", encoding="utf-8") as fh:
                text = fh.read()
        except UnicodeDecodeError as exc:
            error = DeserializationError(f"File is not valid UTF-8: {exc}")
            logger.error("Error deserializing %s: %s", self._file_path, error)
            return StorageResult.failed(error)
        except OSError as exc:
            error = StorageIOError(f"Error reading {self._file_path}: {exc}")
            logger.error("%s", error)
            return StorageResult.failed(error)

        if not text.strip():
            logger.info("File %s is empty, keeping current log", self._file_path)
            return StorageResult(StorageStatus.EMPTY)

        try:
            items = self._parse(text)
        except DeserializationError as exc:
            logger.error("Error deserializing %s: %s", self._file_path, exc)
            return StorageResult.failed(exc)

        if items is None:
            logger.info("File %s holds no records, keeping current log", self._file_path)
            return StorageResult(StorageStatus.EMPTY)

        self._log = items
        logger.info("Loaded %d records from %s", len(items), self._file_path)
        return StorageResult(StorageStatus.LOADED)

    # --- Serialization --------------------------------------------------------

    def _parse(self, text: str) -> list[T] | None:
        """Decode the whole file before anything is replaced."""
        try:
            raw = json.loads(text)
        except (json.JSONDecodeError, RecursionError) as exc:
            raise DeserializationError(f"Invalid JSON: {exc}") from exc

        if raw is None:
            return None
        if not isinstance(raw, list):
            raise DeserializationError(
                f"Expected a JSON array, got {type(raw).__name__}"
            )
        return [self._codec.to_domain(record) for record in raw]

    # --- File helpers ---------------------------------------------------------

    def _write_atomic(self, payload: str) -> None:
        directory = self._file_path.parent
        directory.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(
            dir=directory, prefix=f".{self._file_path.name}.", suffix=".tmp"
        )
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as fh:
                fh.write(payload)
                fh.flush()
                os.fsync(fh.fileno())
            os.replace(tmp_name, self._file_path)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise
