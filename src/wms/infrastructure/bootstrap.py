"""Composition root — wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

import os
from pathlib import Path

from wms.application.warehouse_manager import WarehouseManager
from wms.domain.model.inventory import InventoryRecord
from wms.domain.model.items import ElectronicItem, GroceryItem
from wms.infrastructure.persistence.json_inventory_log import JsonInventoryLog
from wms.infrastructure.persistence.memory_inventory_repository import (
    InMemoryInventoryRepository,
)

DATA_DIR_ENV = "WMS_DATA_DIR"
INVENTORY_FILE = "inventory.json"

# Resolve data directory relative to the project root.
# When installed in editable mode the project root is the repo root.
_DEFAULT_DATA_DIR = Path(__file__).resolve().parents[3] / "data"


def data_dir() -> Path:
    override = os.environ.get(DATA_DIR_ENV)
    return Path(override) if override else _DEFAULT_DATA_DIR


def inventory_log() -> JsonInventoryLog[InventoryRecord]:
    return JsonInventoryLog(data_dir() / INVENTORY_FILE, InventoryRecord)


def warehouse_manager() -> WarehouseManager:
    return WarehouseManager(
        electronics=InMemoryInventoryRepository(ElectronicItem),
        groceries=InMemoryInventoryRepository(GroceryItem),
    )
