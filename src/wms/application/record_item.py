"""Application service: Record Item use case.

Appends a new InventoryRecord to the log with an auto-assigned ID.
"""

from __future__ import annotations

from datetime import datetime, timezone

from wms.domain.exceptions import ValidationError
from wms.domain.model.inventory import InventoryRecord
from wms.domain.repository.inventory_log import InventoryLog


class RecordItemHandler:

    def __init__(self, log: InventoryLog[InventoryRecord]) -> None:
        self._log = log

    def handle(
        self,
        name: str,
        quantity: int,
        date_added: datetime | None = None,
    ) -> InventoryRecord:
        """Record a new stock entry and return it."""
        if not name or not name.strip():
            raise ValidationError("Item name is required")

        # Auto-assign ID based on existing records
        all_records = self._log.list_all()
        if all_records:
            next_id = max(r.id for r in all_records) + 1
        else:
            next_id = 1

        record = InventoryRecord(
            id=next_id,
            name=name.strip(),
            quantity=quantity,
            date_added=date_added or datetime.now(timezone.utc),
        )
        self._log.add(record)
        return record
