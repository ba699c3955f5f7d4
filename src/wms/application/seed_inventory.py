"""Application service: Seed Inventory use case."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

from wms.domain.model.inventory import InventoryRecord
from wms.domain.repository.inventory_log import InventoryLog

# (name, quantity, days ago)
SAMPLE_RECORDS = [
    ("Laptop stand", 10, 10),
    ("RAM Chips", 25, 5),
    ("Monitor", 10, 2),
    ("Laptop cover", 8, 1),
    ("Keyboard", 12, 0),
]


class SeedInventoryHandler:

    def __init__(self, log: InventoryLog[InventoryRecord]) -> None:
        self._log = log

    def handle(self, now: datetime | None = None) -> int:
        """Append the sample records (IDs 1..N) and return how many were added."""
        now = now or datetime.now(timezone.utc)
        for index, (name, quantity, days_ago) in enumerate(SAMPLE_RECORDS, start=1):
            self._log.add(
                InventoryRecord(
                    id=index,
                    name=name,
                    quantity=quantity,
                    date_added=now - timedelta(days=days_ago),
                )
            )
        return len(SAMPLE_RECORDS)
