"""Application service: Show Stock use case (query).

Works for any source with a ``list_all()`` — a keyed repository or the
inventory log.
"""

from __future__ import annotations

import dataclasses
from datetime import date, datetime
from typing import Any, Protocol

from wms.application.dto import StockLineDTO

_CORE_FIELDS = ("id", "name", "quantity")


class StockSource(Protocol):

    def list_all(self) -> list[Any]: ...


class ShowStockHandler:

    def __init__(self, source: StockSource) -> None:
        self._source = source

    def handle(self) -> list[StockLineDTO]:
        return [self._to_dto(item) for item in self._source.list_all()]

    @staticmethod
    def _to_dto(item: Any) -> StockLineDTO:
        details = {
            f.name: _format(getattr(item, f.name))
            for f in dataclasses.fields(item)
            if f.name not in _CORE_FIELDS
        }
        return StockLineDTO(
            id=item.id,
            name=item.name,
            quantity=item.quantity,
            details=details,
        )


def _format(value: Any) -> str:
    if isinstance(value, datetime):
        return value.strftime("%Y-%m-%d %H:%M")
    if isinstance(value, date):
        return value.isoformat()
    return str(value)
