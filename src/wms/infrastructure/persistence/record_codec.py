"""Field-by-name mapping between entity dataclasses and JSON records.

Only scalar fields (SUPPORTED_TYPES) can be stored; an entity type with
any other field is rejected when the codec is built. Dates and datetimes
are written as ISO-8601 strings and parsed back using the dataclass type
hints. Fields a record has but the entity type does not declare are
ignored, so files written by newer versions still load.
"""

from __future__ import annotations

import dataclasses
import typing
from datetime import date, datetime
from typing import Any, Generic, TypeVar

from wms.domain.exceptions import DeserializationError, ValidationError
from wms.domain.model.entity import require_entity_type

T = TypeVar("T")

# Field types that survive a JSON round trip unchanged (dates as ISO text)
SUPPORTED_TYPES = (int, str, float, bool, date, datetime)


class RecordCodec(Generic[T]):

    def __init__(self, entity_type: type[T]) -> None:
        require_entity_type(entity_type)
        self._entity_type = entity_type
        self._hints = typing.get_type_hints(entity_type)
        self._fields = [f.name for f in dataclasses.fields(entity_type)]
        for name in self._fields:
            hint = self._hints.get(name)
            if hint not in SUPPORTED_TYPES:
                raise TypeError(
                    f"{entity_type.__name__}.{name} has unsupported type {hint!r}"
                )

    # --- Serialization --------------------------------------------------------

    def to_raw(self, item: T) -> dict[str, Any]:
        raw: dict[str, Any] = {}
        for name in self._fields:
            value = getattr(item, name)
            if isinstance(value, date):
                value = value.isoformat()
            raw[name] = value
        return raw

    def to_domain(self, raw: Any) -> T:
        if not isinstance(raw, dict):
            raise DeserializationError(
                f"Expected an object, got {type(raw).__name__}"
            )
        kwargs: dict[str, Any] = {}
        for name in self._fields:
            if name not in raw:
                raise DeserializationError(f"Record is missing field '{name}'")
            kwargs[name] = self._parse(name, raw[name])
        try:
            return self._entity_type(**kwargs)
        except ValidationError as exc:
            raise DeserializationError(f"Invalid record: {exc}") from exc

    # --- Internal helpers -----------------------------------------------------

    def _parse(self, name: str, value: Any) -> Any:
        hint = self._hints.get(name)
        try:
            # datetime first: it is a subclass of date
            if hint is datetime:
                return datetime.fromisoformat(value)
            if hint is date:
                return date.fromisoformat(value)
        except (TypeError, ValueError) as exc:
            raise DeserializationError(
                f"Field '{name}' is not a valid ISO date: {value!r}"
            ) from exc
        return value
