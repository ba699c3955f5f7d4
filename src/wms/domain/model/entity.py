"""Identity contract shared by every record kept in a store.

Stores are generic over the entity type. Any frozen dataclass that declares
an integer ``id`` field satisfies the contract; the check happens once, when
a store is constructed for that type.
"""

from __future__ import annotations

import dataclasses
from typing import Protocol, runtime_checkable

from wms.domain.exceptions import InvalidArgumentError, InvalidValueError


@runtime_checkable
class Entity(Protocol):
    """Anything with a stable, caller-assigned integer identity."""

    @property
    def id(self) -> int: ...


def field_names(entity_type: type) -> tuple[str, ...]:
    return tuple(f.name for f in dataclasses.fields(entity_type))


def require_entity_type(entity_type: type) -> None:
    """Reject types that cannot be stored.

    Raises TypeError because a bad entity type is a programming error,
    not a runtime condition callers are expected to handle.
    """
    if not isinstance(entity_type, type) or not dataclasses.is_dataclass(entity_type):
        raise TypeError(f"{entity_type!r} is not a dataclass type")
    params = getattr(entity_type, "__dataclass_params__")
    if not params.frozen:
        raise TypeError(f"{entity_type.__name__} must be a frozen dataclass")
    if "id" not in field_names(entity_type):
        raise TypeError(f"{entity_type.__name__} does not declare an 'id' field")


def require_instance(item: object, entity_type: type) -> None:
    if item is None:
        raise InvalidArgumentError(f"{entity_type.__name__} is required")
    if not isinstance(item, entity_type):
        raise InvalidArgumentError(
            f"Expected {entity_type.__name__}, got {type(item).__name__}"
        )


# --- Construction-time checks used by concrete entities ----------------------


def check_id(value: object) -> None:
    if not isinstance(value, int) or isinstance(value, bool):
        raise InvalidArgumentError(
            f"ID must be an integer, got {type(value).__name__}"
        )


def check_required_text(value: object, label: str) -> None:
    if not isinstance(value, str) or not value.strip():
        raise InvalidArgumentError(f"{label} is required")


def check_quantity(value: object) -> None:
    if not isinstance(value, int) or isinstance(value, bool):
        raise InvalidValueError(
            f"Quantity must be an integer, got {type(value).__name__}"
        )
    if value < 0:
        raise InvalidValueError(f"Quantity cannot be negative, got {value}")
