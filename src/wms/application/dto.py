"""Data Transfer Objects — plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class StockLineDTO:
    """Output: a single stock entry as displayed to the user."""

    id: int
    name: str
    quantity: int
    details: dict[str, str]  # type-specific fields, formatted
