"""Data Transfer Objects — plain containers that cross layer boundaries.

DTOs carry data between the adapters (HTTP, console) and the application
services without exposing domain internals to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date

from wms.domain.model.value_objects import UNSET, Maybe


@dataclass(frozen=True)
class CategoryDTO:
    """Output: a category as returned to clients."""

    id: int
    name: str


@dataclass(frozen=True)
class ProductDTO:
    """Output: a product with its category name resolved for display."""

    id: int
    name: str
    category_id: int
    category_name: str | None
    date_added: date


@dataclass(frozen=True)
class ProductCreate:
    """Input: a new product."""

    name: str
    category_id: int


@dataclass(frozen=True)
class ProductUpdate:
    """Input: a partial product update. UNSET fields keep their value."""

    name: Maybe[str] = UNSET
    category_id: Maybe[int] = UNSET


@dataclass(frozen=True)
class PersonUpdate:
    """Input: a partial person update.

    UNSET leaves a field unchanged. ``position=None`` clears the position;
    the names cannot be cleared.
    """

    first_name: Maybe[str] = UNSET
    last_name: Maybe[str] = UNSET
    position: Maybe[str | None] = UNSET
