"""Product aggregate.

A product belongs to exactly one category. Its name only has to be unique
inside that category, so "Hammer" may exist under both "Tools" and
"Gifts".
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date


@dataclass
class Product:
    """A product in the catalog.

    ``date_added`` is stamped once at creation and never changes.
    ``category_name`` is filled in by repositories for display purposes
    only; it is not persisted with the product.
    """

    id: int | None
    name: str
    category_id: int
    date_added: date
    category_name: str | None = None

    def move_to(self, category_id: int) -> None:
        self.category_id = category_id
        self.category_name = None

    def rename(self, new_name: str) -> None:
        self.name = new_name
