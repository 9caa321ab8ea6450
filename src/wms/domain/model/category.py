"""Category aggregate."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Category:
    """A product category. Names are unique across all categories."""

    id: int | None
    name: str

    def rename(self, new_name: str) -> None:
        self.name = new_name
