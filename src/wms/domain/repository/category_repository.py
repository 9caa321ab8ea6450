"""Abstract repository for Category aggregate."""

from __future__ import annotations

from abc import ABC, abstractmethod

from wms.domain.model.category import Category


class CategoryRepository(ABC):

    @abstractmethod
    def count(self) -> int:
        """Return the number of categories."""

    @abstractmethod
    def list_page(self, skip: int, take: int) -> list[Category]:
        """Return up to *take* categories ordered by id, after skipping *skip*."""

    @abstractmethod
    def get_by_id(self, category_id: int) -> Category | None:
        """Return a category by its ID, or None if not found."""

    @abstractmethod
    def exists(self, category_id: int) -> bool:
        """Return True if a category with this ID exists."""

    @abstractmethod
    def name_exists(self, name: str, exclude_id: int | None = None) -> bool:
        """Return True if another category already uses *name* (exact match)."""

    @abstractmethod
    def add(self, category: Category) -> Category:
        """Insert a new category and return it with its assigned ID."""

    @abstractmethod
    def update(self, category: Category) -> Category:
        """Persist changes to an existing category."""

    @abstractmethod
    def delete(self, category_id: int) -> None:
        """Remove a category."""
