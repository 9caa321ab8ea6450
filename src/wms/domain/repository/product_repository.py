"""Abstract repository for Product aggregate.

Defined in the domain layer so the domain never depends on
infrastructure. Concrete implementations (SQLAlchemy, in-memory)
live in the infrastructure layer and in the test fakes.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from wms.domain.model.product import Product


class ProductRepository(ABC):

    @abstractmethod
    def count(self, category_id: int | None = None) -> int:
        """Return the number of products, optionally within one category."""

    @abstractmethod
    def list_page(
        self, skip: int, take: int, category_id: int | None = None
    ) -> list[Product]:
        """Return a window of products ordered by id, optionally filtered."""

    @abstractmethod
    def get_by_id(self, product_id: int) -> Product | None:
        """Return a product by its ID, or None if not found."""

    @abstractmethod
    def name_exists_in_category(
        self, name: str, category_id: int, exclude_id: int | None = None
    ) -> bool:
        """Return True if another product in *category_id* uses *name*."""

    @abstractmethod
    def add(self, product: Product) -> Product:
        """Insert a new product and return it with its assigned ID."""

    @abstractmethod
    def update(self, product: Product) -> Product:
        """Persist changes to an existing product."""

    @abstractmethod
    def delete(self, product_id: int) -> None:
        """Remove a product."""
