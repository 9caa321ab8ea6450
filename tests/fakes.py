"""In-memory fake repositories for testing.

These implement the same abstract interfaces as the SQLAlchemy and SQL
repositories but keep everything in a dict. No database, no side effects.
"""

from __future__ import annotations

from dataclasses import replace

from wms.domain.exceptions import EntityNotFoundError
from wms.domain.model.category import Category
from wms.domain.model.person import Person
from wms.domain.model.product import Product
from wms.domain.repository.category_repository import CategoryRepository
from wms.domain.repository.person_repository import PersonRepository
from wms.domain.repository.product_repository import ProductRepository


class FakeCategoryRepository(CategoryRepository):

    def __init__(self, categories: list[Category] | None = None) -> None:
        self._store: dict[int, Category] = {}
        self._next_id = 1
        for c in categories or []:
            self.add(c)

    def count(self) -> int:
        return len(self._store)

    def list_page(self, skip: int, take: int) -> list[Category]:
        ordered = sorted(self._store.values(), key=lambda c: c.id)
        return [replace(c) for c in ordered[skip:skip + take]]

    def get_by_id(self, category_id: int) -> Category | None:
        category = self._store.get(category_id)
        return replace(category) if category is not None else None

    def exists(self, category_id: int) -> bool:
        return category_id in self._store

    def name_exists(self, name: str, exclude_id: int | None = None) -> bool:
        return any(
            c.name == name and c.id != exclude_id for c in self._store.values()
        )

    def add(self, category: Category) -> Category:
        if category.id is None:
            category.id = self._next_id
        self._next_id = max(self._next_id, category.id) + 1
        self._store[category.id] = replace(category)
        return category

    def update(self, category: Category) -> Category:
        if category.id not in self._store:
            raise EntityNotFoundError(f"Category with ID {category.id} not found")
        self._store[category.id] = replace(category)
        return category

    def delete(self, category_id: int) -> None:
        self._store.pop(category_id, None)


class FakeProductRepository(ProductRepository):

    def __init__(
        self,
        categories: FakeCategoryRepository,
        products: list[Product] | None = None,
    ) -> None:
        self._categories = categories
        self._store: dict[int, Product] = {}
        self._next_id = 1
        for p in products or []:
            self.add(p)

    def count(self, category_id: int | None = None) -> int:
        return len(self._filtered(category_id))

    def list_page(
        self, skip: int, take: int, category_id: int | None = None
    ) -> list[Product]:
        ordered = sorted(self._filtered(category_id), key=lambda p: p.id)
        return [self._resolved(p) for p in ordered[skip:skip + take]]

    def get_by_id(self, product_id: int) -> Product | None:
        product = self._store.get(product_id)
        return self._resolved(product) if product is not None else None

    def name_exists_in_category(
        self, name: str, category_id: int, exclude_id: int | None = None
    ) -> bool:
        return any(
            p.name == name and p.category_id == category_id and p.id != exclude_id
            for p in self._store.values()
        )

    def add(self, product: Product) -> Product:
        if product.id is None:
            product.id = self._next_id
        self._next_id = max(self._next_id, product.id) + 1
        self._store[product.id] = replace(product, category_name=None)
        return product

    def update(self, product: Product) -> Product:
        if product.id not in self._store:
            raise EntityNotFoundError(f"Product with ID {product.id} not found")
        self._store[product.id] = replace(product, category_name=None)
        return self._resolved(product)

    def delete(self, product_id: int) -> None:
        self._store.pop(product_id, None)

    def _filtered(self, category_id: int | None) -> list[Product]:
        return [
            p for p in self._store.values()
            if category_id is None or p.category_id == category_id
        ]

    def _resolved(self, product: Product) -> Product:
        category = self._categories.get_by_id(product.category_id)
        return replace(product, category_name=category.name if category else None)


class FakePersonRepository(PersonRepository):

    def __init__(self, people: list[Person] | None = None) -> None:
        self._store: dict[int, Person] = {}
        self._next_id = 1
        for p in people or []:
            self.add(p)

    def list_all(self) -> list[Person]:
        ordered = sorted(
            self._store.values(), key=lambda p: (p.last_name, p.first_name, p.id)
        )
        return [replace(p) for p in ordered]

    def search(self, term: str) -> list[Person]:
        needle = term.lower()
        return [
            p for p in self.list_all()
            if any(needle in (field or "").lower()
                   for field in (p.first_name, p.last_name, p.position))
        ]

    def get_by_id(self, person_id: int) -> Person | None:
        person = self._store.get(person_id)
        return replace(person) if person is not None else None

    def count(self) -> int:
        return len(self._store)

    def add(self, person: Person) -> Person:
        person.id = self._next_id
        self._next_id += 1
        self._store[person.id] = replace(person)
        return person

    def update(self, person: Person) -> None:
        if person.id not in self._store:
            raise EntityNotFoundError(f"Person with ID {person.id} not found")
        self._store[person.id] = replace(person)

    def delete(self, person_id: int) -> None:
        self._store.pop(person_id, None)
