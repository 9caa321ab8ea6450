"""SQLAlchemy-session-backed implementation of CategoryRepository."""

from __future__ import annotations

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from wms.domain.exceptions import DependencyError, EntityNotFoundError
from wms.domain.model.category import Category
from wms.domain.repository.category_repository import CategoryRepository
from wms.infrastructure.persistence.errors import translate_errors
from wms.infrastructure.persistence.orm import CategoryRow


class SqlAlchemyCategoryRepository(CategoryRepository):

    def __init__(self, session: Session) -> None:
        self._session = session

    # --- CategoryRepository interface -----------------------------------------

    @translate_errors()
    def count(self) -> int:
        return self._session.scalar(select(func.count()).select_from(CategoryRow)) or 0

    @translate_errors()
    def list_page(self, skip: int, take: int) -> list[Category]:
        rows = self._session.scalars(
            select(CategoryRow)
            .order_by(CategoryRow.id)
            .offset(skip)
            .limit(take)
            .execution_options(populate_existing=True)
        )
        return [self._to_domain(row) for row in rows]

    @translate_errors()
    def get_by_id(self, category_id: int) -> Category | None:
        row = self._session.get(CategoryRow, category_id, populate_existing=True)
        return self._to_domain(row) if row is not None else None

    @translate_errors()
    def exists(self, category_id: int) -> bool:
        query = select(CategoryRow.id).where(CategoryRow.id == category_id)
        return self._session.scalar(query) is not None

    @translate_errors()
    def name_exists(self, name: str, exclude_id: int | None = None) -> bool:
        query = select(CategoryRow.id).where(CategoryRow.name == name)
        if exclude_id is not None:
            query = query.where(CategoryRow.id != exclude_id)
        return self._session.scalar(query.limit(1)) is not None

    @translate_errors(message="A category with this name already exists")
    def add(self, category: Category) -> Category:
        row = CategoryRow(name=category.name)
        self._session.add(row)
        self._session.commit()
        category.id = row.id
        return category

    @translate_errors(message="A category with this name already exists")
    def update(self, category: Category) -> Category:
        row = self._session.get(CategoryRow, category.id, populate_existing=True)
        if row is None:
            raise EntityNotFoundError(f"Category with ID {category.id} not found")
        row.name = category.name
        self._session.commit()
        return category

    @translate_errors(
        integrity_error=DependencyError,
        message="Category still contains products",
    )
    def delete(self, category_id: int) -> None:
        row = self._session.get(CategoryRow, category_id, populate_existing=True)
        if row is None:
            return
        self._session.delete(row)
        self._session.commit()

    # --- Mapping --------------------------------------------------------------

    @staticmethod
    def _to_domain(row: CategoryRow) -> Category:
        return Category(id=row.id, name=row.name)
