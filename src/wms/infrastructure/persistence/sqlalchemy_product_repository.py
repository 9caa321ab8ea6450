"""SQLAlchemy-session-backed implementation of ProductRepository."""

from __future__ import annotations

from sqlalchemy import Select, func, select
from sqlalchemy.orm import Session

from wms.domain.exceptions import DependencyError, EntityNotFoundError
from wms.domain.model.product import Product
from wms.domain.repository.product_repository import ProductRepository
from wms.infrastructure.persistence.errors import translate_errors
from wms.infrastructure.persistence.orm import ProductRow

_DUPLICATE = "A product with this name already exists in this category"


class SqlAlchemyProductRepository(ProductRepository):

    def __init__(self, session: Session) -> None:
        self._session = session

    # --- ProductRepository interface ------------------------------------------

    @translate_errors()
    def count(self, category_id: int | None = None) -> int:
        query = select(func.count()).select_from(ProductRow)
        return self._session.scalar(self._in_category(query, category_id)) or 0

    @translate_errors()
    def list_page(
        self, skip: int, take: int, category_id: int | None = None
    ) -> list[Product]:
        query = self._in_category(select(ProductRow), category_id)
        rows = self._session.scalars(
            query.order_by(ProductRow.id)
            .offset(skip)
            .limit(take)
            .execution_options(populate_existing=True)
        ).unique()
        return [self._to_domain(row) for row in rows]

    @translate_errors()
    def get_by_id(self, product_id: int) -> Product | None:
        row = self._session.get(ProductRow, product_id, populate_existing=True)
        return self._to_domain(row) if row is not None else None

    @translate_errors()
    def name_exists_in_category(
        self, name: str, category_id: int, exclude_id: int | None = None
    ) -> bool:
        query = select(ProductRow.id).where(
            ProductRow.name == name, ProductRow.category_id == category_id
        )
        if exclude_id is not None:
            query = query.where(ProductRow.id != exclude_id)
        return self._session.scalar(query.limit(1)) is not None

    @translate_errors(message=_DUPLICATE)
    def add(self, product: Product) -> Product:
        row = ProductRow(
            name=product.name,
            category_id=product.category_id,
            date_added=product.date_added,
        )
        self._session.add(row)
        self._session.commit()
        product.id = row.id
        return product

    @translate_errors(message=_DUPLICATE)
    def update(self, product: Product) -> Product:
        row = self._session.get(ProductRow, product.id, populate_existing=True)
        if row is None:
            raise EntityNotFoundError(f"Product with ID {product.id} not found")
        row.name = product.name
        row.category_id = product.category_id
        self._session.commit()
        # The category may have changed underneath the loaded relationship
        self._session.refresh(row, ["category"])
        return self._to_domain(row)

    @translate_errors(
        integrity_error=DependencyError,
        message="Product is still referenced by stock records",
    )
    def delete(self, product_id: int) -> None:
        row = self._session.get(ProductRow, product_id, populate_existing=True)
        if row is None:
            return
        self._session.delete(row)
        self._session.commit()

    # --- Helpers --------------------------------------------------------------

    @staticmethod
    def _in_category(query: Select, category_id: int | None) -> Select:
        if category_id is None:
            return query
        return query.where(ProductRow.category_id == category_id)

    @staticmethod
    def _to_domain(row: ProductRow) -> Product:
        return Product(
            id=row.id,
            name=row.name,
            category_id=row.category_id,
            date_added=row.date_added,
            category_name=row.category.name if row.category is not None else None,
        )
