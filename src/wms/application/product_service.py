"""Application service: Product use cases.

Products are unique per ``(name, category_id)``. Updates are partial:
fields left UNSET keep their stored value, and the uniqueness check runs
against the effective post-update combination, excluding the product
itself.
"""

from __future__ import annotations

import logging
from datetime import date
from typing import Callable

from wms.application.dto import ProductCreate, ProductDTO, ProductUpdate
from wms.domain.exceptions import EntityNotFoundError
from wms.domain.model.pagination import DEFAULT_PAGE_SIZE, Page, paginate
from wms.domain.model.product import Product
from wms.domain.model.value_objects import is_set
from wms.domain.repository.category_repository import CategoryRepository
from wms.domain.repository.product_repository import ProductRepository
from wms.domain.service.validators import (
    CategoryValidator,
    ProductValidator,
    require_positive_id,
    validate_product_name,
)

logger = logging.getLogger(__name__)


class ProductService:

    def __init__(
        self,
        product_repo: ProductRepository,
        category_repo: CategoryRepository,
        today: Callable[[], date] = date.today,
    ) -> None:
        self._product_repo = product_repo
        self._categories = CategoryValidator(category_repo, product_repo)
        self._products = ProductValidator(product_repo)
        self._today = today

    # --- Queries --------------------------------------------------------------

    def list(self, page: int = 1, page_size: int = DEFAULT_PAGE_SIZE) -> Page[ProductDTO]:
        pagination = paginate(page, page_size, self._product_repo.count())
        products = self._product_repo.list_page(pagination.skip, pagination.take)
        return Page.of([self._to_dto(p) for p in products], pagination)

    def list_by_category(
        self,
        category_id: int,
        page: int = 1,
        page_size: int = DEFAULT_PAGE_SIZE,
    ) -> Page[ProductDTO]:
        self._categories.ensure_exists(category_id)

        total = self._product_repo.count(category_id=category_id)
        pagination = paginate(page, page_size, total)
        products = self._product_repo.list_page(
            pagination.skip, pagination.take, category_id=category_id
        )
        return Page.of([self._to_dto(p) for p in products], pagination)

    def get(self, product_id: int) -> ProductDTO:
        return self._to_dto(self._load(product_id))

    # --- Commands -------------------------------------------------------------

    def create(self, data: ProductCreate) -> ProductDTO:
        """Add a new product to a category.

        Steps:
        1. Validate the shape of the input (no storage access).
        2. Ensure the category exists.
        3. Ensure the name is free within that category.
        4. Persist with ``date_added`` set to today.
        """
        name = validate_product_name(data.name)
        category_id = require_positive_id(data.category_id, "Category ID")

        category = self._categories.ensure_exists(category_id)
        self._products.ensure_unique_in_category(name, category_id)

        product = self._product_repo.add(
            Product(
                id=None,
                name=name,
                category_id=category_id,
                date_added=self._today(),
            )
        )
        product.category_name = category.name
        logger.info(
            "Created product #%s '%s' in category #%s", product.id, name, category_id
        )
        return self._to_dto(product)

    def update(self, product_id: int, data: ProductUpdate) -> ProductDTO:
        """Apply a partial update.

        Only supplied fields are validated and overwritten. The category
        must exist if it changes; the effective name/category pair must
        stay unique.
        """
        new_name = validate_product_name(data.name) if is_set(data.name) else None
        new_category_id = (
            require_positive_id(data.category_id, "Category ID")
            if is_set(data.category_id)
            else None
        )

        product = self._load(product_id)
        name = new_name if new_name is not None else product.name
        category_id = new_category_id if new_category_id is not None else product.category_id

        if category_id != product.category_id:
            self._categories.ensure_exists(category_id)

        if (name, category_id) != (product.name, product.category_id):
            self._products.ensure_unique_in_category(
                name, category_id, exclude_id=product_id
            )

        if category_id != product.category_id:
            product.move_to(category_id)
        product.rename(name)

        product = self._product_repo.update(product)
        logger.info("Updated product #%s", product_id)
        return self._to_dto(product)

    def delete(self, product_id: int) -> None:
        self._load(product_id)
        self._product_repo.delete(product_id)
        logger.info("Deleted product #%s", product_id)

    # --- Helpers --------------------------------------------------------------

    def _load(self, product_id: int) -> Product:
        product = self._product_repo.get_by_id(product_id)
        if product is None:
            raise EntityNotFoundError(f"Product with ID {product_id} not found")
        return product

    @staticmethod
    def _to_dto(product: Product) -> ProductDTO:
        return ProductDTO(
            id=product.id,  # type: ignore[arg-type]
            name=product.name,
            category_id=product.category_id,
            category_name=product.category_name,
            date_added=product.date_added,
        )
