"""Application service: Category use cases.

List, get, create, update and delete. Every operation re-reads current
state from the repository before acting on it.
"""

from __future__ import annotations

import logging

from wms.application.dto import CategoryDTO
from wms.domain.exceptions import EntityNotFoundError
from wms.domain.model.category import Category
from wms.domain.model.pagination import DEFAULT_PAGE_SIZE, Page, paginate
from wms.domain.repository.category_repository import CategoryRepository
from wms.domain.repository.product_repository import ProductRepository
from wms.domain.service.validators import CategoryValidator, validate_category_name

logger = logging.getLogger(__name__)


class CategoryService:

    def __init__(
        self,
        category_repo: CategoryRepository,
        product_repo: ProductRepository,
        validator: CategoryValidator | None = None,
    ) -> None:
        self._category_repo = category_repo
        self._validator = validator or CategoryValidator(category_repo, product_repo)

    def list(self, page: int = 1, page_size: int = DEFAULT_PAGE_SIZE) -> Page[CategoryDTO]:
        pagination = paginate(page, page_size, self._category_repo.count())
        categories = self._category_repo.list_page(pagination.skip, pagination.take)
        return Page.of([self._to_dto(c) for c in categories], pagination)

    def get(self, category_id: int) -> CategoryDTO:
        category = self._category_repo.get_by_id(category_id)
        if category is None:
            raise EntityNotFoundError(f"Category with ID {category_id} not found")
        return self._to_dto(category)

    def create(self, name: str) -> CategoryDTO:
        name = validate_category_name(name)
        self._validator.ensure_name_available(name)

        category = self._category_repo.add(Category(id=None, name=name))
        logger.info("Created category #%s '%s'", category.id, category.name)
        return self._to_dto(category)

    def update(self, category_id: int, name: str) -> CategoryDTO:
        name = validate_category_name(name)
        category = self._validator.ensure_exists(category_id)

        # Only re-check uniqueness when the name actually changes
        if category.name != name:
            self._validator.ensure_name_available(name, exclude_id=category_id)

        category.rename(name)
        self._category_repo.update(category)
        logger.info("Updated category #%s to '%s'", category_id, name)
        return self._to_dto(category)

    def delete(self, category_id: int) -> None:
        self._validator.ensure_exists(category_id)
        self._validator.ensure_no_products(category_id)
        self._category_repo.delete(category_id)
        logger.info("Deleted category #%s", category_id)

    # --- Mapping --------------------------------------------------------------

    @staticmethod
    def _to_dto(category: Category) -> CategoryDTO:
        return CategoryDTO(id=category.id, name=category.name)  # type: ignore[arg-type]
