"""Domain service: entity validators.

Two kinds of checks live here:

* shape checks (required, length bounds, positive ids) are pure and run
  before any repository is touched;
* uniqueness and reference checks query the repositories and always read
  current state, never a cached copy.

Name comparisons are exact and case-sensitive, as stored.
"""

from __future__ import annotations

from wms.domain.exceptions import (
    ConflictError,
    DependencyError,
    EntityNotFoundError,
    ValidationError,
)
from wms.domain.model.category import Category
from wms.domain.repository.category_repository import CategoryRepository
from wms.domain.repository.product_repository import ProductRepository

CATEGORY_NAME_MIN_LENGTH = 2
CATEGORY_NAME_MAX_LENGTH = 100
PRODUCT_NAME_MIN_LENGTH = 2
PRODUCT_NAME_MAX_LENGTH = 150
PERSON_NAME_MAX_LENGTH = 50
POSITION_MAX_LENGTH = 100


# --- Shape checks -------------------------------------------------------------


def require_text(
    value: str | None,
    field: str,
    min_length: int = 1,
    max_length: int | None = None,
) -> str:
    """Return *value* unchanged if it is a non-blank string within bounds."""
    if value is None or not isinstance(value, str) or not value.strip():
        raise ValidationError(f"{field} is required")
    if len(value) < min_length or (max_length is not None and len(value) > max_length):
        if max_length is None:
            raise ValidationError(f"{field} must be at least {min_length} characters")
        raise ValidationError(
            f"{field} must be between {min_length} and {max_length} characters"
        )
    return value


def optional_text(value: str | None, field: str, max_length: int) -> str | None:
    if value is None:
        return None
    if len(value) > max_length:
        raise ValidationError(f"{field} must be at most {max_length} characters")
    return value


def require_positive_id(value: int | None, field: str) -> int:
    # bool is an int subclass; True must not pass as id 1
    if value is None or isinstance(value, bool) or not isinstance(value, int):
        raise ValidationError(f"{field} is required")
    if value < 1:
        raise ValidationError(f"{field} must be greater than 0")
    return value


def validate_category_name(name: str | None) -> str:
    return require_text(
        name, "Category name", CATEGORY_NAME_MIN_LENGTH, CATEGORY_NAME_MAX_LENGTH
    )


def validate_product_name(name: str | None) -> str:
    return require_text(
        name, "Product name", PRODUCT_NAME_MIN_LENGTH, PRODUCT_NAME_MAX_LENGTH
    )


def validate_person_names(
    first_name: str | None, last_name: str | None
) -> tuple[str, str]:
    return (
        require_text(first_name, "First name", max_length=PERSON_NAME_MAX_LENGTH),
        require_text(last_name, "Last name", max_length=PERSON_NAME_MAX_LENGTH),
    )


def validate_position(position: str | None) -> str | None:
    return optional_text(position, "Position", POSITION_MAX_LENGTH)


# --- Repository-backed checks -------------------------------------------------


class CategoryValidator:

    def __init__(
        self,
        category_repo: CategoryRepository,
        product_repo: ProductRepository,
    ) -> None:
        self._category_repo = category_repo
        self._product_repo = product_repo

    def ensure_exists(self, category_id: int) -> Category:
        category = self._category_repo.get_by_id(category_id)
        if category is None:
            raise EntityNotFoundError(f"Category with ID {category_id} not found")
        return category

    def ensure_name_available(self, name: str, exclude_id: int | None = None) -> None:
        if self._category_repo.name_exists(name, exclude_id=exclude_id):
            raise ConflictError(f"Category '{name}' already exists")

    def ensure_no_products(self, category_id: int) -> None:
        if self._product_repo.count(category_id=category_id) > 0:
            raise DependencyError(
                f"Category with ID {category_id} still contains products"
            )


class ProductValidator:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def ensure_unique_in_category(
        self, name: str, category_id: int, exclude_id: int | None = None
    ) -> None:
        if self._product_repo.name_exists_in_category(
            name, category_id, exclude_id=exclude_id
        ):
            raise ConflictError(
                f"Product '{name}' already exists in category {category_id}"
            )
