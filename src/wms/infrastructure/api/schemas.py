"""HTTP request and response models.

Field names are snake_case in Python and camelCase on the wire.
"""

from datetime import date
from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from wms.application.dto import ProductCreate, ProductUpdate
from wms.domain.model.value_objects import UNSET
from wms.domain.service.validators import (
    CATEGORY_NAME_MAX_LENGTH,
    CATEGORY_NAME_MIN_LENGTH,
    PRODUCT_NAME_MAX_LENGTH,
    PRODUCT_NAME_MIN_LENGTH,
)

T = TypeVar("T")


class ApiModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


# --- Categories ---------------------------------------------------------------


class CategoryOut(ApiModel):
    id: int
    name: str


class CategoryIn(ApiModel):
    name: str = Field(
        min_length=CATEGORY_NAME_MIN_LENGTH, max_length=CATEGORY_NAME_MAX_LENGTH
    )


# --- Products -----------------------------------------------------------------


class ProductOut(ApiModel):
    id: int
    name: str
    category_id: int
    category_name: str | None = None
    date_added: date


class ProductCreateIn(ApiModel):
    name: str = Field(
        min_length=PRODUCT_NAME_MIN_LENGTH, max_length=PRODUCT_NAME_MAX_LENGTH
    )
    category_id: int = Field(ge=1)

    def to_command(self) -> ProductCreate:
        return ProductCreate(name=self.name, category_id=self.category_id)


class ProductUpdateIn(ApiModel):
    """Partial update; omitted or null fields keep their stored value."""

    name: str | None = Field(
        default=None,
        min_length=PRODUCT_NAME_MIN_LENGTH,
        max_length=PRODUCT_NAME_MAX_LENGTH,
    )
    category_id: int | None = Field(default=None, ge=1)

    def to_command(self) -> ProductUpdate:
        return ProductUpdate(
            name=self.name if self.name is not None else UNSET,
            category_id=self.category_id if self.category_id is not None else UNSET,
        )


# --- Pagination ---------------------------------------------------------------


class PageOut(ApiModel, Generic[T]):
    data: list[T]
    current_page: int
    page_size: int
    total_count: int
    total_pages: int
    has_next_page: bool
    has_previous_page: bool


class ErrorOut(BaseModel):
    message: str
