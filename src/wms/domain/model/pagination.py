"""Pagination value objects.

Every list operation goes through :func:`paginate`. Out-of-range input is
clamped, never rejected: a page below 1 becomes 1, a page size outside
``[MIN_PAGE_SIZE, MAX_PAGE_SIZE]`` is pulled back to the nearest bound. A
page beyond the last one is legal and simply yields no data.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Generic, TypeVar

DEFAULT_PAGE_SIZE = 10
MAX_PAGE_SIZE = 100
MIN_PAGE_NUMBER = 1
MIN_PAGE_SIZE = 1
# Largest page number an adapter accepts; keeps the row offset within 64 bits
MAX_PAGE_NUMBER = 2**31 - 1

T = TypeVar("T")


@dataclass(frozen=True)
class Pagination:
    """The normalised retrieval window for one page."""

    page: int
    page_size: int
    total_count: int

    @property
    def skip(self) -> int:
        return (self.page - 1) * self.page_size

    @property
    def take(self) -> int:
        return self.page_size

    @property
    def total_pages(self) -> int:
        return math.ceil(self.total_count / self.page_size)

    @property
    def has_next_page(self) -> bool:
        return self.page < self.total_pages

    @property
    def has_previous_page(self) -> bool:
        return self.page > 1


@dataclass(frozen=True)
class Page(Generic[T]):
    """One page of results plus the metadata clients need to navigate."""

    data: list[T]
    current_page: int
    page_size: int
    total_count: int
    total_pages: int
    has_next_page: bool
    has_previous_page: bool

    @staticmethod
    def of(data: list[T], pagination: Pagination) -> Page[T]:
        return Page(
            data=data,
            current_page=pagination.page,
            page_size=pagination.page_size,
            total_count=pagination.total_count,
            total_pages=pagination.total_pages,
            has_next_page=pagination.has_next_page,
            has_previous_page=pagination.has_previous_page,
        )


def clamp_page(page: int) -> int:
    return max(page, MIN_PAGE_NUMBER)


def clamp_page_size(page_size: int) -> int:
    return min(max(page_size, MIN_PAGE_SIZE), MAX_PAGE_SIZE)


def paginate(page: int, page_size: int, total_count: int) -> Pagination:
    """Normalise the requested page and size against *total_count*."""
    if total_count < 0:
        raise ValueError("total_count cannot be negative")
    return Pagination(
        page=clamp_page(page),
        page_size=clamp_page_size(page_size),
        total_count=total_count,
    )
