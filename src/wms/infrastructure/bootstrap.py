"""Composition root — wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions, and services receive
their repositories explicitly.
"""

from __future__ import annotations

import enum
from contextlib import contextmanager
from functools import lru_cache
from typing import Iterator

from sqlalchemy import Engine
from sqlalchemy.orm import Session, sessionmaker

from wms.application.category_service import CategoryService
from wms.application.person_service import PersonService
from wms.application.product_service import ProductService
from wms.infrastructure.config import get_settings
from wms.infrastructure.persistence.database import make_engine, make_sessionmaker
from wms.infrastructure.persistence.sql_person_repository import SqlPersonRepository
from wms.infrastructure.persistence.sqlalchemy_category_repository import (
    SqlAlchemyCategoryRepository,
)
from wms.infrastructure.persistence.sqlalchemy_person_repository import (
    SqlAlchemyPersonRepository,
)
from wms.infrastructure.persistence.sqlalchemy_product_repository import (
    SqlAlchemyProductRepository,
)


class Backend(enum.Enum):
    """Data-access path for Person operations."""

    ORM = "orm"
    SQL = "sql"


@lru_cache(maxsize=1)
def engine() -> Engine:
    settings = get_settings()
    return make_engine(settings.database_url, echo=settings.sql_echo)


@lru_cache(maxsize=1)
def session_factory() -> sessionmaker:
    return make_sessionmaker(engine())


def reset() -> None:
    """Drop cached engine and settings so new environment values apply."""
    if engine.cache_info().currsize:
        engine().dispose()
    session_factory.cache_clear()
    engine.cache_clear()
    get_settings.cache_clear()


def category_service(session: Session) -> CategoryService:
    return CategoryService(
        category_repo=SqlAlchemyCategoryRepository(session),
        product_repo=SqlAlchemyProductRepository(session),
    )


def product_service(session: Session) -> ProductService:
    return ProductService(
        product_repo=SqlAlchemyProductRepository(session),
        category_repo=SqlAlchemyCategoryRepository(session),
    )


@contextmanager
def person_service(backend: Backend) -> Iterator[PersonService]:
    """Yield a PersonService over the requested backend.

    The ORM backend owns a session for the duration of the block; the SQL
    backend opens a connection per statement and needs no cleanup.
    """
    if backend is Backend.SQL:
        yield PersonService(SqlPersonRepository(engine()))
        return

    with session_factory()() as session:
        yield PersonService(SqlAlchemyPersonRepository(session))
