"""Request-scoped FastAPI dependencies."""

from typing import Iterator

from fastapi import Depends
from sqlalchemy.orm import Session

from wms.application.category_service import CategoryService
from wms.application.product_service import ProductService
from wms.infrastructure import bootstrap


def get_session() -> Iterator[Session]:
    """One ORM session per request, closed once the response is produced."""
    session = bootstrap.session_factory()()
    try:
        yield session
    finally:
        session.close()


def get_category_service(session: Session = Depends(get_session)) -> CategoryService:
    return bootstrap.category_service(session)


def get_product_service(session: Session = Depends(get_session)) -> ProductService:
    return bootstrap.product_service(session)
