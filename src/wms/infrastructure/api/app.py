"""FastAPI application factory.

Services raise domain exceptions; this module is the single place that
turns them into HTTP status codes and ``{"message": ...}`` bodies.
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from wms.domain.exceptions import (
    ConflictError,
    DependencyError,
    DomainException,
    EntityNotFoundError,
    StorageError,
    ValidationError,
)
from wms.infrastructure.api import categories, products
from wms.infrastructure.config import get_settings
from wms.infrastructure.logging_config import configure_logging

API_PREFIX = "/api"

logger = logging.getLogger(__name__)

_STATUS_BY_ERROR: dict[type[DomainException], int] = {
    ValidationError: status.HTTP_400_BAD_REQUEST,
    EntityNotFoundError: status.HTTP_404_NOT_FOUND,
    ConflictError: status.HTTP_409_CONFLICT,
    DependencyError: status.HTTP_400_BAD_REQUEST,
    StorageError: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


def status_for(exc: DomainException) -> int:
    for error_type, code in _STATUS_BY_ERROR.items():
        if isinstance(exc, error_type):
            return code
    return status.HTTP_500_INTERNAL_SERVER_ERROR


async def _domain_error_handler(request: Request, exc: DomainException) -> JSONResponse:
    code = status_for(exc)
    if code >= 500:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc)
        message = "Internal storage error"
    else:
        logger.warning("%s %s rejected (%d): %s", request.method, request.url.path, code, exc)
        message = str(exc)
    return JSONResponse(status_code=code, content={"message": message})


async def _request_validation_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    # Malformed bodies are a client error like any other ValidationError
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"message": "Invalid request", "errors": jsonable_encoder(exc.errors())},
    )


def create_app() -> FastAPI:
    configure_logging(get_settings().log_level)

    app = FastAPI(title="Warehouse Management API", version="1.0.0")
    app.include_router(categories.router, prefix=API_PREFIX)
    app.include_router(products.router, prefix=API_PREFIX)
    app.add_exception_handler(DomainException, _domain_error_handler)
    app.add_exception_handler(RequestValidationError, _request_validation_handler)
    return app
