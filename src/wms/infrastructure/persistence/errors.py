"""Translation of SQLAlchemy failures into domain exceptions.

A unique or foreign-key violation raised at write time means another
caller got there first; it becomes the same domain outcome the pre-write
checks would have produced. Anything else is an unclassified
StorageError. The session, if any, is rolled back so no half-applied
change survives.
"""

from __future__ import annotations

import functools
import logging
from typing import Callable, TypeVar

from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from wms.domain.exceptions import ConflictError, DomainException, StorageError

logger = logging.getLogger(__name__)

F = TypeVar("F", bound=Callable)


def translate_errors(
    integrity_error: type[DomainException] = ConflictError,
    message: str = "The change conflicts with existing data",
) -> Callable[[F], F]:
    """Decorate a repository method so it only ever raises domain errors."""

    def decorator(fn: F) -> F:
        @functools.wraps(fn)
        def wrapper(self, *args, **kwargs):
            try:
                return fn(self, *args, **kwargs)
            except IntegrityError as exc:
                _rollback(self)
                logger.warning("%s rejected by storage: %s", fn.__qualname__, exc.orig)
                raise integrity_error(message) from exc
            except SQLAlchemyError as exc:
                _rollback(self)
                logger.error("%s failed: %s", fn.__qualname__, exc)
                raise StorageError(f"Storage failure in {fn.__name__}") from exc

        return wrapper  # type: ignore[return-value]

    return decorator


def _rollback(repo) -> None:
    session = getattr(repo, "_session", None)
    if session is not None:
        session.rollback()
