"""SQLAlchemy engine, session factory and declarative base."""

from __future__ import annotations

import logging

from sqlalchemy import Engine, create_engine, event
from sqlalchemy.orm import declarative_base, sessionmaker

logger = logging.getLogger(__name__)

Base = declarative_base()


def make_engine(db_url: str, echo: bool = False, **kwargs) -> Engine:
    """Create an engine for *db_url*.

    SQLite connections get foreign-key enforcement switched on, which the
    driver leaves off by default.
    """
    connect_args = kwargs.pop("connect_args", {})
    is_sqlite = db_url.startswith("sqlite")
    if is_sqlite:
        # FastAPI runs sync endpoints on a thread pool
        connect_args.setdefault("check_same_thread", False)

    engine = create_engine(db_url, echo=echo, connect_args=connect_args, **kwargs)

    if is_sqlite:

        @event.listens_for(engine, "connect")
        def _enable_foreign_keys(dbapi_connection, _record) -> None:
            cursor = dbapi_connection.cursor()
            cursor.execute("PRAGMA foreign_keys=ON")
            cursor.close()

    return engine


LIKE_ESCAPE = "\\"


def contains_pattern(term: str) -> str:
    """LIKE pattern matching lowercased *term* anywhere, wildcards taken literally."""
    escaped = (
        term.lower()
        .replace(LIKE_ESCAPE, LIKE_ESCAPE * 2)
        .replace("%", LIKE_ESCAPE + "%")
        .replace("_", LIKE_ESCAPE + "_")
    )
    return f"%{escaped}%"


def make_sessionmaker(engine: Engine) -> sessionmaker:
    # Objects stay readable after commit; repositories map them to domain
    # objects before the session closes anyway.
    return sessionmaker(
        bind=engine,
        autoflush=False,
        expire_on_commit=False,
    )


def create_schema(engine: Engine) -> None:
    """Create every table that does not exist yet."""
    # Registers the mapped classes on Base.metadata
    from wms.infrastructure.persistence import orm  # noqa: F401

    Base.metadata.create_all(bind=engine)
    logger.info("Schema ready on %s", engine.url.render_as_string(hide_password=True))
