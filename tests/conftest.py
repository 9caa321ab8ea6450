"""Shared fixtures: a throwaway SQLite file per test."""

import pytest

from wms.infrastructure import bootstrap
from wms.infrastructure.persistence.database import (
    create_schema,
    make_engine,
    make_sessionmaker,
)


@pytest.fixture
def engine(tmp_path):
    # A file, not :memory:, so the per-statement SQL backend sees the same data
    engine = make_engine(f"sqlite:///{tmp_path / 'warehouse.db'}")
    create_schema(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session(engine):
    with make_sessionmaker(engine)() as session:
        yield session


@pytest.fixture
def configured_db(tmp_path, monkeypatch):
    """Point the composition root at a fresh database via the environment."""
    monkeypatch.setenv("WMS_DATABASE_URL", f"sqlite:///{tmp_path / 'app.db'}")
    monkeypatch.setenv("WMS_PERSON_BACKEND", "orm")
    bootstrap.reset()
    create_schema(bootstrap.engine())
    yield bootstrap.engine()
    bootstrap.reset()
