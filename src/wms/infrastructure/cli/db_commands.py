"""CLI commands for database housekeeping."""

from __future__ import annotations

import click

from wms.infrastructure.bootstrap import engine
from wms.infrastructure.persistence.database import create_schema


@click.command("init")
def db_init() -> None:
    """Create all tables that do not exist yet."""
    create_schema(engine())
    click.echo("Database schema created.")
