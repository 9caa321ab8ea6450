import click

from wms.infrastructure.cli.db_commands import db_init
from wms.infrastructure.cli.person_commands import (
    person_add,
    person_count,
    person_delete,
    person_list,
    person_search,
    person_seed,
    person_show,
    person_update,
)
from wms.infrastructure.config import get_settings
from wms.infrastructure.logging_config import configure_logging


@click.group()
@click.option("--log-level", default=None, help="Override WMS_LOG_LEVEL.")
def cli(log_level: str | None) -> None:
    """WMS — Warehouse Management System"""
    try:
        settings = get_settings()
    except ValueError as exc:
        raise click.ClickException(str(exc))
    configure_logging((log_level or settings.log_level).upper())


@cli.group()
def person() -> None:
    """Manage people."""


@cli.group()
def db() -> None:
    """Manage the database."""


@cli.command("serve")
@click.option("--host", default="127.0.0.1", show_default=True)
@click.option("--port", default=8000, show_default=True, type=int)
def serve(host: str, port: int) -> None:
    """Run the HTTP API."""
    import uvicorn

    uvicorn.run("wms.infrastructure.api.app:create_app", factory=True, host=host, port=port)


# Register subcommands
person.add_command(person_add)
person.add_command(person_count)
person.add_command(person_delete)
person.add_command(person_list)
person.add_command(person_search)
person.add_command(person_seed)
person.add_command(person_show)
person.add_command(person_update)
db.add_command(db_init)
