"""CLI commands for the Person aggregate.

Every command takes ``--backend orm|sql`` to choose the data-access path;
both paths must produce the same result.
"""

from __future__ import annotations

import click

from wms.application.dto import PersonUpdate
from wms.domain.exceptions import DomainException
from wms.domain.model.person import Person
from wms.domain.model.value_objects import UNSET
from wms.infrastructure.bootstrap import Backend, person_service
from wms.infrastructure.config import BACKENDS, get_settings

_BACKEND_LABELS = {Backend.ORM: "ORM session", Backend.SQL: "plain SQL"}

backend_option = click.option(
    "--backend",
    type=click.Choice(BACKENDS),
    default=None,
    help="Data-access path (defaults to WMS_PERSON_BACKEND).",
)


def _resolve(backend: str | None) -> Backend:
    return Backend(backend or get_settings().person_backend)


def _display_person(person: Person) -> None:
    click.echo(f"   ID: {person.id}")
    click.echo(f"   First Name: {person.first_name}")
    click.echo(f"   Last Name: {person.last_name}")
    click.echo(f"   Position: {person.position or ''}")


@click.command("add")
@click.option("--first-name", required=True, help="First name.")
@click.option("--last-name", required=True, help="Last name.")
@click.option("--position", default=None, help="Job title.")
@backend_option
def person_add(first_name: str, last_name: str, position: str | None, backend: str | None) -> None:
    """Add a new person."""
    selected = _resolve(backend)
    try:
        with person_service(selected) as service:
            person = service.create(first_name, last_name, position)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Person added ({_BACKEND_LABELS[selected]})")
    _display_person(person)


@click.command("list")
@backend_option
def person_list(backend: str | None) -> None:
    """List all people."""
    try:
        with person_service(_resolve(backend)) as service:
            people = service.list_all()
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not people:
        click.echo("No people found.")
        return

    _print_table(people)
    click.echo()
    click.echo(f"Total people: {len(people)}")


@click.command("search")
@click.argument("term")
@backend_option
def person_search(term: str, backend: str | None) -> None:
    """Find people by name or position (case-insensitive)."""
    try:
        with person_service(_resolve(backend)) as service:
            people = service.search(term)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not people:
        click.echo(f"No people match '{term}'.")
        return

    _print_table(people)
    click.echo()
    click.echo(f"Matches: {len(people)}")


def _print_table(people: list[Person]) -> None:
    click.echo(f"{'ID':<4} | {'First Name':<15} | {'Last Name':<15} | {'Position':<30}")
    click.echo("-" * 70)
    for p in people:
        click.echo(
            f"{p.id:<4} | {p.first_name:<15} | {p.last_name:<15} | {p.position or '':<30}"
        )


@click.command("show")
@click.argument("person_id", type=int)
@backend_option
def person_show(person_id: int, backend: str | None) -> None:
    """Show one person by ID."""
    try:
        with person_service(_resolve(backend)) as service:
            person = service.get(person_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo("Person found:")
    _display_person(person)


@click.command("update")
@click.argument("person_id", type=int)
@click.option("--first-name", default=None, help="New first name.")
@click.option("--last-name", default=None, help="New last name.")
@click.option("--position", default=None, help="New position.")
@click.option("--clear-position", is_flag=True, help="Remove the position.")
@backend_option
def person_update(
    person_id: int,
    first_name: str | None,
    last_name: str | None,
    position: str | None,
    clear_position: bool,
    backend: str | None,
) -> None:
    """Update a person. Omitted options leave the field unchanged."""
    if position is not None and clear_position:
        raise click.UsageError("--position and --clear-position are mutually exclusive")

    data = PersonUpdate(
        first_name=first_name if first_name is not None else UNSET,
        last_name=last_name if last_name is not None else UNSET,
        position=None if clear_position else (position if position is not None else UNSET),
    )
    selected = _resolve(backend)
    try:
        with person_service(selected) as service:
            person = service.update(person_id, data)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Person updated ({_BACKEND_LABELS[selected]})")
    _display_person(person)


@click.command("delete")
@click.argument("person_id", type=int)
@click.option("--yes", is_flag=True, help="Do not ask for confirmation.")
@backend_option
def person_delete(person_id: int, yes: bool, backend: str | None) -> None:
    """Delete a person after confirmation."""
    selected = _resolve(backend)
    try:
        with person_service(selected) as service:
            person = service.get(person_id)

            click.echo("Person to delete:")
            _display_person(person)
            if not yes and not click.confirm("Are you sure?", default=False):
                click.echo("Deletion cancelled.")
                return

            service.delete(person_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Person deleted ({_BACKEND_LABELS[selected]})")


@click.command("count")
@backend_option
def person_count(backend: str | None) -> None:
    """Print the number of people."""
    try:
        with person_service(_resolve(backend)) as service:
            click.echo(service.count())
    except DomainException as exc:
        raise click.ClickException(str(exc))


@click.command("seed")
@click.option("--count", "count", default=10, show_default=True, type=int, help="How many people.")
@backend_option
def person_seed(count: int, backend: str | None) -> None:
    """Insert sample people."""
    try:
        with person_service(_resolve(backend)) as service:
            people = service.seed(count)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Seeded {len(people)} people")
