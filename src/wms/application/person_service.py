"""Application service: Person use cases.

The service is backend-agnostic: it is handed whichever PersonRepository
the caller selected (ORM session or plain SQL) and behaves identically
over both.
"""

from __future__ import annotations

import logging

from wms.application.dto import PersonUpdate
from wms.domain.exceptions import EntityNotFoundError, ValidationError
from wms.domain.model.person import Person
from wms.domain.model.value_objects import is_set
from wms.domain.repository.person_repository import PersonRepository
from wms.domain.service.validators import (
    PERSON_NAME_MAX_LENGTH,
    require_text,
    validate_person_names,
    validate_position,
)

logger = logging.getLogger(__name__)

_SEED_FIRST_NAMES = ("Olena", "Taras", "Iryna", "Andrii", "Marta", "Bohdan", "Sofiia")
_SEED_LAST_NAMES = ("Kovalenko", "Shevchenko", "Bondarenko", "Melnyk", "Tkachenko")
_SEED_POSITIONS = ("Storekeeper", "Warehouse manager", "Forklift operator", "Logistician", None)


class PersonService:

    def __init__(self, person_repo: PersonRepository) -> None:
        self._person_repo = person_repo

    def create(self, first_name: str, last_name: str, position: str | None = None) -> Person:
        first_name, last_name = validate_person_names(first_name, last_name)
        position = validate_position(_blank_to_none(position))

        person = self._person_repo.add(
            Person(id=None, first_name=first_name, last_name=last_name, position=position)
        )
        logger.info("Added person #%s %s", person.id, person.full_name)
        return person

    def list_all(self) -> list[Person]:
        return self._person_repo.list_all()

    def search(self, term: str) -> list[Person]:
        """Case-insensitive substring match on names and position.

        An empty term matches everyone.
        """
        return self._person_repo.search(term)

    def get(self, person_id: int) -> Person:
        person = self._person_repo.get_by_id(person_id)
        if person is None:
            raise EntityNotFoundError(f"Person with ID {person_id} not found")
        return person

    def count(self) -> int:
        return self._person_repo.count()

    def update(self, person_id: int, data: PersonUpdate) -> Person:
        """Overwrite the supplied fields and keep the rest.

        A supplied first or last name must be non-blank; a supplied
        position of ``None`` or blank clears it.
        """
        if is_set(data.first_name):
            require_text(data.first_name, "First name", max_length=PERSON_NAME_MAX_LENGTH)
        if is_set(data.last_name):
            require_text(data.last_name, "Last name", max_length=PERSON_NAME_MAX_LENGTH)
        if is_set(data.position):
            validate_position(data.position)

        person = self.get(person_id)
        if is_set(data.first_name):
            person.first_name = data.first_name
        if is_set(data.last_name):
            person.last_name = data.last_name
        if is_set(data.position):
            person.position = _blank_to_none(data.position)

        self._person_repo.update(person)
        logger.info("Updated person #%s", person_id)
        return person

    def delete(self, person_id: int) -> None:
        self.get(person_id)
        self._person_repo.delete(person_id)
        logger.info("Deleted person #%s", person_id)

    def seed(self, count: int) -> list[Person]:
        """Insert *count* sample people, for demos and manual testing."""
        if count < 1:
            raise ValidationError("Seed count must be positive")

        people = []
        for i in range(count):
            people.append(
                self.create(
                    first_name=_SEED_FIRST_NAMES[i % len(_SEED_FIRST_NAMES)],
                    last_name=_SEED_LAST_NAMES[i % len(_SEED_LAST_NAMES)],
                    position=_SEED_POSITIONS[i % len(_SEED_POSITIONS)],
                )
            )
        logger.info("Seeded %d people", count)
        return people


def _blank_to_none(value: str | None) -> str | None:
    if value is None or not value.strip():
        return None
    return value
