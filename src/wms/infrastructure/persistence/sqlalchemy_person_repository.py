"""ORM-session-backed implementation of PersonRepository.

Mutations are staged on the session and committed as one unit. Updates
load the mapped row, copy the new field values onto it and commit, so
nothing depends on the session noticing changes to a detached object.
"""

from __future__ import annotations

from sqlalchemy import func, or_, select
from sqlalchemy.orm import Session

from wms.domain.exceptions import EntityNotFoundError
from wms.domain.model.person import Person
from wms.domain.repository.person_repository import PersonRepository
from wms.infrastructure.persistence.database import LIKE_ESCAPE, contains_pattern
from wms.infrastructure.persistence.errors import translate_errors
from wms.infrastructure.persistence.orm import PersonRow


class SqlAlchemyPersonRepository(PersonRepository):

    def __init__(self, session: Session) -> None:
        self._session = session

    # --- PersonRepository interface -------------------------------------------

    @translate_errors()
    def list_all(self) -> list[Person]:
        rows = self._session.scalars(
            select(PersonRow).order_by(
                PersonRow.last_name, PersonRow.first_name, PersonRow.id
            ).execution_options(populate_existing=True)
        )
        return [self._to_domain(row) for row in rows]

    @translate_errors()
    def search(self, term: str) -> list[Person]:
        pattern = contains_pattern(term)
        rows = self._session.scalars(
            select(PersonRow)
            .where(
                or_(
                    func.lower(PersonRow.first_name).like(pattern, escape=LIKE_ESCAPE),
                    func.lower(PersonRow.last_name).like(pattern, escape=LIKE_ESCAPE),
                    func.lower(PersonRow.position).like(pattern, escape=LIKE_ESCAPE),
                )
            )
            .order_by(PersonRow.last_name, PersonRow.first_name, PersonRow.id)
            .execution_options(populate_existing=True)
        )
        return [self._to_domain(row) for row in rows]

    @translate_errors()
    def get_by_id(self, person_id: int) -> Person | None:
        row = self._session.get(PersonRow, person_id, populate_existing=True)
        return self._to_domain(row) if row is not None else None

    @translate_errors()
    def count(self) -> int:
        return self._session.scalar(select(func.count()).select_from(PersonRow)) or 0

    @translate_errors()
    def add(self, person: Person) -> Person:
        row = PersonRow(
            first_name=person.first_name,
            last_name=person.last_name,
            position=person.position,
        )
        self._session.add(row)
        self._session.commit()
        person.id = row.id
        return person

    @translate_errors()
    def update(self, person: Person) -> None:
        row = self._session.get(PersonRow, person.id, populate_existing=True)
        if row is None:
            raise EntityNotFoundError(f"Person with ID {person.id} not found")
        row.first_name = person.first_name
        row.last_name = person.last_name
        row.position = person.position
        self._session.commit()

    @translate_errors()
    def delete(self, person_id: int) -> None:
        row = self._session.get(PersonRow, person_id, populate_existing=True)
        if row is None:
            return
        self._session.delete(row)
        self._session.commit()

    # --- Mapping --------------------------------------------------------------

    @staticmethod
    def _to_domain(row: PersonRow) -> Person:
        return Person(
            id=row.id,
            first_name=row.first_name,
            last_name=row.last_name,
            position=row.position,
        )
