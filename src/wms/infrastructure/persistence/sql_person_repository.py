"""Hand-written SQL implementation of PersonRepository.

Every operation opens its own connection, runs one parameterized
statement inside a short transaction and closes the connection again.
Nothing is cached between calls.
"""

from __future__ import annotations

from sqlalchemy import Engine, text

from wms.domain.exceptions import EntityNotFoundError
from wms.domain.model.person import Person
from wms.domain.repository.person_repository import PersonRepository
from wms.infrastructure.persistence.database import LIKE_ESCAPE, contains_pattern
from wms.infrastructure.persistence.errors import translate_errors

_COLUMNS = "id, first_name, last_name, position"

SELECT_ALL = text(
    f"SELECT {_COLUMNS} FROM person ORDER BY last_name, first_name, id"
)
SEARCH = text(
    f"SELECT {_COLUMNS} FROM person "
    "WHERE LOWER(first_name) LIKE :pattern ESCAPE :escape "
    "OR LOWER(last_name) LIKE :pattern ESCAPE :escape "
    "OR LOWER(position) LIKE :pattern ESCAPE :escape "
    "ORDER BY last_name, first_name, id"
)
SELECT_BY_ID = text(f"SELECT {_COLUMNS} FROM person WHERE id = :id")
COUNT = text("SELECT COUNT(*) FROM person")
INSERT = text(
    "INSERT INTO person (first_name, last_name, position) "
    "VALUES (:first_name, :last_name, :position) RETURNING id"
)
UPDATE = text(
    "UPDATE person SET first_name = :first_name, last_name = :last_name, "
    "position = :position WHERE id = :id"
)
DELETE = text("DELETE FROM person WHERE id = :id")


class SqlPersonRepository(PersonRepository):

    def __init__(self, engine: Engine) -> None:
        self._engine = engine

    # --- PersonRepository interface -------------------------------------------

    @translate_errors()
    def list_all(self) -> list[Person]:
        with self._engine.connect() as conn:
            return [self._to_domain(row) for row in conn.execute(SELECT_ALL)]

    @translate_errors()
    def search(self, term: str) -> list[Person]:
        params = {"pattern": contains_pattern(term), "escape": LIKE_ESCAPE}
        with self._engine.connect() as conn:
            return [self._to_domain(row) for row in conn.execute(SEARCH, params)]

    @translate_errors()
    def get_by_id(self, person_id: int) -> Person | None:
        with self._engine.connect() as conn:
            row = conn.execute(SELECT_BY_ID, {"id": person_id}).first()
        return self._to_domain(row) if row is not None else None

    @translate_errors()
    def count(self) -> int:
        with self._engine.connect() as conn:
            return conn.execute(COUNT).scalar_one()

    @translate_errors()
    def add(self, person: Person) -> Person:
        with self._engine.begin() as conn:
            person.id = conn.execute(INSERT, self._params(person)).scalar_one()
        return person

    @translate_errors()
    def update(self, person: Person) -> None:
        with self._engine.begin() as conn:
            matched = conn.execute(
                UPDATE, {"id": person.id, **self._params(person)}
            ).rowcount
        if matched == 0:
            raise EntityNotFoundError(f"Person with ID {person.id} not found")

    @translate_errors()
    def delete(self, person_id: int) -> None:
        with self._engine.begin() as conn:
            conn.execute(DELETE, {"id": person_id})

    # --- Mapping --------------------------------------------------------------

    @staticmethod
    def _params(person: Person) -> dict:
        return {
            "first_name": person.first_name,
            "last_name": person.last_name,
            "position": person.position,
        }

    @staticmethod
    def _to_domain(row) -> Person:
        return Person(
            id=row.id,
            first_name=row.first_name,
            last_name=row.last_name,
            position=row.position,
        )
