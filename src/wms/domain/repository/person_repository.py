"""Abstract repository for Person aggregate.

Two implementations exist, one over an ORM session and one over
hand-written SQL. They share no code, so both are held to the same
contract test suite.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from wms.domain.model.person import Person


class PersonRepository(ABC):

    @abstractmethod
    def list_all(self) -> list[Person]:
        """Return every person ordered by last name, first name, then id."""

    @abstractmethod
    def search(self, term: str) -> list[Person]:
        """Return people whose first name, last name or position contains
        *term*, ignoring case, in the same order as list_all.
        """

    @abstractmethod
    def get_by_id(self, person_id: int) -> Person | None:
        """Return a person by ID, or None if not found."""

    @abstractmethod
    def count(self) -> int:
        """Return the number of people."""

    @abstractmethod
    def add(self, person: Person) -> Person:
        """Insert a new person and return it with its assigned ID."""

    @abstractmethod
    def update(self, person: Person) -> None:
        """Overwrite every field of an existing person.

        Raises EntityNotFoundError if no person has this ID.
        """

    @abstractmethod
    def delete(self, person_id: int) -> None:
        """Remove a person. Removing a missing ID is a no-op."""
