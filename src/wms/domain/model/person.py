"""Person aggregate."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Person:
    """A member of staff: warehouse manager, supplier contact, recipient.

    People carry no uniqueness rule; two records may share a full name.
    """

    id: int | None
    first_name: str
    last_name: str
    position: str | None = None

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"
