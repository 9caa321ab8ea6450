"""Value Objects shared across the domain."""

from __future__ import annotations

import enum
from typing import TypeVar, Union

T = TypeVar("T")


class Unset(enum.Enum):
    """Marker for a field that was not supplied in a partial update.

    ``None`` cannot play this role: for nullable fields such as a person's
    position it means "clear the value", which is a different request
    from "leave it alone".
    """

    UNSET = "UNSET"

    def __repr__(self) -> str:
        return "UNSET"

    def __bool__(self) -> bool:
        return False


UNSET = Unset.UNSET

Maybe = Union[T, Unset]


def is_set(value: object) -> bool:
    return value is not UNSET
