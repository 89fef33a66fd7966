"""Domain error taxonomy.

Every error carries an :class:`ErrorKind` tag so that callers (the REST layer,
the CLI) can tell a naming conflict from a stale reference without matching on
concrete exception classes. The reconciliation core never catches these to
recover; it only logs them at the point of failure and lets them propagate.
"""

from __future__ import annotations

from enum import StrEnum
from typing import ClassVar


class ErrorKind(StrEnum):
    NOT_FOUND = "NOT_FOUND"
    DUPLICATION = "DUPLICATION"
    INVALID_ARGUMENT = "INVALID_ARGUMENT"


class CampusCoffeeError(Exception):
    """Base class for all errors raised by the domain."""

    kind: ClassVar[ErrorKind]


class NotFoundError(CampusCoffeeError):
    """A referenced entity (or external node) does not exist."""

    kind: ClassVar[ErrorKind] = ErrorKind.NOT_FOUND

    def __init__(self, entity: str, field: str, value: object) -> None:
        super().__init__(f"{entity} with {field} '{value}' does not exist.")
        self.entity = entity
        self.field = field
        self.value = value


class DuplicationError(CampusCoffeeError):
    """A write would violate a uniqueness invariant on ``field``."""

    kind: ClassVar[ErrorKind] = ErrorKind.DUPLICATION

    def __init__(self, entity: str, field: str, value: object) -> None:
        super().__init__(f"{entity} with {field} '{value}' already exists.")
        self.entity = entity
        self.field = field
        self.value = value


class InvalidArgumentError(CampusCoffeeError, ValueError):
    """The request is malformed; rejected before any lookup or write."""

    kind: ClassVar[ErrorKind] = ErrorKind.INVALID_ARGUMENT


__all__ = [
    "CampusCoffeeError",
    "DuplicationError",
    "ErrorKind",
    "InvalidArgumentError",
    "NotFoundError",
]
