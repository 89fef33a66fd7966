"""Shared reconciliation contract components.

This module holds only:
- the capability set a store must offer to take part in an upsert
- the intent/outcome enums of the upsert state machine
"""

from __future__ import annotations

from enum import StrEnum
from typing import TYPE_CHECKING, ClassVar, Protocol, runtime_checkable

from campuscoffee.domain.errors import CampusCoffeeError, ErrorKind

if TYPE_CHECKING:
    from campuscoffee.domain.model import EntityId, EntityType


class Reconcilable(Protocol):
    """Entity shape the upsert routine relies on."""

    ENTITY_TYPE: ClassVar[EntityType]
    UNIQUE_FIELD: ClassVar[str]

    @property
    def id(self) -> EntityId | None: ...

    @property
    def unique_key(self) -> str: ...


@runtime_checkable
class ReconciliationStore[TEntity](Protocol):
    """Minimal capability set: lookup by id or unique key, and a single write."""

    def get_by_id(self, entity_id: EntityId) -> TEntity: ...

    def get_by_unique_key(self, key: str) -> TEntity: ...

    def upsert(self, entity: TEntity) -> TEntity: ...


class UpsertIntent(StrEnum):
    """Decision taken by identity resolution."""

    CREATE = "create"
    UPDATE = "update"


class UpsertOutcome(StrEnum):
    """Terminal states of an upsert."""

    PERSISTED = "persisted"
    DUPLICATE_CONFLICT = "duplicate_conflict"
    NOT_FOUND = "not_found"
    REJECTED = "rejected"

    @classmethod
    def for_error(cls, error: CampusCoffeeError) -> UpsertOutcome:
        return _OUTCOME_BY_KIND[error.kind]


_OUTCOME_BY_KIND: dict[ErrorKind, UpsertOutcome] = {
    ErrorKind.DUPLICATION: UpsertOutcome.DUPLICATE_CONFLICT,
    ErrorKind.NOT_FOUND: UpsertOutcome.NOT_FOUND,
    ErrorKind.INVALID_ARGUMENT: UpsertOutcome.REJECTED,
}
