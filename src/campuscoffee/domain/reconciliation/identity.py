"""Identity resolution: decide between create and update.

An entity without an identifier is a creation and touches no store. An entity
with an identifier is an update and must already exist: the resolver performs
exactly one ``get_by_id`` read and lets ``NotFoundError`` propagate, so a stale
identifier aborts the upsert before anything is written. The fetched entity is
discarded; only its existence matters.
"""

from __future__ import annotations

from dataclasses import dataclass
from logging import getLogger
from typing import TYPE_CHECKING

from .contracts import Reconcilable, UpsertIntent

if TYPE_CHECKING:
    from .contracts import ReconciliationStore

log = getLogger(__name__)


@dataclass(frozen=True, slots=True)
class Resolution:
    intent: UpsertIntent
    entity_id: int | None = None


@dataclass
class IdentityResolver[TEntity: Reconcilable]:
    store: ReconciliationStore[TEntity]

    def resolve(self, entity: TEntity) -> Resolution:
        if entity.id is None:
            log.info("Creating new %s: %s", entity.ENTITY_TYPE, entity.unique_key)
            return Resolution(intent=UpsertIntent.CREATE)

        log.info("Updating %s with ID: %s", entity.ENTITY_TYPE, entity.id)
        # raises NotFoundError for identifiers the store does not know
        self.store.get_by_id(entity.id)
        return Resolution(intent=UpsertIntent.UPDATE, entity_id=entity.id)
