"""Generic create-or-update routine shared by every aggregate.

Flow: identity resolution (create/update, existence check) -> one write through
the owning store. ``NotFoundError`` and ``DuplicationError`` are never handled
here; they reach the caller with their original payload.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from logging import getLogger
from typing import TYPE_CHECKING

from campuscoffee.domain.errors import CampusCoffeeError

from .contracts import Reconcilable, UpsertOutcome
from .identity import IdentityResolver
from .upsert import UpsertCoordinator

if TYPE_CHECKING:
    from .contracts import ReconciliationStore

log = getLogger(__name__)


@dataclass
class Reconciler[TEntity: Reconcilable]:
    """Run identity resolution and the guarded write for one entity type."""

    store: ReconciliationStore[TEntity]
    resolver: IdentityResolver[TEntity] = field(init=False)
    coordinator: UpsertCoordinator[TEntity] = field(init=False)

    def __post_init__(self) -> None:
        self.resolver = IdentityResolver(self.store)
        self.coordinator = UpsertCoordinator(self.store)

    def upsert(self, entity: TEntity) -> TEntity:
        try:
            resolution = self.resolver.resolve(entity)
            persisted = self.coordinator.persist(entity)
        except CampusCoffeeError as exc:
            log.debug(
                "Upsert of %s '%s' ended in %s",
                entity.ENTITY_TYPE,
                entity.unique_key,
                UpsertOutcome.for_error(exc),
            )
            raise
        log.debug(
            "Upsert of %s '%s' ended in %s (%s)",
            entity.ENTITY_TYPE,
            entity.unique_key,
            UpsertOutcome.PERSISTED,
            resolution.intent,
        )
        return persisted
