"""Single persistence write with duplicate-conflict diagnostics."""

from __future__ import annotations

from dataclasses import dataclass
from logging import getLogger
from typing import TYPE_CHECKING

from campuscoffee.domain.errors import DuplicationError

from .contracts import Reconcilable

if TYPE_CHECKING:
    from .contracts import ReconciliationStore

log = getLogger(__name__)


class MissingIdentifierError(RuntimeError):
    """Raised when a store returns an entity it did not assign an identifier to."""


@dataclass
class UpsertCoordinator[TEntity: Reconcilable]:
    store: ReconciliationStore[TEntity]

    def persist(self, entity: TEntity) -> TEntity:
        try:
            persisted = self.store.upsert(entity)
        except DuplicationError as exc:
            log.error(  # noqa: TRY400
                "Error upserting %s '%s' (%s=%r): %s",
                entity.ENTITY_TYPE,
                entity.unique_key,
                exc.field,
                exc.value,
                exc,
            )
            raise

        if persisted.id is None:
            raise MissingIdentifierError(
                f"{entity.ENTITY_TYPE} store returned '{entity.unique_key}' without an ID"
            )
        log.info("Successfully upserted %s with ID: %s", entity.ENTITY_TYPE, persisted.id)
        return persisted
