"""Ports for persisting domain aggregates."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

from campuscoffee.domain.model import Entity, Pos, User

if TYPE_CHECKING:
    from collections.abc import Sequence

    from campuscoffee.domain.model import EntityId


@runtime_checkable
class EntityDataService[TEntity: Entity](Protocol):
    """Store contract shared by every aggregate.

    Each call is atomic on its own. ``upsert`` inserts when ``entity.id`` is
    ``None`` and replaces the stored fields otherwise, returning the canonical
    persisted entity with an identifier. Missing entities raise
    ``NotFoundError``; unique-field conflicts raise ``DuplicationError``.
    """

    def get_by_id(self, entity_id: EntityId) -> TEntity: ...

    def get_by_unique_key(self, key: str) -> TEntity: ...

    def get_all(self) -> Sequence[TEntity]: ...

    def upsert(self, entity: TEntity) -> TEntity: ...

    def delete(self, entity_id: EntityId) -> None: ...

    def clear(self) -> None: ...


@runtime_checkable
class PosDataService(EntityDataService[Pos], Protocol):
    """Persistence contract for points of sale (unique key: name)."""

    def get_by_name(self, name: str) -> Pos: ...


@runtime_checkable
class UserDataService(EntityDataService[User], Protocol):
    """Persistence contract for users (unique key: login name)."""

    def get_by_login_name(self, login_name: str) -> User: ...
