"""Data services backed by SQLAlchemy sessions.

Every public call runs in its own session and transaction, which makes each
operation atomic on its own. Uniqueness is enforced by the database; an
``IntegrityError`` is only reported as ``DuplicationError`` after the store
confirms that another row holds the same unique key.
"""

from __future__ import annotations

import dataclasses
from datetime import UTC, datetime
from logging import getLogger
from typing import TYPE_CHECKING, Final, cast

from sqlalchemy import delete, select
from sqlalchemy.exc import IntegrityError

from campuscoffee.adapters.sqlalchemy.database import session_factory as default_session_factory
from campuscoffee.adapters.sqlalchemy.mappings import UNIQUE_COLUMN_BY_CLASS, start_mappers
from campuscoffee.domain.errors import DuplicationError, NotFoundError
from campuscoffee.domain.model import Pos, User

if TYPE_CHECKING:
    from collections.abc import Sequence

    from sqlalchemy.orm import Session, sessionmaker

    from campuscoffee.domain.model import EntityId

log = getLogger(__name__)

_MANAGED_FIELDS: Final[frozenset[str]] = frozenset({"id", "created_at", "updated_at"})


def _utcnow() -> datetime:
    return datetime.now(UTC)


class SqlAlchemyEntityDataService[TEntity: (Pos, User)]:
    """Shared CRUD primitives for aggregates with one unique column."""

    def __init__(
        self,
        entity_cls: type[TEntity],
        *,
        session_factory: sessionmaker[Session] | None = None,
    ) -> None:
        start_mappers()
        self._entity_cls = entity_cls
        self._entity_type = entity_cls.ENTITY_TYPE
        self._unique_field = entity_cls.UNIQUE_FIELD
        self._unique_column = UNIQUE_COLUMN_BY_CLASS[entity_cls]
        self._session_factory = session_factory or default_session_factory()

    def get_by_id(self, entity_id: EntityId) -> TEntity:
        with self._session_factory() as session:
            entity = session.get(self._entity_cls, entity_id)
            if entity is None:
                raise NotFoundError(self._entity_type, "ID", entity_id)
            return entity

    def get_by_unique_key(self, key: str) -> TEntity:
        with self._session_factory() as session:
            entity = self._find_by_unique_key(session, key)
            if entity is None:
                raise NotFoundError(self._entity_type, self._unique_field, key)
            return entity

    def get_all(self) -> Sequence[TEntity]:
        with self._session_factory() as session:
            stmt = select(self._entity_cls).order_by(self._unique_column.table.c.id)
            return list(session.scalars(stmt).all())

    def upsert(self, entity: TEntity) -> TEntity:
        now = _utcnow()
        with self._session_factory() as session:
            if entity.id is None:
                stored = dataclasses.replace(entity, created_at=now, updated_at=now)
                session.add(stored)
            else:
                existing = session.get(self._entity_cls, entity.id)
                if existing is None:
                    raise NotFoundError(self._entity_type, "ID", entity.id)
                self._copy_fields(entity, existing)
                existing.updated_at = now
                stored = existing

            try:
                session.commit()
            except IntegrityError as exc:
                session.rollback()
                self._raise_if_duplicate(session, entity, exc)
                raise
            log.debug("Stored %s with ID: %s", self._entity_type, stored.id)
            return stored

    def delete(self, entity_id: EntityId) -> None:
        with self._session_factory() as session:
            entity = session.get(self._entity_cls, entity_id)
            if entity is None:
                raise NotFoundError(self._entity_type, "ID", entity_id)
            session.delete(entity)
            session.commit()

    def clear(self) -> None:
        with self._session_factory() as session:
            session.execute(delete(self._unique_column.table))
            session.commit()

    def _find_by_unique_key(self, session: Session, key: str) -> TEntity | None:
        stmt = select(self._entity_cls).where(self._unique_column == key).limit(1)
        return session.scalars(stmt).one_or_none()

    def _raise_if_duplicate(self, session: Session, entity: TEntity, exc: IntegrityError) -> None:
        key = entity.unique_key
        conflicting = self._find_by_unique_key(session, key)
        if conflicting is not None and conflicting.id != entity.id:
            raise DuplicationError(self._entity_type, self._unique_field, key) from exc

    @staticmethod
    def _copy_fields(source: TEntity, target: TEntity) -> None:
        for entity_field in dataclasses.fields(source):
            if entity_field.name in _MANAGED_FIELDS:
                continue
            setattr(target, entity_field.name, getattr(source, entity_field.name))


class SqlAlchemyPosDataService(SqlAlchemyEntityDataService[Pos]):
    def __init__(self, *, session_factory: sessionmaker[Session] | None = None) -> None:
        super().__init__(Pos, session_factory=session_factory)

    def get_by_name(self, name: str) -> Pos:
        return self.get_by_unique_key(name)


class SqlAlchemyUserDataService(SqlAlchemyEntityDataService[User]):
    def __init__(self, *, session_factory: sessionmaker[Session] | None = None) -> None:
        super().__init__(User, session_factory=session_factory)

    def get_by_login_name(self, login_name: str) -> User:
        return self.get_by_unique_key(login_name)


if TYPE_CHECKING:
    from campuscoffee.domain.ports import PosDataService, UserDataService

    _session_factory_stub = cast("sessionmaker[Session]", object())
    _pos_check: PosDataService = SqlAlchemyPosDataService(session_factory=_session_factory_stub)
    _user_check: UserDataService = SqlAlchemyUserDataService(
        session_factory=_session_factory_stub
    )
