"""Tests for the SQLAlchemy-backed data services."""

from __future__ import annotations

import pytest
from sqlalchemy import inspect
from sqlalchemy.engine import Engine  # noqa: TC002

from campuscoffee.adapters.sqlalchemy import (
    SqlAlchemyPosDataService,
    SqlAlchemyUserDataService,
    StartupError,
    configured_engine,
    is_started,
    shutdown,
)
from campuscoffee.domain.errors import DuplicationError, NotFoundError
from campuscoffee.domain.model import CampusType, GeoPosition, PosType
from campuscoffee.domain.reconciliation import Reconciler
from tests.helpers.entities import make_pos, make_user


def test_migrations_create_tables(sqlite_engine: Engine) -> None:
    inspector = inspect(sqlite_engine)

    assert {"campus_user", "pos", "alembic_version"} <= set(inspector.get_table_names())
    assert configured_engine() is sqlite_engine
    assert is_started()


def test_data_service_requires_startup() -> None:
    shutdown()

    with pytest.raises(StartupError):
        SqlAlchemyPosDataService()


def test_create_assigns_id_and_timestamps(pos_data_service: SqlAlchemyPosDataService) -> None:
    created = pos_data_service.upsert(make_pos("Cafe Botanik", pos_type=PosType.BAKERY))

    assert created.id is not None
    assert created.created_at is not None
    assert created.updated_at == created.created_at

    loaded = pos_data_service.get_by_id(created.id)
    assert loaded.name == "Cafe Botanik"
    assert loaded.pos_type is PosType.BAKERY
    assert loaded.campus is CampusType.NORTH
    assert loaded.position == GeoPosition(latitude=49.4163, longitude=8.6704)
    assert loaded.created_at is not None
    assert loaded.created_at.tzinfo is not None


def test_update_replaces_fields_and_keeps_created_at(
    pos_data_service: SqlAlchemyPosDataService,
) -> None:
    created = pos_data_service.upsert(make_pos("Cafe Botanik"))
    assert created.id is not None

    replacement = make_pos("Cafe Botanik II", pos_id=created.id, campus=CampusType.SOUTH)
    updated = pos_data_service.upsert(replacement)

    assert updated.id == created.id
    assert updated.name == "Cafe Botanik II"
    assert updated.campus is CampusType.SOUTH
    assert updated.created_at == created.created_at
    assert updated.updated_at is not None
    assert created.created_at is not None
    assert updated.updated_at >= created.created_at
    assert [pos.name for pos in pos_data_service.get_all()] == ["Cafe Botanik II"]


def test_update_unknown_id_raises_not_found(pos_data_service: SqlAlchemyPosDataService) -> None:
    with pytest.raises(NotFoundError):
        pos_data_service.upsert(make_pos("Ghost", pos_id=42))

    assert pos_data_service.get_all() == []


def test_duplicate_name_on_create(pos_data_service: SqlAlchemyPosDataService) -> None:
    first = pos_data_service.upsert(make_pos("Cafe Botanik", latitude=49.0))

    with pytest.raises(DuplicationError) as excinfo:
        pos_data_service.upsert(make_pos("Cafe Botanik", latitude=48.0))

    assert excinfo.value.field == "name"
    assert excinfo.value.value == "Cafe Botanik"
    assert first.id is not None
    assert pos_data_service.get_by_id(first.id).position.latitude == 49.0
    assert len(pos_data_service.get_all()) == 1


def test_duplicate_login_name_on_rename(user_data_service: SqlAlchemyUserDataService) -> None:
    alice = user_data_service.upsert(make_user("alice"))
    bob = user_data_service.upsert(make_user("bob"))
    assert bob.id is not None

    with pytest.raises(DuplicationError) as excinfo:
        user_data_service.upsert(make_user("alice", user_id=bob.id))

    assert excinfo.value.field == "login_name"
    assert user_data_service.get_by_id(bob.id).login_name == "bob"
    assert user_data_service.get_by_login_name("alice").id == alice.id


def test_lookup_by_unique_key(user_data_service: SqlAlchemyUserDataService) -> None:
    user_data_service.upsert(make_user("alice"))

    assert user_data_service.get_by_login_name("alice").email_address == "alice@uni-heidelberg.de"
    with pytest.raises(NotFoundError) as excinfo:
        user_data_service.get_by_login_name("nobody")
    assert excinfo.value.field == "login_name"


def test_get_all_is_ordered_by_id(pos_data_service: SqlAlchemyPosDataService) -> None:
    for name in ("Zeta", "Alpha", "Mensa"):
        pos_data_service.upsert(make_pos(name))

    assert [pos.name for pos in pos_data_service.get_all()] == ["Zeta", "Alpha", "Mensa"]


def test_delete_and_clear(pos_data_service: SqlAlchemyPosDataService) -> None:
    first = pos_data_service.upsert(make_pos("Cafe Botanik"))
    pos_data_service.upsert(make_pos("Mensa"))
    assert first.id is not None

    pos_data_service.delete(first.id)
    with pytest.raises(NotFoundError):
        pos_data_service.get_by_id(first.id)
    with pytest.raises(NotFoundError):
        pos_data_service.delete(first.id)

    pos_data_service.clear()
    assert pos_data_service.get_all() == []


def test_reconciler_over_sqlalchemy_store(user_data_service: SqlAlchemyUserDataService) -> None:
    reconciler = Reconciler(user_data_service)
    alice = reconciler.upsert(make_user("alice"))
    assert alice.id is not None

    with pytest.raises(DuplicationError):
        reconciler.upsert(make_user("alice"))

    renamed = reconciler.upsert(make_user("alice2", user_id=alice.id))
    assert renamed.id == alice.id

    with pytest.raises(NotFoundError):
        reconciler.upsert(make_user("bob", user_id=99))
