from __future__ import annotations

import pytest

from campuscoffee.domain.errors import DuplicationError, InvalidArgumentError, NotFoundError
from campuscoffee.domain.reconciliation import Reconciler, UpsertOutcome
from tests.helpers.entities import make_pos, make_user
from tests.helpers.fakes import InMemoryPosDataService, InMemoryUserDataService


def test_create_assigns_identifier() -> None:
    store = InMemoryPosDataService()
    reconciler = Reconciler(store)

    persisted = reconciler.upsert(make_pos("Cafe Botanik"))

    assert persisted.id is not None
    assert store.get_by_id(persisted.id).name == "Cafe Botanik"


def test_update_requires_existence_and_writes_nothing() -> None:
    store = InMemoryPosDataService([make_pos("Cafe Botanik", pos_id=1)])
    reconciler = Reconciler(store)

    with pytest.raises(NotFoundError):
        reconciler.upsert(make_pos("Ghost", pos_id=42))

    assert store.writes == []
    assert [pos.name for pos in store.get_all()] == ["Cafe Botanik"]


def test_update_preserves_identifier() -> None:
    store = InMemoryPosDataService([make_pos("Cafe Botanik", pos_id=7)])
    reconciler = Reconciler(store)

    updated = reconciler.upsert(make_pos("Cafe Botanik II", pos_id=7))

    assert updated.id == 7
    assert store.get_by_id(7).name == "Cafe Botanik II"


def test_uniqueness_enforced_leaves_first_entity_unchanged() -> None:
    store = InMemoryPosDataService()
    reconciler = Reconciler(store)
    first = reconciler.upsert(make_pos("Cafe Botanik", latitude=49.0))

    with pytest.raises(DuplicationError) as excinfo:
        reconciler.upsert(make_pos("Cafe Botanik", latitude=48.0))

    assert excinfo.value.field == "name"
    assert first.id is not None
    stored = store.get_by_id(first.id)
    assert stored.position.latitude == 49.0
    assert len(store.get_all()) == 1


def test_renaming_onto_existing_unique_key_is_a_duplicate() -> None:
    store = InMemoryUserDataService([make_user("alice", user_id=1), make_user("bob", user_id=2)])
    reconciler = Reconciler(store)

    with pytest.raises(DuplicationError):
        reconciler.upsert(make_user("alice", user_id=2))

    assert store.get_by_id(2).login_name == "bob"


def test_user_scenario_duplicate_rename_and_stale_id() -> None:
    store = InMemoryUserDataService([make_user("alice", user_id=1)])
    reconciler = Reconciler(store)

    with pytest.raises(DuplicationError):
        reconciler.upsert(make_user("alice"))

    renamed = reconciler.upsert(make_user("alice2", user_id=1))
    assert renamed.id == 1
    assert renamed.login_name == "alice2"

    with pytest.raises(NotFoundError):
        reconciler.upsert(make_user("bob", user_id=99))

    assert [user.login_name for user in store.get_all()] == ["alice2"]


def test_outcome_for_error_kinds() -> None:
    assert UpsertOutcome.for_error(NotFoundError("User", "ID", 1)) is UpsertOutcome.NOT_FOUND
    assert (
        UpsertOutcome.for_error(DuplicationError("User", "login_name", "alice"))
        is UpsertOutcome.DUPLICATE_CONFLICT
    )
    assert UpsertOutcome.for_error(InvalidArgumentError("bad")) is UpsertOutcome.REJECTED
