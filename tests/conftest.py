from __future__ import annotations

import os
from typing import TYPE_CHECKING

import pytest
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine  # noqa: TC002
from sqlalchemy.pool import StaticPool

from campuscoffee.adapters.sqlalchemy import (
    SqlAlchemyPosDataService,
    SqlAlchemyUserDataService,
    shutdown,
    startup,
)
from tests.helpers.fakes import (
    FakeOsmDataService,
    InMemoryPosDataService,
    InMemoryUserDataService,
)

os.environ.setdefault("DATABASE_URI", "sqlite+pysqlite:///:memory:")

if TYPE_CHECKING:
    from collections.abc import Iterator


@pytest.fixture
def sqlite_engine() -> Iterator[Engine]:
    # one shared connection so the API test client threads see the same database
    engine = create_engine(
        "sqlite+pysqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
        future=True,
    )
    startup(engine=engine, force=True)
    try:
        yield engine
    finally:
        shutdown()


@pytest.fixture
def pos_data_service(sqlite_engine: Engine) -> SqlAlchemyPosDataService:
    _ = sqlite_engine
    return SqlAlchemyPosDataService()


@pytest.fixture
def user_data_service(sqlite_engine: Engine) -> SqlAlchemyUserDataService:
    _ = sqlite_engine
    return SqlAlchemyUserDataService()


@pytest.fixture
def in_memory_pos() -> InMemoryPosDataService:
    return InMemoryPosDataService()


@pytest.fixture
def in_memory_users() -> InMemoryUserDataService:
    return InMemoryUserDataService()


@pytest.fixture
def fake_osm() -> FakeOsmDataService:
    return FakeOsmDataService()
