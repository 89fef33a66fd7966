"""SQLAlchemy adapter package for CampusCoffee."""

from __future__ import annotations

from .mappings import mapper_registry, pos_table, start_mappers, user_table
from .database import (  # noqa: I001
    StartupError,
    configured_engine,
    is_started,
    session_factory,
    shutdown,
    startup,
)
from .repositories import (
    SqlAlchemyEntityDataService,
    SqlAlchemyPosDataService,
    SqlAlchemyUserDataService,
)

__all__ = [
    "SqlAlchemyEntityDataService",
    "SqlAlchemyPosDataService",
    "SqlAlchemyUserDataService",
    "StartupError",
    "configured_engine",
    "is_started",
    "mapper_registry",
    "pos_table",
    "session_factory",
    "shutdown",
    "start_mappers",
    "startup",
    "user_table",
]
