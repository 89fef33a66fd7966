"""SQLAlchemy mapping metadata for the CampusCoffee domain model."""

from __future__ import annotations

import logging
from datetime import UTC, datetime
from functools import cache

from sqlalchemy import (
    Column,
    DateTime,
    Dialect,
    Enum,
    Float,
    Integer,
    String,
    Table,
    TypeDecorator,
    UniqueConstraint,
    orm,
)
from sqlalchemy.orm import composite, configure_mappers

from campuscoffee.domain.model import CampusType, GeoPosition, Pos, PosType, User

log = logging.getLogger(__name__)


class UTCDateTime(TypeDecorator[datetime]):
    impl = DateTime(timezone=True)
    cache_ok = True

    def process_bind_param(self, value: datetime | None, dialect: Dialect) -> datetime | None:
        _ = dialect
        if value is None:
            return None
        if value.tzinfo is None:
            value = value.replace(tzinfo=UTC)
        return value.astimezone(UTC)

    def process_result_value(self, value: datetime | None, dialect: Dialect) -> datetime | None:
        _ = dialect
        if value is None:
            return None
        return value if value.tzinfo else value.replace(tzinfo=UTC)


mapper_registry = orm.registry()
mapper_registry.metadata.naming_convention = {
    "ix": "ix_%(column_0_label)s",
    "uq": "uq_%(table_name)s_%(column_0_name)s",
    "ck": "ck_%(table_name)s_%(constraint_name)s",
    "fk": "fk_%(table_name)s_%(column_0_label)s_%(referred_table_name)s",
    "pk": "pk_%(table_name)s",
}

# Tables ----------------------------------------------------------------------

user_table = Table(
    "campus_user",
    mapper_registry.metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("login_name", String(64), nullable=False),
    Column("email_address", String(255), nullable=False, default=""),
    Column("first_name", String(255), nullable=False, default=""),
    Column("last_name", String(255), nullable=False, default=""),
    Column("created_at", UTCDateTime, nullable=True),
    Column("updated_at", UTCDateTime, nullable=True),
    UniqueConstraint("login_name"),
)

pos_table = Table(
    "pos",
    mapper_registry.metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("name", String(255), nullable=False),
    Column("description", String, nullable=False, default=""),
    Column("pos_type", Enum(PosType, native_enum=False, length=32), nullable=False),
    Column("campus", Enum(CampusType, native_enum=False, length=32), nullable=False),
    Column("street", String(255), nullable=True),
    Column("house_number", String(32), nullable=True),
    Column("postal_code", String(32), nullable=True),
    Column("city", String(255), nullable=True),
    Column("latitude", Float, nullable=False),
    Column("longitude", Float, nullable=False),
    Column("created_at", UTCDateTime, nullable=True),
    Column("updated_at", UTCDateTime, nullable=True),
    UniqueConstraint("name"),
)

UNIQUE_COLUMN_BY_CLASS: dict[type[Pos | User], Column[str]] = {
    Pos: pos_table.c.name,
    User: user_table.c.login_name,
}


@cache
def start_mappers() -> orm.registry:
    """Configure SQLAlchemy mappers for the domain model."""

    log.info("Starting SQLAlchemy mappers")

    mapper_registry.map_imperatively(User, user_table)

    mapper_registry.map_imperatively(
        Pos,
        pos_table,
        properties={
            "position": composite(
                GeoPosition,
                pos_table.c.latitude,
                pos_table.c.longitude,
            ),
        },
    )

    configure_mappers()
    return mapper_registry
