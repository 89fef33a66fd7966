"""Users of the CampusCoffee platform."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from campuscoffee.domain.model.entity import Entity
from campuscoffee.domain.model.enums import EntityType


@dataclass(eq=False, kw_only=True)
class User(Entity):
    """A registered user; ``login_name`` is unique across all users."""

    ENTITY_TYPE: ClassVar[EntityType] = EntityType.USER
    UNIQUE_FIELD: ClassVar[str] = "login_name"

    login_name: str
    email_address: str = ""
    first_name: str = ""
    last_name: str = ""

    @property
    def unique_key(self) -> str:
        return self.login_name
