"""Points of sale."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from campuscoffee.domain.model.entity import Entity
from campuscoffee.domain.model.enums import CampusType, EntityType, PosType
from campuscoffee.domain.model.primitives import GeoPosition  # noqa: TC001


@dataclass(eq=False, kw_only=True)
class Pos(Entity):
    """A coffee location on campus; ``name`` is unique across all POS."""

    ENTITY_TYPE: ClassVar[EntityType] = EntityType.POS
    UNIQUE_FIELD: ClassVar[str] = "name"

    name: str
    position: GeoPosition
    campus: CampusType
    pos_type: PosType = PosType.CAFE
    description: str = ""

    street: str | None = None
    house_number: str | None = None
    postal_code: str | None = None
    city: str | None = None

    @property
    def unique_key(self) -> str:
        return self.name
