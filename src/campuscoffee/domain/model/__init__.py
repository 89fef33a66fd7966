"""Public domain model surface."""

from __future__ import annotations

from campuscoffee.domain.model.entity import Entity
from campuscoffee.domain.model.enums import CampusType, EntityType, PosType
from campuscoffee.domain.model.osm import OsmNode
from campuscoffee.domain.model.pos import Pos
from campuscoffee.domain.model.primitives import EntityId, GeoPosition, OsmNodeId
from campuscoffee.domain.model.user import User

__all__ = [
    "CampusType",
    "Entity",
    "EntityId",
    "EntityType",
    "GeoPosition",
    "OsmNode",
    "OsmNodeId",
    "Pos",
    "PosType",
    "User",
]
