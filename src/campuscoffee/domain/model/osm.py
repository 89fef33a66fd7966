"""Values read from OpenStreetMap; never persisted as-is."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Mapping

    from campuscoffee.domain.model.primitives import GeoPosition, OsmNodeId


@dataclass(frozen=True, slots=True)
class OsmNode:
    """An OSM node reduced to what a POS import needs."""

    node_id: OsmNodeId
    position: GeoPosition
    tags: Mapping[str, str] = field(default_factory=dict[str, str])

    @property
    def name(self) -> str | None:
        value = self.tags.get("name")
        if value is None or not value.strip():
            return None
        return value.strip()

    def tag(self, key: str) -> str | None:
        value = self.tags.get(key)
        return value.strip() if value else None
