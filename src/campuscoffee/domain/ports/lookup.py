"""Ports for reading external geographic data."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from campuscoffee.domain.model import OsmNode, OsmNodeId


@runtime_checkable
class OsmDataService(Protocol):
    """Resolve an OSM node; raises ``NotFoundError`` for unknown identifiers."""

    def get_node(self, node_id: OsmNodeId) -> OsmNode: ...


__all__ = ["OsmDataService"]
