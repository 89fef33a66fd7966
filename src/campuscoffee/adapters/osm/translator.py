"""Translate OSM payloads into domain values.

Payload-shape problems (no matching element) are ``OsmAPIError``; a node that
exists but lacks usable coordinates is invalid input for an import.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from campuscoffee.domain.model import GeoPosition, OsmNode
from campuscoffee.domain.reconciliation import IncompleteOsmNodeError

from .client import OsmAPIError, OsmNodeMissingError

if TYPE_CHECKING:
    from .schema import OsmElement, OsmNodeResponse

_COORDINATES = "lat/lon"


def translate_node(payload: OsmNodeResponse, *, node_id: int) -> OsmNode:
    element = _find_node(payload, node_id)
    if element.visible is False:
        raise OsmNodeMissingError(node_id)
    if element.lat is None or element.lon is None:
        raise IncompleteOsmNodeError(node_id, _COORDINATES)
    try:
        position = GeoPosition(latitude=element.lat, longitude=element.lon)
    except ValueError as exc:
        raise IncompleteOsmNodeError(node_id, _COORDINATES, detail=str(exc)) from exc
    return OsmNode(node_id=element.id, position=position, tags=dict(element.tags))


def _find_node(payload: OsmNodeResponse, node_id: int) -> OsmElement:
    for element in payload.elements:
        if element.type == "node" and element.id == node_id:
            return element
    raise OsmAPIError(f"OSM response does not contain node {node_id}")
