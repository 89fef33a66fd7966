"""Import a point of sale from an OpenStreetMap node.

Every import is a creation attempt: the POS built from the node carries no
identifier, so it always takes the CREATE path of the reconciler. There is no
matching by external id; importing a node twice fails on the unique name.
"""

from __future__ import annotations

from dataclasses import dataclass
from logging import getLogger
from typing import TYPE_CHECKING, Final

from campuscoffee.domain.errors import InvalidArgumentError
from campuscoffee.domain.model import Pos, PosType

if TYPE_CHECKING:
    from campuscoffee.domain.model import CampusType, OsmNode, OsmNodeId
    from campuscoffee.domain.ports import OsmDataService

    from .reconciler import Reconciler

log = getLogger(__name__)

_POS_TYPE_BY_TAG: Final[dict[str, PosType]] = {
    "cafe": PosType.CAFE,
    "coffee": PosType.CAFE,
    "bakery": PosType.BAKERY,
    "pastry": PosType.BAKERY,
    "vending_machine": PosType.VENDING_MACHINE,
    "canteen": PosType.CAFETERIA,
    "fast_food": PosType.CAFETERIA,
    "food_court": PosType.CAFETERIA,
    "restaurant": PosType.CAFETERIA,
}


class IncompleteOsmNodeError(InvalidArgumentError):
    """The node lacks data a POS cannot do without."""

    def __init__(self, node_id: OsmNodeId, missing: str, *, detail: str | None = None) -> None:
        message = f"OSM node {node_id} has no usable '{missing}' and cannot become a POS."
        super().__init__(f"{message} ({detail})" if detail else message)
        self.node_id = node_id
        self.missing = missing


def translate_osm_node(node: OsmNode, *, campus: CampusType) -> Pos:
    """Map a node onto a new, unpersisted POS."""

    name = node.name
    if name is None:
        raise IncompleteOsmNodeError(node.node_id, "name")

    return Pos(
        name=name,
        position=node.position,
        campus=campus,
        pos_type=_pos_type(node),
        description=node.tag("description") or "",
        street=node.tag("addr:street"),
        house_number=node.tag("addr:housenumber"),
        postal_code=node.tag("addr:postcode"),
        city=node.tag("addr:city"),
    )


def _pos_type(node: OsmNode) -> PosType:
    for key in ("amenity", "shop"):
        value = node.tag(key)
        if value is not None and value in _POS_TYPE_BY_TAG:
            return _POS_TYPE_BY_TAG[value]
    return PosType.CAFE


@dataclass
class OsmImportAdapter:
    """Fetch a node, map it to a POS and funnel it through the POS reconciler."""

    osm: OsmDataService
    reconciler: Reconciler[Pos]

    def import_node(self, node_id: OsmNodeId, campus: CampusType) -> Pos:
        log.info("Importing POS from OSM node %s (campus %s)", node_id, campus)
        # NotFoundError for unknown nodes propagates without retry
        node = self.osm.get_node(node_id)
        pos = translate_osm_node(node, campus=campus)
        return self.reconciler.upsert(pos)
