"""OSM data service backing the ``OsmDataService`` port."""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING, Protocol

from campuscoffee.config import get_osm_config
from campuscoffee.domain.errors import NotFoundError

from .client import OsmClient, OsmNodeMissingError
from .translator import translate_node

if TYPE_CHECKING:
    from campuscoffee.config.osm import OsmConfig
    from campuscoffee.domain.model import OsmNode

    from .schema import OsmNodeResponse

log = getLogger(__name__)


class NodeLookupClient(Protocol):
    def fetch_node(self, *, node_id: int) -> OsmNodeResponse: ...


class HttpOsmDataService:
    """Resolve nodes against the live OSM API."""

    def __init__(
        self,
        *,
        config: OsmConfig | None = None,
        client: NodeLookupClient | None = None,
    ) -> None:
        self._client = client or OsmClient(config=config or get_osm_config())

    def get_node(self, node_id: int) -> OsmNode:
        try:
            payload = self._client.fetch_node(node_id=node_id)
            return translate_node(payload, node_id=node_id)
        except OsmNodeMissingError as exc:
            log.warning("OSM node %s not found", node_id)
            raise NotFoundError("OSM node", "ID", node_id) from exc


if TYPE_CHECKING:
    from campuscoffee.domain.ports import OsmDataService

    _osm_check: OsmDataService = HttpOsmDataService()
