"""OpenStreetMap lookup adapter."""

from __future__ import annotations

from .client import OsmAPIError, OsmClient, OsmNodeMissingError
from .schema import OsmElement, OsmNodeResponse
from .service import HttpOsmDataService
from .translator import translate_node

__all__ = [
    "HttpOsmDataService",
    "OsmAPIError",
    "OsmClient",
    "OsmElement",
    "OsmNodeMissingError",
    "OsmNodeResponse",
    "translate_node",
]
