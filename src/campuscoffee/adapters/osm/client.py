"""OpenStreetMap API client."""

from __future__ import annotations

import asyncio
from http import HTTPStatus
from logging import getLogger
from typing import TYPE_CHECKING

import httpx
from pydantic import ValidationError

from campuscoffee.adapters.http_resilience import ResilientClient

from .schema import OsmNodeResponse

if TYPE_CHECKING:
    from collections.abc import Callable

    from campuscoffee.config.http_resilience import ResilienceConfig
    from campuscoffee.config.osm import OsmConfig

log = getLogger(__name__)

# 410 Gone is what OSM answers for deleted nodes.
_MISSING_STATUSES = frozenset({HTTPStatus.NOT_FOUND, HTTPStatus.GONE})


class OsmAPIError(RuntimeError):
    """Raised when the OSM API returns an unexpected response."""


class OsmNodeMissingError(LookupError):
    """Raised when OSM has no (visible) node with the requested id."""

    def __init__(self, node_id: int) -> None:
        super().__init__(f"OSM node {node_id} not found")
        self.node_id = node_id


class OsmClient:
    """Low-level HTTP client for the OSM editing API (read-only use)."""

    def __init__(
        self,
        *,
        config: OsmConfig,
        client_factory: Callable[[ResilienceConfig], ResilientClient] | None = None,
    ) -> None:
        self._config = config
        self._resilience = config.resilience
        self._client_factory = client_factory or ResilientClient

    def fetch_node(self, *, node_id: int) -> OsmNodeResponse:
        return asyncio.run(self._fetch_node_async(node_id=node_id))

    async def _fetch_node_async(self, *, node_id: int) -> OsmNodeResponse:
        if self._resilience.base_url is None:
            raise OsmAPIError("Missing OSM base_url in resilience configuration")

        log.debug("Fetching OSM node %s", node_id)
        async with self._client_factory(self._resilience) as client:
            response = await client.get(f"node/{node_id}.json")

        if response.status_code in _MISSING_STATUSES:
            raise OsmNodeMissingError(node_id)
        try:
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            raise OsmAPIError(f"OSM lookup for node {node_id} failed: {exc}") from exc

        try:
            payload = response.json()
        except ValueError as exc:
            raise OsmAPIError("OSM response is not valid JSON") from exc
        if not isinstance(payload, dict):
            raise OsmAPIError("Unexpected OSM response payload")

        try:
            return OsmNodeResponse.model_validate(payload)
        except ValidationError as exc:
            raise OsmAPIError(f"Unexpected OSM response payload: {exc}") from exc
