from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from campuscoffee.config import ResilienceConfig, RetryPolicy, get_osm_config

if TYPE_CHECKING:
    from campuscoffee.config import OsmConfig

OSM_TEST_BASE_URL = "https://osm.test/api/0.6"


@pytest.fixture
def osm_config() -> OsmConfig:
    # no retries and no rate limit: mocked responses are final
    return get_osm_config(
        resilience=ResilienceConfig(
            name="osm-test",
            base_url=OSM_TEST_BASE_URL,
            retry=RetryPolicy(total=0),
            default_headers={"User-Agent": "campuscoffee-tests"},
        )
    )


@pytest.fixture
def node_payload() -> dict[str, object]:
    return {
        "version": "0.6",
        "generator": "OpenStreetMap server",
        "copyright": "OpenStreetMap and contributors",
        "attribution": "http://www.openstreetmap.org/copyright",
        "license": "http://opendatacommons.org/licenses/odbl/1-0/",
        "elements": [
            {
                "type": "node",
                "id": 555,
                "lat": 49.41,
                "lon": 8.71,
                "timestamp": "2024-05-01T10:00:00Z",
                "version": 4,
                "changeset": 123456,
                "user": "mapper",
                "uid": 42,
                "tags": {
                    "amenity": "cafe",
                    "name": "Central Café",
                    "addr:city": "Heidelberg",
                    "opening_hours": "Mo-Fr 08:00-18:00",
                },
            }
        ],
    }
