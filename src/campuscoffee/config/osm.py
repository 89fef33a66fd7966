"""OpenStreetMap configuration values."""

from __future__ import annotations

from dataclasses import dataclass

from campuscoffee import __version__

from .env import float_env_var, optional_env_var
from .http_resilience import RateLimit, ResilienceConfig, RetryPolicy

DEFAULT_OSM_BASE_URL = "https://api.openstreetmap.org/api/0.6"
OSM_TIMEOUT_SECONDS = 10.0


@dataclass(frozen=True, slots=True)
class OsmConfig:
    resilience: ResilienceConfig


def get_osm_config(*, resilience: ResilienceConfig | None = None) -> OsmConfig:
    if resilience is not None:
        return OsmConfig(resilience=resilience)

    base_url = optional_env_var("OSM_API_BASE_URL", DEFAULT_OSM_BASE_URL)
    # OSM's usage policy asks every client to identify itself.
    user_agent = optional_env_var("OSM_USER_AGENT", f"campuscoffee/{__version__}")
    return OsmConfig(
        resilience=ResilienceConfig(
            name="osm",
            base_url=base_url,
            timeout_seconds=float_env_var("OSM_TIMEOUT_SECONDS", OSM_TIMEOUT_SECONDS),
            ratelimit=RateLimit(max_calls=1, per_seconds=1.0),
            retry=RetryPolicy(total=3),
            default_headers={"User-Agent": user_agent or "campuscoffee"},
        )
    )
