"""Application configuration helpers."""

from __future__ import annotations

from .api import ApiConfig, get_api_config
from .env import optional_env_var
from .errors import ConfigurationError
from .http_resilience import RateLimit, ResilienceConfig, RetryPolicy
from .logging import configure_logging
from .osm import OsmConfig, get_osm_config
from .storage import DatabaseConfig, StorageConfig, get_database_config, get_storage_config

__all__ = [
    "ApiConfig",
    "ConfigurationError",
    "DatabaseConfig",
    "OsmConfig",
    "RateLimit",
    "ResilienceConfig",
    "RetryPolicy",
    "StorageConfig",
    "configure_logging",
    "get_api_config",
    "get_database_config",
    "get_osm_config",
    "get_storage_config",
    "optional_env_var",
]
