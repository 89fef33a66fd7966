"""HTTP server settings."""

from __future__ import annotations

from dataclasses import dataclass

from .env import optional_env_var
from .errors import ConfigurationError

DEFAULT_API_HOST = "127.0.0.1"
DEFAULT_API_PORT = 8080


@dataclass(frozen=True, slots=True)
class ApiConfig:
    host: str = DEFAULT_API_HOST
    port: int = DEFAULT_API_PORT


def get_api_config() -> ApiConfig:
    host = optional_env_var("CAMPUSCOFFEE_API_HOST", DEFAULT_API_HOST) or DEFAULT_API_HOST
    raw_port = optional_env_var("CAMPUSCOFFEE_API_PORT")
    if raw_port is None:
        return ApiConfig(host=host)
    try:
        port = int(raw_port)
    except ValueError as exc:
        msg = f"CAMPUSCOFFEE_API_PORT must be an integer, got {raw_port!r}"
        raise ConfigurationError(msg) from exc
    return ApiConfig(host=host, port=port)
