"""Shared logging helpers for CampusCoffee."""

from __future__ import annotations

import logging

from .env import optional_env_var


def configure_logging(*, level: int | None = None, force: bool = False) -> None:
    """Initialise the root logger once.

    The level defaults to ``CAMPUSCOFFEE_LOG_LEVEL`` (or INFO). Pass ``force=True``
    to reconfigure during tests or when the API server takes over the process.
    """

    if level is None:
        name = optional_env_var("CAMPUSCOFFEE_LOG_LEVEL", "INFO") or "INFO"
        level = logging.getLevelNamesMapping().get(name.upper(), logging.INFO)

    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
        datefmt="%H:%M:%S",
        force=force,
    )
