"""Domain port definitions for adapters."""

from __future__ import annotations

from .lookup import OsmDataService
from .persistence import EntityDataService, PosDataService, UserDataService

__all__ = [
    "EntityDataService",
    "OsmDataService",
    "PosDataService",
    "UserDataService",
]
