"""Domain enums (pure, dependency-light)."""

from __future__ import annotations

from enum import StrEnum


class EntityType(StrEnum):
    """Discriminator used in log lines and error payloads."""

    POS = "POS"
    USER = "User"


class CampusType(StrEnum):
    """Campus area a point of sale belongs to."""

    NORTH = "NORTH"
    SOUTH = "SOUTH"
    EAST = "EAST"
    WEST = "WEST"
    CENTER = "CENTER"


class PosType(StrEnum):
    CAFE = "CAFE"
    VENDING_MACHINE = "VENDING_MACHINE"
    BAKERY = "BAKERY"
    CAFETERIA = "CAFETERIA"
