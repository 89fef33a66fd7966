"""Domain primitives: scalar aliases + small value objects."""

from __future__ import annotations

from dataclasses import dataclass

type EntityId = int
type OsmNodeId = int


@dataclass(frozen=True)
class GeoPosition:
    latitude: float
    longitude: float

    def __post_init__(self) -> None:
        if not -90.0 <= self.latitude <= 90.0:  # noqa: PLR2004
            raise ValueError(f"latitude out of range: {self.latitude}")
        if not -180.0 <= self.longitude <= 180.0:  # noqa: PLR2004
            raise ValueError(f"longitude out of range: {self.longitude}")

    def __composite_values__(self) -> tuple[float, float]:
        """For SQLAlchemy composite columns (adapter-side convenience)."""
        return (self.latitude, self.longitude)
