"""Station domain model."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Station:
    """Represents a bike-share docking station."""

    id: str  # Short station code, unique across the loaded station set
    lon: float
    lat: float
    name: str | None = None
