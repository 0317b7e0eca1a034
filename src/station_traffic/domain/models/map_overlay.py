"""Map overlay domain model."""

from dataclasses import dataclass


@dataclass(frozen=True)
class MapOverlay:
    """A GeoJSON line layer drawn by the browser map (e.g. bike lanes)."""

    id: str
    url: str
    color: str = "green"
    width: float = 3.0
    opacity: float = 0.4
