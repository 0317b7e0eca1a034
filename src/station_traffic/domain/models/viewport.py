"""Viewport and screen coordinate models."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ScreenPoint:
    """Pixel position relative to the map container's top-left corner."""

    x: float
    y: float


@dataclass(frozen=True)
class Viewport:
    """Visible map area as reported by the browser map."""

    center_lon: float
    center_lat: float
    zoom: float
    width: float
    height: float

    def __post_init__(self) -> None:
        if self.width < 0 or self.height < 0:
            raise ValueError("viewport width and height must be non-negative")
