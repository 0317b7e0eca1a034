"""Coordinate projector port."""

from typing import Protocol

from station_traffic.domain.models.viewport import ScreenPoint


class CoordinateProjector(Protocol):
    """Port for converting geographic coordinates to screen positions.

    A projected point is only valid until the next viewport change.
    """

    def project(self, lon: float, lat: float) -> ScreenPoint:
        """Project a longitude/latitude pair into current screen space."""
        ...
