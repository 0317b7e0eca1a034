"""Web Mercator projection matching the browser map's screen space."""

import logging
import math

from station_traffic.domain.models.viewport import ScreenPoint, Viewport
from station_traffic.domain.ports.coordinate_projector import CoordinateProjector

logger = logging.getLogger(__name__)

TILE_SIZE = 512
MAX_LATITUDE = 85.051129


def world_pixels(lon: float, lat: float, zoom: float) -> tuple[float, float]:
    """Project lon/lat to absolute Web Mercator pixels at ``zoom``."""
    world_size = TILE_SIZE * 2**zoom
    lat = max(-MAX_LATITUDE, min(MAX_LATITUDE, lat))
    x = (lon + 180.0) / 360.0 * world_size
    sin_lat = math.sin(math.radians(lat))
    y = (0.5 - math.log((1 + sin_lat) / (1 - sin_lat)) / (4 * math.pi)) * world_size
    return x, y


class WebMercatorProjector(CoordinateProjector):
    """Projects coordinates for the most recently reported viewport."""

    def __init__(
        self,
        viewport: Viewport,
        min_zoom: float = 0.0,
        max_zoom: float = 22.0,
    ) -> None:
        """Initialize the projector.

        Args:
            viewport: Viewport to project into until the next update.
            min_zoom: Lowest zoom the map allows.
            max_zoom: Highest zoom the map allows.
        """
        self.min_zoom = min_zoom
        self.max_zoom = max_zoom
        self.viewport = viewport
        self._origin = (0.0, 0.0)
        self.update_viewport(viewport)

    def update_viewport(self, viewport: Viewport) -> None:
        """Replace the viewport; earlier projected points become stale."""
        zoom = max(self.min_zoom, min(self.max_zoom, viewport.zoom))
        if zoom != viewport.zoom:
            viewport = Viewport(
                center_lon=viewport.center_lon,
                center_lat=viewport.center_lat,
                zoom=zoom,
                width=viewport.width,
                height=viewport.height,
            )
        self.viewport = viewport
        center_x, center_y = world_pixels(viewport.center_lon, viewport.center_lat, viewport.zoom)
        self._origin = (center_x - viewport.width / 2, center_y - viewport.height / 2)
        logger.debug(f"Viewport updated: {viewport}")

    def project(self, lon: float, lat: float) -> ScreenPoint:
        x, y = world_pixels(lon, lat, self.viewport.zoom)
        return ScreenPoint(x=x - self._origin[0], y=y - self._origin[1])
