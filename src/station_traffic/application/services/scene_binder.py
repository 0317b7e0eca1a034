"""Keyed binding of station traffic to circles on a drawing surface."""

import logging

from station_traffic.application.services.radius_scale import RadiusScale
from station_traffic.domain.contracts import SceneSurfaceProtocol
from station_traffic.domain.models import MarkStyle, StationTraffic, VisualMark
from station_traffic.domain.ports import CoordinateProjector

logger = logging.getLogger(__name__)


class SceneBinder:
    """Keeps exactly one circle per station, keyed by station id.

    Marks survive every recomputation: a filter change only rewrites the
    radius of the existing marks, and a viewport change only rewrites their
    position. The two updates are separate methods driven by separate
    triggers.
    """

    def __init__(
        self,
        surface: SceneSurfaceProtocol,
        radius_scale: RadiusScale,
        projector: CoordinateProjector,
        style: MarkStyle | None = None,
    ) -> None:
        """Initialize the binder.

        Args:
            surface: Surface that owns the drawn circle elements.
            radius_scale: Scale used for every radius update.
            projector: Source of screen positions for the current viewport.
            style: Static fill and stroke settings for new circles.
        """
        self.surface = surface
        self.radius_scale = radius_scale
        self.projector = projector
        self.style = style or MarkStyle()
        self._marks: dict[str, VisualMark] = {}

    @property
    def marks(self) -> dict[str, VisualMark]:
        """Current marks by station id (read-only view by convention)."""
        return self._marks

    def bind_initial(self, traffic: list[StationTraffic]) -> None:
        """Create a styled circle with radius and tooltip for every station.

        Stations that already have a mark keep it; their radius and tooltip
        are refreshed in place.
        """
        created = 0
        for entry in traffic:
            mark = self._marks.get(entry.station_id)
            if mark is None:
                mark = self._create_mark(entry)
                created += 1
            mark.tooltip = entry.tooltip()
            self.surface.set_title(mark.station_id, mark.tooltip)
            self._write_radius(mark, entry)
        logger.info(f"Bound {len(traffic)} stations ({created} new marks)")

    def rebind_radius(self, traffic: list[StationTraffic]) -> None:
        """Join marks against ``traffic`` by station id and update radii.

        Existing keys get a new radius only. Keys missing from ``traffic`` are
        removed. Unseen keys get a new, fully styled and positioned mark.
        """
        incoming = {entry.station_id: entry for entry in traffic}

        for station_id in [key for key in self._marks if key not in incoming]:
            del self._marks[station_id]
            self.surface.remove(station_id)
            logger.debug(f"Removed mark for station {station_id}")

        for station_id, entry in incoming.items():
            mark = self._marks.get(station_id)
            if mark is None:
                mark = self._create_mark(entry)
                mark.tooltip = entry.tooltip()
                self.surface.set_title(station_id, mark.tooltip)
                self._write_position(mark)
            self._write_radius(mark, entry)

    def reposition(self) -> None:
        """Move every mark to its station's current screen position."""
        for mark in self._marks.values():
            self._write_position(mark)

    def _create_mark(self, entry: StationTraffic) -> VisualMark:
        station = entry.station
        mark = VisualMark(station_id=station.id, lon=station.lon, lat=station.lat)
        self._marks[station.id] = mark
        self.surface.create_circle(station.id)
        self.surface.set_attributes(
            station.id,
            fill=self.style.fill,
            stroke=self.style.stroke,
            stroke_width=self.style.stroke_width,
            opacity=self.style.opacity,
        )
        return mark

    def _write_radius(self, mark: VisualMark, entry: StationTraffic) -> None:
        mark.radius = self.radius_scale.scale(entry.total_traffic)
        self.surface.set_attributes(mark.station_id, r=mark.radius)

    def _write_position(self, mark: VisualMark) -> None:
        point = self.projector.project(mark.lon, mark.lat)
        mark.cx = point.x
        mark.cy = point.y
        self.surface.set_attributes(mark.station_id, cx=mark.cx, cy=mark.cy)
