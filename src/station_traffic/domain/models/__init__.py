"""Domain models for station traffic."""

from station_traffic.domain.models.map_overlay import MapOverlay
from station_traffic.domain.models.mark_style import MarkStyle
from station_traffic.domain.models.radius_range import RadiusRange
from station_traffic.domain.models.station import Station
from station_traffic.domain.models.station_traffic import StationTraffic
from station_traffic.domain.models.time_filter import ANY_TIME, MINUTES_PER_DAY, TimeFilter
from station_traffic.domain.models.time_label import TimeLabel
from station_traffic.domain.models.traffic_dataset import TrafficDataset
from station_traffic.domain.models.trip import Trip
from station_traffic.domain.models.viewport import ScreenPoint, Viewport
from station_traffic.domain.models.visual_mark import VisualMark

__all__ = [
    "ANY_TIME",
    "MINUTES_PER_DAY",
    "MapOverlay",
    "MarkStyle",
    "RadiusRange",
    "ScreenPoint",
    "Station",
    "StationTraffic",
    "TimeFilter",
    "TimeLabel",
    "TrafficDataset",
    "Trip",
    "Viewport",
    "VisualMark",
]
