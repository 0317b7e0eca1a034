"""Domain layer - core models and interfaces."""

from station_traffic.domain.errors import DatasetLoadError
from station_traffic.domain.models import (
    Station,
    StationTraffic,
    TimeFilter,
    Trip,
)
from station_traffic.domain.ports import (
    CoordinateProjector,
    DisplayAdapter,
    StationRepository,
    TripRepository,
)

__all__ = [
    "CoordinateProjector",
    "DatasetLoadError",
    "DisplayAdapter",
    "Station",
    "StationRepository",
    "StationTraffic",
    "TimeFilter",
    "Trip",
    "TripRepository",
]
