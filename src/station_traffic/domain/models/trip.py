"""Trip domain model."""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class Trip:
    """A single ride between two stations.

    Station ids may reference stations that are not part of the loaded
    station set. Only the time-of-day component of the timestamps is used.
    """

    start_station_id: str
    end_station_id: str
    started_at: datetime
    ended_at: datetime
