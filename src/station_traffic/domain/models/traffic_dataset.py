"""Loaded dataset with its full-day aggregation."""

from dataclasses import dataclass, field

from station_traffic.domain.models.station import Station
from station_traffic.domain.models.station_traffic import StationTraffic
from station_traffic.domain.models.trip import Trip


@dataclass(frozen=True)
class TrafficDataset:
    """Stations and trips loaded at startup, plus the unfiltered aggregation.

    Shared read-only by every session; filtered recomputations start from
    ``stations`` and ``trips`` and never modify them.
    """

    stations: list[Station]
    trips: list[Trip]
    full_day_traffic: list[StationTraffic] = field(default_factory=list)
    max_total_traffic: int = 0
