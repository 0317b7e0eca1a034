"""Per-station arrival and departure counting."""

import logging
from collections import Counter
from collections.abc import Iterable

from station_traffic.domain.models import Station, StationTraffic, Trip

logger = logging.getLogger(__name__)


class TrafficAggregator:
    """Rolls a trip log up into arrivals, departures and totals per station."""

    @staticmethod
    def departures_by_station(trips: Iterable[Trip]) -> Counter[str]:
        """Count trips per start station id."""
        return Counter(trip.start_station_id for trip in trips)

    @staticmethod
    def arrivals_by_station(trips: Iterable[Trip]) -> Counter[str]:
        """Count trips per end station id."""
        return Counter(trip.end_station_id for trip in trips)

    def aggregate(self, stations: list[Station], trips: list[Trip]) -> list[StationTraffic]:
        """Compute traffic for every station from the given trips.

        Trips whose station ids are not in ``stations`` are ignored. The
        result is built fresh on every call, so the same stations can be
        aggregated against any number of trip subsets.

        Args:
            stations: Stations to report on, in output order.
            trips: Trips to count, in any order.

        Returns:
            One StationTraffic per station, in the order of ``stations``.
        """
        departures = self.departures_by_station(trips)
        arrivals = self.arrivals_by_station(trips)

        traffic = [
            StationTraffic(
                station=station,
                arrivals=arrivals.get(station.id, 0),
                departures=departures.get(station.id, 0),
            )
            for station in stations
        ]
        logger.debug(f"Aggregated {len(trips)} trips across {len(stations)} stations")
        return traffic
