"""Station traffic domain model."""

from dataclasses import dataclass

from station_traffic.domain.models.station import Station


@dataclass(frozen=True)
class StationTraffic:
    """Arrival and departure counts for one station over a set of trips."""

    station: Station
    arrivals: int = 0
    departures: int = 0

    @property
    def station_id(self) -> str:
        return self.station.id

    @property
    def total_traffic(self) -> int:
        return self.arrivals + self.departures

    def tooltip(self) -> str:
        """Tooltip text shown on the station's circle."""
        return (
            f"{self.total_traffic} trips "
            f"({self.departures} departures, {self.arrivals} arrivals)"
        )
