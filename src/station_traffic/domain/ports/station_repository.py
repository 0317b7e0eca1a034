"""Station repository port."""

from typing import Protocol

from station_traffic.domain.models.station import Station


class StationRepository(Protocol):
    """Port for loading the station set."""

    async def load_stations(self) -> list[Station]:
        """Load every station.

        Raises:
            DatasetLoadError: If the dataset cannot be fetched or parsed.
        """
        ...
