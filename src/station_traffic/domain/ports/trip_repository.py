"""Trip repository port."""

from typing import Protocol

from station_traffic.domain.models.trip import Trip


class TripRepository(Protocol):
    """Port for loading the trip log."""

    async def load_trips(self) -> list[Trip]:
        """Load every trip.

        Raises:
            DatasetLoadError: If the dataset cannot be fetched or parsed.
        """
        ...
