"""Dataset loading shared by the web app and the CLI."""

import aiohttp

from station_traffic.adapters.config import AppConfig
from station_traffic.adapters.data import CsvTripRepository, JsonStationRepository, SourceReader
from station_traffic.application.services import TrafficAggregator, load_traffic_dataset
from station_traffic.domain.models import TrafficDataset


async def load_dataset(config: AppConfig) -> TrafficDataset:
    """Load stations and trips named in the config, concurrently.

    Raises:
        DatasetLoadError: If either dataset cannot be loaded.
    """
    async with aiohttp.ClientSession() as session:
        reader = SourceReader(session, timeout_seconds=config.load_timeout_seconds)
        station_repo = JsonStationRepository(
            config.stations_url, reader, id_field=config.station_id_field
        )
        trip_repo = CsvTripRepository(config.trips_url, reader)
        return await load_traffic_dataset(station_repo, trip_repo, TrafficAggregator())
