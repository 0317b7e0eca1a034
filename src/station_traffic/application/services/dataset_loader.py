"""Startup loading of the station and trip datasets."""

import asyncio
import logging

from station_traffic.application.services.traffic_aggregator import TrafficAggregator
from station_traffic.domain.models import Station, TrafficDataset, Trip
from station_traffic.domain.ports import StationRepository, TripRepository

logger = logging.getLogger(__name__)


def build_traffic_dataset(
    stations: list[Station],
    trips: list[Trip],
    aggregator: TrafficAggregator | None = None,
) -> TrafficDataset:
    """Run the one full-day aggregation and wrap it with its inputs.

    Args:
        stations: Loaded stations.
        trips: Loaded trips.
        aggregator: Aggregator to use.

    Returns:
        Dataset carrying the unfiltered traffic and its maximum total.
    """
    aggregator = aggregator or TrafficAggregator()
    full_day_traffic = aggregator.aggregate(stations, trips)
    max_total_traffic = max((entry.total_traffic for entry in full_day_traffic), default=0)
    return TrafficDataset(
        stations=stations,
        trips=trips,
        full_day_traffic=full_day_traffic,
        max_total_traffic=max_total_traffic,
    )


async def load_traffic_dataset(
    station_repository: StationRepository,
    trip_repository: TripRepository,
    aggregator: TrafficAggregator | None = None,
) -> TrafficDataset:
    """Load stations and trips concurrently, then aggregate the full day.

    The first failing load cancels the other before its error is re-raised.

    Raises:
        DatasetLoadError: If either load fails. Nothing is aggregated then.
    """
    try:
        async with asyncio.TaskGroup() as group:
            stations_task = group.create_task(station_repository.load_stations())
            trips_task = group.create_task(trip_repository.load_trips())
    except ExceptionGroup as e:
        raise e.exceptions[0] from None

    stations, trips = stations_task.result(), trips_task.result()
    logger.info(f"Loaded {len(stations)} stations and {len(trips)} trips")
    logger.debug(f"First trips: {trips[:5]}")

    dataset = build_traffic_dataset(stations, trips, aggregator)
    logger.debug(
        "Stations with traffic: "
        + ", ".join(
            f"{entry.station_id}={entry.total_traffic}" for entry in dataset.full_day_traffic[:5]
        )
    )
    logger.info(f"Busiest station has {dataset.max_total_traffic} trips")
    return dataset
