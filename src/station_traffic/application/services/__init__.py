"""Application services (use cases) for station traffic."""

from station_traffic.application.services.controller_factory import ReactiveControllerFactory
from station_traffic.application.services.dataset_loader import (
    build_traffic_dataset,
    load_traffic_dataset,
)
from station_traffic.application.services.radius_scale import (
    FILTERED_RANGE,
    UNFILTERED_RANGE,
    RadiusScale,
)
from station_traffic.application.services.reactive_controller import ReactiveController
from station_traffic.application.services.scene_binder import SceneBinder
from station_traffic.application.services.time_window_filter import (
    DEFAULT_WINDOW_MINUTES,
    TimeWindowFilter,
    minutes_since_midnight,
)
from station_traffic.application.services.traffic_aggregator import TrafficAggregator

__all__ = [
    "DEFAULT_WINDOW_MINUTES",
    "FILTERED_RANGE",
    "UNFILTERED_RANGE",
    "RadiusScale",
    "ReactiveController",
    "ReactiveControllerFactory",
    "SceneBinder",
    "TimeWindowFilter",
    "TrafficAggregator",
    "build_traffic_dataset",
    "load_traffic_dataset",
    "minutes_since_midnight",
]
