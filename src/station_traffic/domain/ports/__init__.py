"""Ports (interfaces) for the ports-and-adapters architecture."""

from station_traffic.domain.ports.coordinate_projector import CoordinateProjector
from station_traffic.domain.ports.display_adapter import DisplayAdapter
from station_traffic.domain.ports.station_repository import StationRepository
from station_traffic.domain.ports.traffic_controller import (
    TrafficController,
    TrafficControllerFactory,
)
from station_traffic.domain.ports.trip_repository import TripRepository

__all__ = [
    "CoordinateProjector",
    "DisplayAdapter",
    "StationRepository",
    "TrafficController",
    "TrafficControllerFactory",
    "TripRepository",
]
