"""Traffic controller ports used by display adapters."""

from typing import Protocol

from station_traffic.domain.contracts.scene_surface import SceneSurfaceProtocol
from station_traffic.domain.models.time_filter import TimeFilter
from station_traffic.domain.models.time_label import TimeLabel
from station_traffic.domain.ports.coordinate_projector import CoordinateProjector


class TrafficController(Protocol):
    """Port for one viewer's reactive traffic map."""

    time_filter: TimeFilter
    label: TimeLabel

    def start(self) -> None:
        """Draw the initial full-day scene."""
        ...

    def handle_time_input(self, raw_value: int | str) -> TimeFilter:
        """Apply a raw slider value and return the filter now in effect."""
        ...

    def handle_viewport_change(self) -> None:
        """Reposition every mark for the current viewport."""
        ...


class TrafficControllerFactory(Protocol):
    """Port for creating a controller bound to a surface and projector."""

    def create_controller(
        self, surface: SceneSurfaceProtocol, projector: CoordinateProjector
    ) -> TrafficController:
        """Create a controller drawing onto ``surface`` through ``projector``."""
        ...
