"""Factory wiring a ReactiveController for one viewer."""

from station_traffic.application.services.radius_scale import (
    FILTERED_RANGE,
    UNFILTERED_RANGE,
    RadiusScale,
)
from station_traffic.application.services.reactive_controller import ReactiveController
from station_traffic.application.services.scene_binder import SceneBinder
from station_traffic.application.services.time_window_filter import TimeWindowFilter
from station_traffic.application.services.traffic_aggregator import TrafficAggregator
from station_traffic.domain.contracts import SceneSurfaceProtocol, TimeLabelFormatterProtocol
from station_traffic.domain.models import MarkStyle, RadiusRange, TrafficDataset
from station_traffic.domain.ports import CoordinateProjector


class ReactiveControllerFactory:
    """Builds controllers that share one dataset but own their scene state."""

    def __init__(
        self,
        dataset: TrafficDataset,
        label_formatter: TimeLabelFormatterProtocol,
        unfiltered_range: RadiusRange = UNFILTERED_RANGE,
        filtered_range: RadiusRange = FILTERED_RANGE,
        style: MarkStyle | None = None,
        window_filter: TimeWindowFilter | None = None,
        no_filter_value: int = -1,
    ) -> None:
        self.dataset = dataset
        self.label_formatter = label_formatter
        self.unfiltered_range = unfiltered_range
        self.filtered_range = filtered_range
        self.style = style or MarkStyle()
        self.aggregator = TrafficAggregator()
        self.window_filter = window_filter or TimeWindowFilter()
        self.no_filter_value = no_filter_value

    def create_controller(
        self, surface: SceneSurfaceProtocol, projector: CoordinateProjector
    ) -> ReactiveController:
        """Create a controller with its own radius scale and scene binder."""
        radius_scale = RadiusScale(
            self.dataset.max_total_traffic,
            unfiltered_range=self.unfiltered_range,
            filtered_range=self.filtered_range,
        )
        binder = SceneBinder(surface, radius_scale, projector, self.style)
        return ReactiveController(
            self.dataset,
            binder,
            radius_scale,
            self.label_formatter,
            aggregator=self.aggregator,
            window_filter=self.window_filter,
            no_filter_value=self.no_filter_value,
        )
