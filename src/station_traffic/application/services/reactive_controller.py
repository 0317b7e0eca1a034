"""Controller wiring slider input and viewport changes to the scene."""

import logging

from station_traffic.application.services.radius_scale import RadiusScale
from station_traffic.application.services.scene_binder import SceneBinder
from station_traffic.application.services.time_window_filter import TimeWindowFilter
from station_traffic.application.services.traffic_aggregator import TrafficAggregator
from station_traffic.domain.contracts import TimeLabelFormatterProtocol
from station_traffic.domain.models import (
    ANY_TIME,
    StationTraffic,
    TimeFilter,
    TimeLabel,
    TrafficDataset,
)

logger = logging.getLogger(__name__)


class ReactiveController:
    """Owns one session's time filter and drives recomputation.

    Slider input runs filter -> aggregate -> scale -> rebind radius.
    Viewport changes only reposition the existing marks.
    """

    def __init__(
        self,
        dataset: TrafficDataset,
        binder: SceneBinder,
        radius_scale: RadiusScale,
        label_formatter: TimeLabelFormatterProtocol,
        aggregator: TrafficAggregator | None = None,
        window_filter: TimeWindowFilter | None = None,
        no_filter_value: int = -1,
    ) -> None:
        """Initialize the controller.

        Args:
            dataset: Shared stations, trips and full-day aggregation.
            binder: Scene binder for this session's marks.
            radius_scale: Scale whose range follows the time filter.
            label_formatter: Formatter for the time label.
            aggregator: Traffic aggregator.
            window_filter: Time-of-day trip filter.
            no_filter_value: Raw slider value meaning "any time".
        """
        self.dataset = dataset
        self.binder = binder
        self.radius_scale = radius_scale
        self.label_formatter = label_formatter
        self.aggregator = aggregator or TrafficAggregator()
        self.window_filter = window_filter or TimeWindowFilter()
        self.no_filter_value = no_filter_value
        self.time_filter: TimeFilter = ANY_TIME
        self.label = TimeLabel()

    def start(self) -> None:
        """Draw the full-day traffic and apply the initial (unset) filter."""
        self.binder.bind_initial(self.dataset.full_day_traffic)
        self.binder.reposition()
        self._apply(ANY_TIME)

    def handle_time_input(self, raw_value: int | str) -> TimeFilter:
        """React to a new slider position.

        Args:
            raw_value: Slider value as sent by the browser.

        Returns:
            The filter now in effect.

        Raises:
            ValueError: If the value is not an integer or is out of range.
        """
        value = int(raw_value)
        time_filter = TimeFilter.from_slider_value(value, self.no_filter_value)
        self._apply(time_filter)
        return time_filter

    def handle_viewport_change(self) -> None:
        """React to pan, zoom, resize or move-end of the map."""
        self.binder.reposition()

    def recompute(self, time_filter: TimeFilter) -> list[StationTraffic]:
        """Aggregate the base trips narrowed to ``time_filter``."""
        trips = self.window_filter.filter_by_time(self.dataset.trips, time_filter)
        return self.aggregator.aggregate(self.dataset.stations, trips)

    def _apply(self, time_filter: TimeFilter) -> None:
        self.time_filter = time_filter
        self.label = self._label_for(time_filter)

        traffic = self.recompute(time_filter)
        self.radius_scale.use_range_for(time_filter)
        self.binder.rebind_radius(traffic)
        logger.debug(
            f"Applied time filter {time_filter.minute}: "
            f"{sum(entry.total_traffic for entry in traffic)} station visits"
        )

    def _label_for(self, time_filter: TimeFilter) -> TimeLabel:
        if time_filter.minute is None:
            return TimeLabel(text="", show_any_time=True)
        return TimeLabel(
            text=self.label_formatter.format_minute_of_day(time_filter.minute),
            show_any_time=False,
        )
