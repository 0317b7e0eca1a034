"""Square-root radius scale for station circles."""

import math

from station_traffic.domain.models import RadiusRange, TimeFilter

UNFILTERED_RANGE = RadiusRange(lower=0.0, upper=25.0)
FILTERED_RANGE = RadiusRange(lower=3.0, upper=50.0)


class RadiusScale:
    """Maps a traffic count to a circle radius.

    The domain is ``[0, max_total_traffic]`` where the maximum comes from the
    full-day aggregation and stays fixed while filters change. Only the
    output range switches, between the unfiltered and the (wider) filtered
    preset.
    """

    def __init__(
        self,
        max_total_traffic: int,
        unfiltered_range: RadiusRange = UNFILTERED_RANGE,
        filtered_range: RadiusRange = FILTERED_RANGE,
    ) -> None:
        if max_total_traffic < 0:
            raise ValueError(f"max_total_traffic must be non-negative, got {max_total_traffic}")
        self.max_total_traffic = max_total_traffic
        self.unfiltered_range = unfiltered_range
        self.filtered_range = filtered_range
        self.range = unfiltered_range

    def use_range_for(self, time_filter: TimeFilter) -> RadiusRange:
        """Switch to the preset matching the filter and return it."""
        self.range = self.filtered_range if time_filter.is_set else self.unfiltered_range
        return self.range

    def scale(self, total_traffic: float) -> float:
        """Radius for a traffic count under the active range."""
        if total_traffic < 0:
            raise ValueError(f"total_traffic must be non-negative, got {total_traffic}")
        lower, upper = self.range.lower, self.range.upper
        # Degenerate domain: nothing was ridden all day.
        if self.max_total_traffic == 0:
            return lower
        fraction = math.sqrt(total_traffic) / math.sqrt(self.max_total_traffic)
        return lower + (upper - lower) * fraction
