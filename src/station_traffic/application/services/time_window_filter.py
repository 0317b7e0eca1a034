"""Time-of-day window filtering of trips."""

from datetime import datetime

from station_traffic.domain.models import TimeFilter, Trip

DEFAULT_WINDOW_MINUTES = 60


def minutes_since_midnight(moment: datetime) -> int:
    """Return the minute of the day, ignoring the date and seconds."""
    return moment.hour * 60 + moment.minute


class TimeWindowFilter:
    """Keeps trips that start or end near a selected time of day."""

    def __init__(self, window_minutes: int = DEFAULT_WINDOW_MINUTES) -> None:
        """Initialize the filter.

        Args:
            window_minutes: Inclusive distance from the selected minute.
        """
        if window_minutes < 0:
            raise ValueError(f"window_minutes must be non-negative, got {window_minutes}")
        self.window_minutes = window_minutes

    def filter_by_time(self, trips: list[Trip], time_filter: TimeFilter) -> list[Trip]:
        """Return the trips inside the window around ``time_filter``.

        With no time selected the input list itself is returned. There is
        no wraparound at midnight: 23:50 and 00:10 are 1420 minutes apart.

        Args:
            trips: Trips to filter; never modified.
            time_filter: Selected minute of the day, or ANY_TIME.

        Returns:
            ``trips`` unchanged, or a new list of the matching trips.
        """
        if time_filter.minute is None:
            return trips

        reference = time_filter.minute
        window = self.window_minutes
        return [
            trip
            for trip in trips
            if abs(minutes_since_midnight(trip.started_at) - reference) <= window
            or abs(minutes_since_midnight(trip.ended_at) - reference) <= window
        ]
