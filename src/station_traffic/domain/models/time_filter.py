"""Time-of-day filter domain model."""

from dataclasses import dataclass

MINUTES_PER_DAY = 24 * 60


@dataclass(frozen=True)
class TimeFilter:
    """Selected minute of the day, or no selection at all.

    ``minute`` is None when the filter is unset; otherwise it lies in
    [0, 1439].
    """

    minute: int | None = None

    def __post_init__(self) -> None:
        if self.minute is not None and not 0 <= self.minute < MINUTES_PER_DAY:
            raise ValueError(
                f"minute must be between 0 and {MINUTES_PER_DAY - 1}, got {self.minute}"
            )

    @property
    def is_set(self) -> bool:
        return self.minute is not None

    @classmethod
    def from_slider_value(cls, value: int, no_filter_value: int = -1) -> "TimeFilter":
        """Build a filter from a raw slider position.

        Args:
            value: Slider position in minutes since midnight.
            no_filter_value: Slider position meaning "any time".

        Returns:
            ANY_TIME for the sentinel position, a set filter otherwise.
        """
        if value == no_filter_value:
            return ANY_TIME
        return cls(minute=value)


ANY_TIME = TimeFilter()
