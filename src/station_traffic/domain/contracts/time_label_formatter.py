"""Protocol for formatting the selected time of day."""

from typing import Protocol


class TimeLabelFormatterProtocol(Protocol):
    """Protocol for turning a minute of the day into label text."""

    def format_minute_of_day(self, minute: int) -> str:
        """Format minutes since midnight, e.g. 485 -> '8:05 AM'.

        Args:
            minute: Minutes since midnight in [0, 1439].

        Returns:
            Formatted time.
        """
        ...
