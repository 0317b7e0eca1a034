"""Formatter for the selected time of day."""

from station_traffic.adapters.config.app_config import AppConfig
from station_traffic.domain.contracts.time_label_formatter import TimeLabelFormatterProtocol


class TimeLabelFormatter(TimeLabelFormatterProtocol):
    """Formats minutes since midnight according to configuration."""

    def __init__(self, config: AppConfig) -> None:
        """Initialize the formatter.

        Args:
            config: Application configuration with the time format setting.
        """
        self.config = config

    def format_minute_of_day(self, minute: int) -> str:
        """Format as '8:05 AM' (12h) or '08:05' (24h)."""
        hours, minutes = divmod(minute, 60)
        if self.config.time_format == "24h":
            return f"{hours:02d}:{minutes:02d}"
        suffix = "AM" if hours < 12 else "PM"
        display_hours = hours % 12 or 12
        return f"{display_hours}:{minutes:02d} {suffix}"
