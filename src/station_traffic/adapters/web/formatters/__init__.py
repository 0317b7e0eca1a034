"""Formatters for web display."""

from station_traffic.adapters.web.formatters.time_label_formatter import TimeLabelFormatter

__all__ = ["TimeLabelFormatter"]
