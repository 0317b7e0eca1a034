"""Bike-share station traffic map with a time-of-day filter."""

__version__ = "0.1.0"
