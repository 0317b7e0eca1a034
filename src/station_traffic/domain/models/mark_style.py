"""Static styling for station circles."""

from dataclasses import dataclass


@dataclass(frozen=True)
class MarkStyle:
    """Fill and stroke settings shared by every station circle."""

    fill: str = "steelblue"
    stroke: str = "white"
    stroke_width: float = 1.0
    opacity: float = 0.6
