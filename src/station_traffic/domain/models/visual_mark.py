"""Visual mark domain model."""

from dataclasses import dataclass


@dataclass
class VisualMark:
    """The circle drawn for one station.

    Position and radius are derived values; they are rewritten from the
    station's traffic and the current viewport and never read back.
    """

    station_id: str
    lon: float
    lat: float
    radius: float = 0.0
    cx: float = 0.0
    cy: float = 0.0
    tooltip: str = ""
