"""Contracts (protocols) implemented by adapters and used by the core."""

from station_traffic.domain.contracts.scene_surface import SceneSurfaceProtocol
from station_traffic.domain.contracts.static_file_server import StaticFileServerProtocol
from station_traffic.domain.contracts.time_label_formatter import TimeLabelFormatterProtocol

__all__ = [
    "SceneSurfaceProtocol",
    "StaticFileServerProtocol",
    "TimeLabelFormatterProtocol",
]
