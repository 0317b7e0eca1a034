"""Configuration adapters."""

from station_traffic.adapters.config.app_config import AppConfig
from station_traffic.adapters.config.map_overlay_loader import MapOverlayLoader

__all__ = ["AppConfig", "MapOverlayLoader"]
