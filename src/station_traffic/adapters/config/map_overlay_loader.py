"""Map overlay configuration loader."""

import logging
from typing import Any

from station_traffic.adapters.config.app_config import AppConfig
from station_traffic.domain.models.map_overlay import MapOverlay

logger = logging.getLogger(__name__)


class MapOverlayLoader:
    """Loads map overlay layers from app config."""

    @staticmethod
    def load_overlay_from_data(overlay_data: dict[str, Any]) -> MapOverlay | None:
        """Load a single overlay from a data dict, or None if it is unusable."""
        if not isinstance(overlay_data, dict):
            return None

        overlay_id = overlay_data.get("id")
        url = overlay_data.get("url")
        if not overlay_id or not url:
            return None

        color = overlay_data.get("color", "green")
        if not isinstance(color, str):
            color = "green"

        try:
            width = float(overlay_data.get("width", 3.0))
        except (ValueError, TypeError):
            width = 3.0

        try:
            opacity = float(overlay_data.get("opacity", 0.4))
            # Clamp to valid range [0.0, 1.0]
            opacity = max(0.0, min(1.0, opacity))
        except (ValueError, TypeError):
            opacity = 0.4

        return MapOverlay(
            id=str(overlay_id),
            url=str(url),
            color=color,
            width=width,
            opacity=opacity,
        )

    @staticmethod
    def load(config: AppConfig) -> list[MapOverlay]:
        """Load every overlay declared in the config file.

        Raises:
            ValueError: If overlay ids are not unique.
        """
        overlays: list[MapOverlay] = []
        for overlay_data in config.get_overlays_config():
            overlay = MapOverlayLoader.load_overlay_from_data(overlay_data)
            if overlay is None:
                logger.warning(f"Skipping overlay without id or url: {overlay_data}")
                continue
            overlays.append(overlay)

        ids = [overlay.id for overlay in overlays]
        if len(ids) != len(set(ids)):
            duplicates = {i for i in ids if ids.count(i) > 1}
            raise ValueError(f"Overlay ids must be unique. Duplicate ids found: {duplicates}")
        return overlays
