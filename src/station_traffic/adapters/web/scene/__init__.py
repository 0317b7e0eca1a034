"""Drawing surfaces for the web adapter."""

from station_traffic.adapters.web.scene.svg_scene_surface import SvgCircle, SvgSceneSurface

__all__ = ["SvgCircle", "SvgSceneSurface"]
