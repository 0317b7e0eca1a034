"""In-memory SVG surface holding one circle element per station."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from station_traffic.domain.contracts.scene_surface import SceneSurfaceProtocol

logger = logging.getLogger(__name__)

# Attribute names as written to SVG, where they differ from Python keywords
_SVG_ATTRIBUTE_NAMES = {"stroke_width": "stroke-width"}


@dataclass
class SvgCircle:
    """A ``<circle>`` element with a ``<title>`` tooltip."""

    key: str
    attributes: dict[str, str | float] = field(default_factory=dict)
    title: str = ""

    def template_data(self) -> dict[str, str]:
        """Attributes formatted for the LiveView template."""

        def fmt(name: str, default: str = "0") -> str:
            value = self.attributes.get(name)
            if value is None:
                return default
            if isinstance(value, float):
                return f"{value:.2f}"
            return str(value)

        return {
            "key": self.key,
            "cx": fmt("cx"),
            "cy": fmt("cy"),
            "r": fmt("r"),
            "fill": fmt("fill", "steelblue"),
            "stroke": fmt("stroke", "white"),
            "stroke_width": fmt("stroke-width", "1"),
            "opacity": fmt("opacity", "1"),
            "title": self.title,
        }


class SvgSceneSurface(SceneSurfaceProtocol):
    """Keyed store of SVG circles rendered by the traffic map template."""

    def __init__(self) -> None:
        self._elements: dict[str, SvgCircle] = {}
        self.created_count = 0
        self.removed_count = 0

    def create_circle(self, key: str) -> None:
        if key in self._elements:
            logger.warning(f"Circle for station {key} already exists, keeping it")
            return
        self._elements[key] = SvgCircle(key=key)
        self.created_count += 1

    def set_attributes(self, key: str, **attributes: str | float) -> None:
        element = self.element(key)
        for name, value in attributes.items():
            element.attributes[_SVG_ATTRIBUTE_NAMES.get(name, name)] = value

    def set_title(self, key: str, text: str) -> None:
        self.element(key).title = text

    def remove(self, key: str) -> None:
        if self._elements.pop(key, None) is not None:
            self.removed_count += 1

    def element(self, key: str) -> SvgCircle:
        """Return the element for ``key``.

        Raises:
            KeyError: If no circle exists for the key.
        """
        try:
            return self._elements[key]
        except KeyError:
            raise KeyError(f"No circle for station {key}") from None

    def elements(self) -> list[SvgCircle]:
        """All circles in creation order."""
        return list(self._elements.values())

    def template_data(self) -> list[dict[str, str]]:
        """All circles formatted for the LiveView template."""
        return [element.template_data() for element in self._elements.values()]
