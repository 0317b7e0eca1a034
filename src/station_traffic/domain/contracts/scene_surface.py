"""Protocol for the surface that draws station circles."""

from typing import Protocol


class SceneSurfaceProtocol(Protocol):
    """Keyed drawing surface for circular marks."""

    def create_circle(self, key: str) -> None:
        """Create an empty circle element for the key.

        Args:
            key: Station id the element belongs to.
        """
        ...

    def set_attributes(self, key: str, **attributes: str | float) -> None:
        """Update attributes of an existing element in place.

        Args:
            key: Station id of the element.
            **attributes: Attribute names and values, e.g. ``r=4.0``.
        """
        ...

    def set_title(self, key: str, text: str) -> None:
        """Attach tooltip text to an element.

        Args:
            key: Station id of the element.
            text: Tooltip text.
        """
        ...

    def remove(self, key: str) -> None:
        """Remove the element for the key, if present.

        Args:
            key: Station id of the element.
        """
        ...
