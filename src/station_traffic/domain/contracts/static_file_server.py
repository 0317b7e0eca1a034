"""Protocol for serving the browser-side assets of the map page."""

from pathlib import Path
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from pyview import PyView


class StaticFileServerProtocol(Protocol):
    """Serves the LiveView client and the map hook script."""

    def register_routes(self, app: "PyView", static_path: Path | None = None) -> None:
        """Add asset routes to ``app``.

        Args:
            app: The PyView application instance.
            static_path: Directory mounted at ``/static``. Located
                automatically when omitted.
        """
        ...
