"""PyView web adapter for displaying the station traffic map."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from station_traffic.adapters.config import AppConfig
from station_traffic.domain.ports import DisplayAdapter

from .servers import StaticFileServer
from .state import State
from .views.traffic_map import create_traffic_map_live_view

if TYPE_CHECKING:
    from station_traffic.domain.models import MapOverlay
    from station_traffic.domain.ports import TrafficControllerFactory

logger = logging.getLogger(__name__)

MAPLIBRE_VERSION = "4.7.1"


def head_markup(config: AppConfig) -> str:
    """Links and scripts for the page head: favicon, map engine and map hook."""
    maplibre = f"https://unpkg.com/maplibre-gl@{MAPLIBRE_VERSION}/dist/maplibre-gl"
    return "\n".join(
        [
            '<link rel="icon" href="/favicon.svg" type="image/svg+xml">',
            f'<link rel="stylesheet" href="{maplibre}.css">',
            f'<script src="{maplibre}.js"></script>',
            '<script src="/static/assets/traffic_map.js"></script>',
            f'<meta name="description" content="{config.title}">',
        ]
    )


class PyViewWebAdapter(DisplayAdapter):
    """PyView-based web adapter for the station traffic map."""

    def __init__(
        self,
        controller_factory: TrafficControllerFactory,
        overlays: list[MapOverlay],
        config: AppConfig,
    ) -> None:
        """Initialize the web adapter.

        Args:
            controller_factory: Builds a controller for each connected viewer.
            overlays: Line layers drawn by the browser map.
            config: Application configuration.
        """
        if not isinstance(config, AppConfig):
            raise TypeError("config must be an AppConfig instance")

        self.config = config
        self.overlays = overlays
        self.state = State(controller_factory, config)
        self._server: Any | None = None

    async def start(self) -> None:
        """Start the web server."""
        import uvicorn
        from markupsafe import Markup
        from pyview import PyView
        from pyview.playground.favicon import generate_favicon_svg
        from pyview.template import defaultRootTemplate
        from starlette.responses import Response
        from starlette.routing import Route

        app = PyView()

        favicon_svg = generate_favicon_svg(
            self.config.title,
            bg_color="#4682B4",
            text_color="#FFFFFF",
        )

        async def favicon_route(_request: Any) -> Response:
            response = Response(content=favicon_svg, media_type="image/svg+xml")
            response.headers["Cache-Control"] = "public, max-age=60, must-revalidate"
            return response

        app.routes.append(Route("/favicon.svg", favicon_route, methods=["GET"]))

        app.rootTemplate = defaultRootTemplate(
            title=self.config.title,
            title_suffix="",
            css=Markup(head_markup(self.config)),
        )

        live_view_class = create_traffic_map_live_view(self.state, self.config, self.overlays)
        app.add_live_view("/", live_view_class)
        logger.info(f"Registered traffic map at '/' with {len(self.overlays)} overlay(s)")

        async def healthz(_request: Any) -> Response:
            """Health check endpoint for load balancers and monitoring."""
            return Response(content="Ok", media_type="text/plain")

        app.routes.append(Route("/healthz", healthz, methods=["GET"]))

        StaticFileServer().register_routes(app)

        config = uvicorn.Config(
            app,
            host=self.config.host,
            port=self.config.port,
            log_level=self.config.log_level.lower(),
            reload=self.config.reload,
        )
        self._server = uvicorn.Server(config)
        logger.info(f"Serving on http://{self.config.host}:{self.config.port}")

        await self._server.serve()

    async def stop(self) -> None:
        """Stop the web server."""
        if self._server:
            self._server.should_exit = True
