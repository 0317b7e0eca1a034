"""State management class."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from station_traffic.adapters.config.app_config import AppConfig
from station_traffic.adapters.projection import WebMercatorProjector
from station_traffic.adapters.web.scene import SvgSceneSurface

from .map_session import MapSession

if TYPE_CHECKING:
    from pyview import LiveViewSocket

    from station_traffic.domain.ports import TrafficControllerFactory

    from .traffic_map_state import TrafficMapState

logger = logging.getLogger(__name__)


class State:
    """Tracks one map session per connected socket."""

    def __init__(self, controller_factory: TrafficControllerFactory, config: AppConfig) -> None:
        """Initialize the state manager.

        Args:
            controller_factory: Builds a controller for each new session.
            config: Application configuration.
        """
        if not isinstance(config, AppConfig):
            raise TypeError("config must be an AppConfig instance")
        if not callable(getattr(controller_factory, "create_controller", None)):
            raise TypeError("controller_factory must implement TrafficControllerFactory protocol")

        self.controller_factory = controller_factory
        self.config = config
        self.sessions: dict[LiveViewSocket[TrafficMapState], MapSession] = {}

    def create_session(self) -> MapSession:
        """Build and start a session positioned on the configured initial viewport."""
        projector = WebMercatorProjector(
            self.config.initial_viewport(),
            min_zoom=self.config.map_min_zoom,
            max_zoom=self.config.map_max_zoom,
        )
        surface = SvgSceneSurface()
        controller = self.controller_factory.create_controller(surface, projector)
        controller.start()
        return MapSession(controller=controller, projector=projector, surface=surface)

    def register_socket(self, socket: LiveViewSocket[TrafficMapState]) -> MapSession:
        """Return the socket's session, creating it on first registration.

        Idempotent: pyview mounts a view twice (static render, then the live
        connection) and the second mount may reuse the socket.
        """
        session = self.sessions.get(socket)
        if session is None:
            session = self.create_session()
            self.sessions[socket] = session
            logger.info(f"Registered map session, total sessions: {len(self.sessions)}")
        return session

    def get_session(self, socket: LiveViewSocket[TrafficMapState]) -> MapSession | None:
        """Return the socket's session, if registered."""
        return self.sessions.get(socket)

    def unregister_socket(self, socket: LiveViewSocket[TrafficMapState]) -> None:
        """Drop the socket's session. Idempotent."""
        if self.sessions.pop(socket, None) is not None:
            logger.info(f"Unregistered map session, total sessions: {len(self.sessions)}")
