"""Traffic map LiveView for displaying station traffic by time of day."""

from __future__ import annotations

import logging
import os
from typing import Any

from pyview import LiveView, LiveViewSocket, is_connected
from pyview.template.live_template import LiveRender, LiveTemplate
from pyview.vendor import ibis

from station_traffic.adapters.config import AppConfig
from station_traffic.adapters.web.state import MapSession, State, TrafficMapState
from station_traffic.domain.models import MINUTES_PER_DAY, MapOverlay, Viewport

logger = logging.getLogger(__name__)

TIME_FILTER_EVENT = "time_filter"
VIEWPORT_EVENT = "viewport"


def _payload_value(payload: dict[str, Any], key: str) -> Any:
    """Read a payload field from either a form event or a hook push.

    Form events arrive query-string parsed (values are lists); hook pushes
    arrive as plain JSON objects.
    """
    value = payload[key]
    if isinstance(value, list):
        if not value:
            raise ValueError(f"empty value for '{key}'")
        return value[0]
    return value


def viewport_from_payload(payload: dict[str, Any]) -> Viewport:
    """Build a Viewport from a ``viewport`` hook event.

    Raises:
        KeyError: If a field is missing.
        ValueError: If a field is not numeric or the size is negative.
    """
    return Viewport(
        center_lon=float(_payload_value(payload, "lon")),
        center_lat=float(_payload_value(payload, "lat")),
        zoom=float(_payload_value(payload, "zoom")),
        width=float(_payload_value(payload, "width")),
        height=float(_payload_value(payload, "height")),
    )


class TrafficMapLiveView(LiveView[TrafficMapState]):
    """LiveView showing one circle per station over the map."""

    def __init__(
        self,
        state_manager: State,
        config: AppConfig,
        overlays: list[MapOverlay],
    ) -> None:
        """Initialize the LiveView.

        Args:
            state_manager: Session registry shared by all sockets.
            config: Application configuration.
            overlays: Line layers drawn by the browser map.
        """
        super().__init__()
        if not isinstance(config, AppConfig):
            raise TypeError("config must be an AppConfig instance")

        self.state_manager = state_manager
        self.config = config
        self.overlays = overlays

    def _update_context_from_session(
        self, socket: LiveViewSocket[TrafficMapState], session: MapSession
    ) -> None:
        """Copy the session's scene and label into the socket context."""
        controller = session.controller
        socket.context.circles = session.surface.template_data()
        socket.context.time_label = controller.label.text
        socket.context.show_any_time = controller.label.show_any_time
        minute = controller.time_filter.minute
        socket.context.slider_value = self.config.no_filter_value if minute is None else minute

    def _handle_time_filter(self, payload: dict[str, Any], session: MapSession) -> None:
        try:
            raw_value = _payload_value(payload, TIME_FILTER_EVENT)
            time_filter = session.controller.handle_time_input(raw_value)
        except (KeyError, TypeError, ValueError) as e:
            logger.warning(f"Ignoring invalid time filter payload {payload}: {e}")
            return
        logger.debug(f"Time filter set to {time_filter.minute}")

    def _handle_viewport(self, payload: dict[str, Any], session: MapSession) -> None:
        try:
            viewport = viewport_from_payload(payload)
        except (KeyError, TypeError, ValueError) as e:
            logger.warning(f"Ignoring invalid viewport payload {payload}: {e}")
            return
        session.projector.update_viewport(viewport)
        session.controller.handle_viewport_change()

    def _build_template_assigns(self, state: TrafficMapState) -> dict[str, Any]:
        """Build template assigns dictionary from state and config."""
        return {
            "title": str(self.config.title),
            "circles": state.circles,
            "time_label": str(state.time_label),
            "show_any_time": bool(state.show_any_time),
            "slider_value": str(state.slider_value),
            "slider_min": str(self.config.no_filter_value),
            "slider_max": str(MINUTES_PER_DAY - 1),
            "map_style_url": str(self.config.map_style_url),
            "map_center_lon": str(self.config.map_center_lon),
            "map_center_lat": str(self.config.map_center_lat),
            "map_zoom": str(self.config.map_zoom),
            "map_min_zoom": str(self.config.map_min_zoom),
            "map_max_zoom": str(self.config.map_max_zoom),
            "overlays": [
                {
                    "id": overlay.id,
                    "url": overlay.url,
                    "color": overlay.color,
                    "width": str(overlay.width),
                    "opacity": str(overlay.opacity),
                }
                for overlay in self.overlays
            ],
        }

    async def mount(self, socket: LiveViewSocket[TrafficMapState], session: dict) -> None:
        """Mount the LiveView and create this viewer's map session.

        Only connected sockets get a registered session. The static HTTP
        render is never unmounted, so it draws from a session that is not kept.
        """
        if is_connected(socket):
            map_session = self.state_manager.register_socket(socket)
        else:
            logger.debug("Socket not connected during mount, rendering a transient map session")
            map_session = self.state_manager.create_session()

        socket.context = TrafficMapState()
        self._update_context_from_session(socket, map_session)

    async def handle_event(
        self, event: str, payload: dict[str, Any], socket: LiveViewSocket[TrafficMapState]
    ) -> None:
        """Dispatch slider and viewport events to the session's controller."""
        session = self.state_manager.get_session(socket)
        if session is None:
            logger.warning(f"Received '{event}' for a socket without a map session")
            return

        if event == TIME_FILTER_EVENT:
            self._handle_time_filter(payload, session)
        elif event == VIEWPORT_EVENT:
            self._handle_viewport(payload, session)
        else:
            logger.warning(f"Ignoring unknown event '{event}'")
            return

        self._update_context_from_session(socket, session)

    async def unmount(self, socket: LiveViewSocket[TrafficMapState]) -> None:
        """Unmount the LiveView and drop its session."""
        self.state_manager.unregister_socket(socket)

    async def disconnect(self, socket: LiveViewSocket[TrafficMapState]) -> None:
        """Handle socket disconnection - ensure the session is dropped."""
        self.state_manager.unregister_socket(socket)

    async def render(self, assigns: TrafficMapState | dict, meta: Any) -> Any:
        """Render the HTML template."""
        try:
            state = assigns if isinstance(assigns, TrafficMapState) else TrafficMapState()
            template_assigns = self._build_template_assigns(state)

            template_file = os.path.join(
                os.path.dirname(os.path.abspath(__file__)), "traffic_map.html"
            )
            with open(template_file, encoding="utf-8") as f:
                template_content = f.read()

            live_template = LiveTemplate(ibis.Template(template_content))
            return LiveRender(live_template, template_assigns, meta)
        except Exception as e:
            logger.error(f"Error rendering template: {e}", exc_info=True)
            error_template = ibis.Template("<div>Error rendering template: {{ error }}</div>")
            return LiveRender(LiveTemplate(error_template), {"error": str(e)}, meta)


def create_traffic_map_live_view(
    state_manager: State,
    config: AppConfig,
    overlays: list[MapOverlay],
) -> type[TrafficMapLiveView]:
    """Create a configured TrafficMapLiveView class.

    PyView's add_live_view expects a class, not an instance, so the
    collaborators are captured in a subclass.

    Args:
        state_manager: Session registry shared by all sockets.
        config: Application configuration.
        overlays: Line layers drawn by the browser map.

    Returns:
        A configured TrafficMapLiveView class that can be registered with PyView.
    """
    captured_state = state_manager
    captured_config = config
    captured_overlays = overlays

    class ConfiguredTrafficMapLiveView(TrafficMapLiveView):
        """Configured traffic map LiveView."""

        def __init__(self) -> None:
            super().__init__(captured_state, captured_config, captured_overlays)

    return ConfiguredTrafficMapLiveView
