"""Tests for the traffic map LiveView."""

from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest
from pyview import PyView
from pyview.vendor import ibis
from starlette.testclient import TestClient

from station_traffic.adapters.config import AppConfig
from station_traffic.adapters.web.formatters import TimeLabelFormatter
from station_traffic.adapters.web.state import State, TrafficMapState
from station_traffic.adapters.web.views.traffic_map.traffic_map import (
    TrafficMapLiveView,
    create_traffic_map_live_view,
    viewport_from_payload,
)
from station_traffic.application.services import ReactiveControllerFactory, build_traffic_dataset
from station_traffic.domain.models import MapOverlay, Station, Trip

IS_CONNECTED = "station_traffic.adapters.web.views.traffic_map.traffic_map.is_connected"


def _create_test_view(stations: list[Station], trips: list[Trip]) -> TrafficMapLiveView:
    """Create a TrafficMapLiveView over the fixture dataset."""
    config = AppConfig(config_file=None, _env_file=None)
    factory = ReactiveControllerFactory(
        build_traffic_dataset(stations, trips), TimeLabelFormatter(config)
    )
    overlays = [MapOverlay(id="lanes", url="https://example.com/lanes.geojson")]
    return TrafficMapLiveView(State(factory, config), config, overlays)


async def _mounted(view: TrafficMapLiveView) -> MagicMock:
    socket = MagicMock()
    with patch(IS_CONNECTED, return_value=True):
        await view.mount(socket, {})
    return socket


@pytest.mark.asyncio
async def test_mount_creates_session_and_context(
    stations: list[Station], trips: list[Trip]
) -> None:
    """Given a new socket, when mounting, then its circles and label are in the context."""
    view = _create_test_view(stations, trips)

    socket = await _mounted(view)

    assert isinstance(socket.context, TrafficMapState)
    assert [circle["key"] for circle in socket.context.circles] == ["A", "B", "C"]
    assert socket.context.show_any_time is True
    assert socket.context.slider_value == -1
    assert view.state_manager.get_session(socket) is not None


@pytest.mark.asyncio
async def test_unconnected_mounts_do_not_keep_sessions(
    stations: list[Station], trips: list[Trip]
) -> None:
    """Given static renders, when mounting unconnected sockets, then no session is stored."""
    view = _create_test_view(stations, trips)
    sockets = [MagicMock() for _ in range(5)]

    with patch(IS_CONNECTED, return_value=False):
        for socket in sockets:
            await view.mount(socket, {})

    assert view.state_manager.sessions == {}
    assert [circle["key"] for circle in sockets[-1].context.circles] == ["A", "B", "C"]


def test_page_load_through_pyview_renders_circles(
    stations: list[Station], trips: list[Trip]
) -> None:
    """Given the view registered with PyView, when the page is fetched, then it renders."""
    view = _create_test_view(stations, trips)
    app = PyView()
    app.add_live_view(
        "/", create_traffic_map_live_view(view.state_manager, view.config, view.overlays)
    )
    client = TestClient(app)

    responses = [client.get("/") for _ in range(3)]

    assert all(response.status_code == 200 for response in responses)
    assert 'id="station-A"' in responses[-1].text
    assert view.state_manager.sessions == {}


@pytest.mark.asyncio
async def test_time_filter_form_event_updates_label_and_radii(
    stations: list[Station], trips: list[Trip]
) -> None:
    """Given a form payload with list values, when handled, then the filter is applied."""
    view = _create_test_view(stations, trips)
    socket = await _mounted(view)
    radius_before = socket.context.circles[0]["r"]

    await view.handle_event("time_filter", {"time_filter": ["510"]}, socket)

    assert socket.context.time_label == "8:30 AM"
    assert socket.context.show_any_time is False
    assert socket.context.slider_value == 510
    assert socket.context.circles[0]["r"] != radius_before


@pytest.mark.asyncio
async def test_invalid_time_filter_is_ignored(stations: list[Station], trips: list[Trip]) -> None:
    """Given a non-numeric slider value, when handled, then state is unchanged."""
    view = _create_test_view(stations, trips)
    socket = await _mounted(view)
    await view.handle_event("time_filter", {"time_filter": "600"}, socket)

    await view.handle_event("time_filter", {"time_filter": ["soon"]}, socket)
    await view.handle_event("time_filter", {}, socket)

    assert socket.context.slider_value == 600


@pytest.mark.asyncio
async def test_viewport_event_moves_circles_only(
    stations: list[Station], trips: list[Trip]
) -> None:
    """Given a viewport push, when handled, then positions change and radii do not."""
    view = _create_test_view(stations, trips)
    socket = await _mounted(view)
    before = {circle["key"]: circle for circle in socket.context.circles}

    payload = {"lon": -71.08, "lat": 42.36, "zoom": 14, "width": 800, "height": 600}
    await view.handle_event("viewport", payload, socket)

    for circle in socket.context.circles:
        assert circle["r"] == before[circle["key"]]["r"]
        assert circle["cx"] != before[circle["key"]]["cx"]
    session = view.state_manager.get_session(socket)
    assert session is not None
    assert session.projector.viewport.zoom == 14


@pytest.mark.asyncio
async def test_invalid_viewport_is_ignored(stations: list[Station], trips: list[Trip]) -> None:
    """Given a viewport with a missing field, when handled, then nothing moves."""
    view = _create_test_view(stations, trips)
    socket = await _mounted(view)
    before = list(socket.context.circles)

    await view.handle_event("viewport", {"lon": -71.0, "lat": 42.0}, socket)

    assert socket.context.circles == before


@pytest.mark.asyncio
async def test_events_without_session_are_ignored(
    stations: list[Station], trips: list[Trip]
) -> None:
    """Given an unmounted socket, when an event arrives, then no session is created."""
    view = _create_test_view(stations, trips)
    socket = MagicMock()

    await view.handle_event("time_filter", {"time_filter": ["510"]}, socket)

    assert view.state_manager.get_session(socket) is None


@pytest.mark.asyncio
async def test_disconnect_drops_session(stations: list[Station], trips: list[Trip]) -> None:
    """Given a mounted socket, when it disconnects, then its session is dropped."""
    view = _create_test_view(stations, trips)
    socket = await _mounted(view)

    await view.disconnect(socket)
    await view.unmount(socket)

    assert view.state_manager.sessions == {}


def test_viewport_from_payload_accepts_form_lists() -> None:
    """Given list-wrapped values, when parsing a viewport, then the first values are used."""
    viewport = viewport_from_payload(
        {"lon": ["1.5"], "lat": ["2"], "zoom": ["3"], "width": ["4"], "height": ["5"]}
    )

    assert (viewport.center_lon, viewport.center_lat, viewport.zoom) == (1.5, 2.0, 3.0)
    assert (viewport.width, viewport.height) == (4.0, 5.0)


def test_viewport_from_payload_rejects_empty_lists() -> None:
    """Given an empty list, when parsing a viewport, then ValueError is raised."""
    with pytest.raises(ValueError):
        viewport_from_payload({"lon": [], "lat": 0, "zoom": 0, "width": 0, "height": 0})


def test_build_template_assigns_includes_map_and_overlays(
    stations: list[Station], trips: list[Trip]
) -> None:
    """Given overlays and map config, when building assigns, then both are present."""
    view = _create_test_view(stations, trips)

    assigns = view._build_template_assigns(TrafficMapState(time_label="8:30 AM"))

    assert assigns["slider_min"] == "-1"
    assert assigns["slider_max"] == "1439"
    assert assigns["map_zoom"] == "12.0"
    assert assigns["overlays"][0]["id"] == "lanes"
    assert assigns["time_label"] == "8:30 AM"


@pytest.mark.asyncio
async def test_template_renders_circles_and_slider(
    stations: list[Station], trips: list[Trip]
) -> None:
    """Given a mounted view, when rendering the template, then circles and slider appear."""
    view = _create_test_view(stations, trips)
    socket = await _mounted(view)
    template_path = (
        Path(__file__).resolve().parents[1]
        / "src"
        / "station_traffic"
        / "adapters"
        / "web"
        / "views"
        / "traffic_map"
        / "traffic_map.html"
    )
    template = ibis.Template(template_path.read_text(encoding="utf-8"))

    result = template.render(**view._build_template_assigns(socket.context))

    assert 'id="time-slider"' in result
    assert 'phx-change="time_filter"' in result
    assert 'id="station-A"' in result
    assert "<title>5 trips (3 departures, 2 arrivals)</title>" in result
    assert 'id="any-time"' in result
    assert 'data-id="lanes"' in result


def test_create_live_view_captures_collaborators(
    stations: list[Station], trips: list[Trip]
) -> None:
    """Given collaborators, when creating the view class, then instances use them."""
    view = _create_test_view(stations, trips)

    view_class = create_traffic_map_live_view(view.state_manager, view.config, view.overlays)
    instance = view_class()

    assert instance.state_manager is view.state_manager
    assert instance.overlays == view.overlays
