"""Tests for the Web Mercator projector."""

import pytest

from station_traffic.adapters.projection import WebMercatorProjector
from station_traffic.adapters.projection.web_mercator_projector import TILE_SIZE, world_pixels
from station_traffic.domain.models import Viewport


def _viewport(**overrides: float) -> Viewport:
    values = {
        "center_lon": -71.09415,
        "center_lat": 42.36027,
        "zoom": 12.0,
        "width": 1200.0,
        "height": 800.0,
    }
    values.update(overrides)
    return Viewport(**values)


def test_world_pixels_at_zoom_zero() -> None:
    """Given null island at zoom 0, when projecting, then it lands in the world center."""
    x, y = world_pixels(0.0, 0.0, 0)

    assert x == pytest.approx(TILE_SIZE / 2)
    assert y == pytest.approx(TILE_SIZE / 2)


def test_viewport_center_maps_to_screen_center() -> None:
    """Given a viewport, when projecting its center, then the screen center comes back."""
    projector = WebMercatorProjector(_viewport())

    point = projector.project(-71.09415, 42.36027)

    assert point.x == pytest.approx(600.0)
    assert point.y == pytest.approx(400.0)


def test_east_and_north_move_right_and_up() -> None:
    """Given a point north-east of center, when projecting, then x grows and y shrinks."""
    projector = WebMercatorProjector(_viewport())

    point = projector.project(-71.08, 42.37)

    assert point.x > 600.0
    assert point.y < 400.0


def test_update_viewport_invalidates_previous_positions() -> None:
    """Given a pan, when projecting again, then positions shift by the pan."""
    projector = WebMercatorProjector(_viewport())
    before = projector.project(-71.08, 42.37)

    projector.update_viewport(_viewport(center_lon=-71.08, center_lat=42.37))
    after = projector.project(-71.08, 42.37)

    assert after.x == pytest.approx(600.0)
    assert after.y == pytest.approx(400.0)
    assert (after.x, after.y) != pytest.approx((before.x, before.y))


def test_zoom_in_doubles_distances() -> None:
    """Given one zoom level in, when projecting, then offsets from center double."""
    projector = WebMercatorProjector(_viewport())
    near = projector.project(-71.08, 42.36027)

    projector.update_viewport(_viewport(zoom=13.0))
    nearer = projector.project(-71.08, 42.36027)

    assert nearer.x - 600.0 == pytest.approx(2 * (near.x - 600.0))


def test_zoom_is_clamped() -> None:
    """Given a zoom above the maximum, when updating, then the maximum is used."""
    projector = WebMercatorProjector(_viewport(zoom=30.0), min_zoom=5, max_zoom=18)

    assert projector.viewport.zoom == 18


def test_latitude_is_clamped_at_poles() -> None:
    """Given a pole, when projecting, then the result is finite."""
    x, y = world_pixels(0.0, 90.0, 1)

    assert y == pytest.approx(world_pixels(0.0, 85.051129, 1)[1])
    assert y == pytest.approx(0.0, abs=1e-3)


def test_negative_viewport_size_is_rejected() -> None:
    """Given a negative width, when building a viewport, then ValueError is raised."""
    with pytest.raises(ValueError):
        _viewport(width=-1.0)
