"""Tests for the in-memory SVG scene surface."""

import pytest

from station_traffic.adapters.web.scene import SvgSceneSurface


def test_create_set_and_render_circle() -> None:
    """Given a circle with attributes, when rendering, then values are formatted."""
    surface = SvgSceneSurface()
    surface.create_circle("A")
    surface.set_attributes("A", cx=10.123, cy=5.0, r=3.456, fill="steelblue", stroke_width=1.0)
    surface.set_title("A", "3 trips (2 departures, 1 arrivals)")

    data = surface.template_data()

    assert data == [
        {
            "key": "A",
            "cx": "10.12",
            "cy": "5.00",
            "r": "3.46",
            "fill": "steelblue",
            "stroke": "white",
            "stroke_width": "1.00",
            "opacity": "1",
            "title": "3 trips (2 departures, 1 arrivals)",
        }
    ]


def test_duplicate_create_keeps_existing_element() -> None:
    """Given an existing circle, when creating it again, then the element is kept."""
    surface = SvgSceneSurface()
    surface.create_circle("A")
    element = surface.element("A")

    surface.create_circle("A")

    assert surface.element("A") is element
    assert surface.created_count == 1


def test_remove_is_counted_once() -> None:
    """Given a circle, when removing it twice, then it is counted once."""
    surface = SvgSceneSurface()
    surface.create_circle("A")

    surface.remove("A")
    surface.remove("A")

    assert surface.removed_count == 1
    assert surface.elements() == []


def test_unknown_key_raises() -> None:
    """Given no circle, when setting attributes, then KeyError is raised."""
    with pytest.raises(KeyError):
        SvgSceneSurface().set_attributes("missing", r=1.0)
