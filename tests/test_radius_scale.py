"""Tests for the square-root radius scale."""

import math

import pytest

from station_traffic.application.services import FILTERED_RANGE, UNFILTERED_RANGE, RadiusScale
from station_traffic.domain.models import ANY_TIME, RadiusRange, TimeFilter


def test_zero_maps_to_lower_bound() -> None:
    """Given any range, when scaling zero, then the lower bound comes back."""
    scale = RadiusScale(100)

    assert scale.scale(0) == UNFILTERED_RANGE.lower
    scale.use_range_for(TimeFilter(480))
    assert scale.scale(0) == FILTERED_RANGE.lower


def test_maximum_maps_to_upper_bound() -> None:
    """Given the full-day maximum, when scaling it, then the upper bound comes back."""
    scale = RadiusScale(100)

    assert scale.scale(100) == pytest.approx(25.0)


def test_scale_uses_square_root() -> None:
    """Given a quarter of the maximum, when scaling, then the radius is half the range."""
    scale = RadiusScale(100)

    assert scale.scale(25) == pytest.approx(12.5)
    assert scale.scale(1) == pytest.approx(25.0 * math.sqrt(1) / math.sqrt(100))


def test_scale_is_monotonic() -> None:
    """Given increasing counts, when scaling, then radii never decrease."""
    scale = RadiusScale(50)

    radii = [scale.scale(count) for count in range(0, 51)]

    assert radii == sorted(radii)


def test_filter_switches_range_but_not_domain() -> None:
    """Given a set filter, when scaling, then the wider range is used with the same maximum."""
    scale = RadiusScale(100)

    assert scale.use_range_for(TimeFilter(600)) == FILTERED_RANGE
    assert scale.max_total_traffic == 100
    assert scale.scale(100) == pytest.approx(50.0)
    assert scale.scale(25) == pytest.approx(3.0 + 47.0 * 0.5)

    assert scale.use_range_for(ANY_TIME) == UNFILTERED_RANGE
    assert scale.scale(100) == pytest.approx(25.0)


def test_zero_maximum_maps_everything_to_lower_bound() -> None:
    """Given no traffic all day, when scaling, then every radius is the lower bound."""
    scale = RadiusScale(0, filtered_range=RadiusRange(3.0, 50.0))

    assert scale.scale(0) == 0.0
    scale.use_range_for(TimeFilter(0))
    assert scale.scale(0) == 3.0


def test_negative_inputs_are_rejected() -> None:
    """Given negative counts, when building or scaling, then ValueError is raised."""
    with pytest.raises(ValueError):
        RadiusScale(-1)
    with pytest.raises(ValueError):
        RadiusScale(10).scale(-1)
