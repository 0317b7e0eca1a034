"""Shared fixtures for station traffic tests."""

from datetime import datetime

import pytest

from station_traffic.domain.models import ScreenPoint, Station, Trip


def make_trip(start_id: str, end_id: str, start: str, end: str) -> Trip:
    """Build a trip on 2024-03-01 from ``HH:MM`` start and end times."""
    day = "2024-03-01"
    return Trip(
        start_station_id=start_id,
        end_station_id=end_id,
        started_at=datetime.fromisoformat(f"{day}T{start}"),
        ended_at=datetime.fromisoformat(f"{day}T{end}"),
    )


class FakeProjector:
    """Projector that offsets coordinates and counts calls."""

    def __init__(self, offset: float = 0.0) -> None:
        self.offset = offset
        self.calls = 0

    def project(self, lon: float, lat: float) -> ScreenPoint:
        self.calls += 1
        return ScreenPoint(x=lon + self.offset, y=lat + self.offset)


@pytest.fixture
def stations() -> list[Station]:
    """Three stations A, B and C."""
    return [
        Station(id="A", lon=-71.10, lat=42.35, name="Alpha"),
        Station(id="B", lon=-71.08, lat=42.36, name="Bravo"),
        Station(id="C", lon=-71.06, lat=42.37, name="Charlie"),
    ]


@pytest.fixture
def trips() -> list[Trip]:
    """Morning and evening trips between the fixture stations."""
    return [
        make_trip("A", "B", "08:00", "08:20"),
        make_trip("B", "A", "08:30", "08:50"),
        make_trip("A", "C", "09:00", "09:15"),
        make_trip("A", "A", "17:00", "17:30"),
        make_trip("X", "B", "05:00", "05:10"),
    ]


@pytest.fixture
def projector() -> FakeProjector:
    """Projector whose screen position equals the coordinates."""
    return FakeProjector()
