"""Shared pytest fixtures for roomscan tests."""

from datetime import datetime, timedelta, timezone
from pathlib import Path

import pytest
import yaml

from roomscan.core.contracts import Alignment, PlaneObservation

T0 = datetime(2025, 8, 5, 12, 0, 0, tzinfo=timezone.utc)


def _plane(
    alignment: str = "horizontal",
    position: tuple[float, float, float] = (0.0, 0.0, 0.0),
    width: float = 2.0,
    height: float = 2.0,
    identifier: str | None = None,
    confidence: float | None = None,
) -> PlaneObservation:
    data = {
        "alignment": alignment,
        "position": list(position),
        "width": width,
        "height": height,
        "confidence": confidence,
        "timestamp": T0,
    }
    if identifier is not None:
        data["identifier"] = identifier
    return PlaneObservation(**data)


@pytest.fixture
def make_plane():
    """Factory for plane observations with an identity rotation."""
    return _plane


@pytest.fixture
def fixed_clock():
    """Deterministic clock advancing one second per call."""
    ticks = iter(range(10_000))
    return lambda: T0 + timedelta(seconds=next(ticks))


@pytest.fixture
def valid_room_planes(make_plane) -> list[PlaneObservation]:
    """One 5 m² floor and two 2.5 m walls spanning a 3 m wide footprint."""
    return [
        make_plane(Alignment.HORIZONTAL, (0.0, 0.0, 0.0), width=2.5, height=2.0, identifier="floor"),
        make_plane(Alignment.VERTICAL, (-1.0, 0.0, 0.0), width=1.0, height=2.5, identifier="wall-w"),
        make_plane(Alignment.VERTICAL, (1.0, 0.0, 0.0), width=1.0, height=2.5, identifier="wall-e"),
    ]


@pytest.fixture
def small_room_planes(make_plane) -> list[PlaneObservation]:
    """Same layout squeezed into a 1.5 m wide footprint."""
    return [
        make_plane(Alignment.HORIZONTAL, (0.0, 0.0, 0.0), width=1.5, height=1.5, identifier="floor"),
        make_plane(Alignment.VERTICAL, (-0.25, 0.0, 0.0), width=1.0, height=2.5, identifier="wall-w"),
        make_plane(Alignment.VERTICAL, (0.25, 0.0, 0.0), width=1.0, height=2.5, identifier="wall-e"),
    ]


@pytest.fixture
def observations_file(tmp_path: Path) -> Path:
    """A recorded scan: floor, three walls, a tabletop."""
    data = {
        "observations": [
            {"identifier": "floor-0", "alignment": "horizontal", "position": [0.0, 0.0, 0.0],
             "width": 3.0, "height": 2.0, "confidence": 0.9},
            {"identifier": "wall-east", "alignment": "vertical", "position": [1.5, 1.25, 0.0],
             "width": 1.2, "height": 2.5},
            {"identifier": "wall-west", "alignment": "vertical", "position": [-1.5, 1.25, 0.0],
             "width": 1.2, "height": 2.5},
            {"identifier": "wall-north", "alignment": "vertical", "position": [0.0, 1.25, 1.5],
             "width": 1.2, "height": 2.5},
            {"identifier": "table", "alignment": "horizontal", "position": [0.3, 0.75, 0.2],
             "width": 1.0, "height": 0.6},
        ]
    }
    path = tmp_path / "observations.yaml"
    with open(path, "w") as f:
        yaml.safe_dump(data, f)
    return path
