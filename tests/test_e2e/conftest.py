"""Fixtures for end-to-end scan scenarios."""

from __future__ import annotations

import pytest

from roomscan.core.contracts import PlaneObservation


@pytest.fixture
def scan_sequence(make_plane) -> list[PlaneObservation]:
    """Floor, then three walls, as the tracker reports them during a sweep."""
    return [
        make_plane("horizontal", (0.0, 0.0, 0.0), width=3.0, height=2.0, identifier="floor"),
        make_plane("vertical", (1.5, 1.25, 0.0), width=1.2, height=2.5, identifier="wall-east"),
        make_plane("vertical", (-1.5, 1.25, 0.0), width=1.2, height=2.5, identifier="wall-west"),
        make_plane("vertical", (0.0, 1.25, 1.5), width=1.2, height=2.5, identifier="wall-north"),
    ]


@pytest.fixture
def jittered_rescans(make_plane) -> list[PlaneObservation]:
    """The same floor and wall re-reported with small tracking drift."""
    return [
        make_plane("horizontal", (0.05, 0.0, -0.1), width=2.8, height=2.1),
        make_plane("vertical", (1.45, 1.3, 0.05), width=1.3, height=2.4),
        make_plane("horizontal", (-0.1, 0.02, 0.1), width=3.1, height=1.9),
    ]
