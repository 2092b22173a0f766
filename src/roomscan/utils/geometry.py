"""Geometry helpers: plane footprints, anchor distances, rectangle union."""

from __future__ import annotations

import numpy as np

from roomscan.core.contracts import PlaneObservation, Rect


def translation_matrix(x: float, y: float, z: float) -> tuple[float, ...]:
    """Row-major 4x4 transform with identity rotation."""
    m = np.eye(4)
    m[:3, 3] = [x, y, z]
    return tuple(m.flatten().tolist())


def plane_footprint(plane: PlaneObservation) -> tuple[np.ndarray, np.ndarray]:
    """Axis-aligned (min, max) corners a plane contributes to the room box.

    The extent height is used both for the vertical rise above the origin
    and for the depth along Z; orientation is not taken into account.
    """
    x, y, z = plane.position
    half_w = plane.width / 2.0
    half_h = plane.height / 2.0
    lo = np.array([x - half_w, y, z - half_h])
    hi = np.array([x + half_w, y + plane.height, z + half_h])
    return lo, hi


def anchor_distance(a: PlaneObservation, b: PlaneObservation) -> float:
    """Euclidean distance between two plane origins."""
    return float(np.linalg.norm(a.position - b.position))


def covering_rect(a: Rect, b: Rect) -> Rect:
    """Smallest rectangle containing both inputs."""
    min_x = min(a.min_x, b.min_x)
    min_y = min(a.min_y, b.min_y)
    max_x = max(a.max_x, b.max_x)
    max_y = max(a.max_y, b.max_y)
    return Rect(x=min_x, y=min_y, width=max_x - min_x, height=max_y - min_y)
