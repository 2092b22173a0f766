"""Step 03: Axis-aligned room bounds from clustered planes."""

from __future__ import annotations

import logging
from collections.abc import Iterable

import numpy as np

from roomscan.core.contracts import PlaneCluster, PlaneObservation, RoomBounds
from roomscan.core.step_base import BaseStep
from roomscan.utils.geometry import plane_footprint
from .config import RoomBoundsConfig
from .contracts import RoomBoundsInput, RoomBoundsOutput

logger = logging.getLogger(__name__)


def bounds_from_planes(planes: Iterable[PlaneObservation]) -> RoomBounds:
    """Fold plane footprints into one box. No planes gives a zero box at the origin."""
    footprints = [plane_footprint(p) for p in planes]
    if not footprints:
        return RoomBounds()

    lows = np.array([lo for lo, _ in footprints])
    highs = np.array([hi for _, hi in footprints])
    lo = lows.min(axis=0)
    hi = highs.max(axis=0)
    size = hi - lo
    center = (lo + hi) / 2.0

    return RoomBounds(
        width=float(size[0]),
        height=float(size[1]),
        length=float(size[2]),
        center=tuple(center.tolist()),
    )


def calculate_room_bounds(clusters: list[PlaneCluster]) -> RoomBounds:
    return bounds_from_planes(c.plane for cluster in clusters for c in cluster.planes)


class RoomBoundsStep(BaseStep[RoomBoundsInput, RoomBoundsOutput, RoomBoundsConfig]):
    name = "s03_room_bounds"
    input_type = RoomBoundsInput
    output_type = RoomBoundsOutput
    config_type = RoomBoundsConfig

    def validate_inputs(self, inputs: RoomBoundsInput) -> bool:
        return isinstance(inputs, RoomBoundsInput)

    def run(self, inputs: RoomBoundsInput) -> RoomBoundsOutput:
        bounds = calculate_room_bounds(inputs.clusters)
        num_planes = sum(len(c.planes) for c in inputs.clusters)
        logger.debug(
            f"Room bounds over {num_planes} planes: "
            f"{bounds.width:.2f} x {bounds.length:.2f} x {bounds.height:.2f}m"
        )
        return RoomBoundsOutput(bounds=bounds, num_planes=num_planes)
