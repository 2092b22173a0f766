"""Step 04: Accept or reject the clustered planes as a room."""

from __future__ import annotations

import logging

from roomscan.core.contracts import ClusterType, PlaneCluster, RoomBounds
from roomscan.core.step_base import BaseStep
from .config import StructureValidationConfig
from .contracts import StructureValidationInput, StructureValidationOutput

logger = logging.getLogger(__name__)


def validate_room_structure(
    clusters: list[PlaneCluster],
    bounds: RoomBounds,
    config: StructureValidationConfig | None = None,
) -> StructureValidationOutput:
    """Check that there is a floor and a wall and that the bounds are room sized.

    Ceilings are reported but not required.
    """
    if config is None:
        config = StructureValidationConfig()

    types = {c.type for c in clusters if c.planes}
    has_floors = ClusterType.FLOOR in types
    has_walls = ClusterType.WALL in types
    has_ceilings = ClusterType.CEILING in types

    min_dim = config.min_room_dimension
    has_reasonable_size = (
        bounds.width >= min_dim and bounds.length >= min_dim and bounds.height >= min_dim
    )
    has_sufficient_area = bounds.area >= config.min_room_area

    failures: list[str] = []
    if not has_floors:
        failures.append("no floor")
    if not has_walls:
        failures.append("no wall")
    if not has_reasonable_size:
        failures.append(
            f"bounds {bounds.width:.2f} x {bounds.length:.2f} x {bounds.height:.2f}m "
            f"below {min_dim:.2f}m"
        )
    if not has_sufficient_area:
        failures.append(f"area {bounds.area:.2f}m² below {config.min_room_area:.2f}m²")

    return StructureValidationOutput(
        is_valid=not failures,
        has_floors=has_floors,
        has_walls=has_walls,
        has_ceilings=has_ceilings,
        has_reasonable_size=has_reasonable_size,
        has_sufficient_area=has_sufficient_area,
        failures=failures,
    )


class StructureValidationStep(
    BaseStep[StructureValidationInput, StructureValidationOutput, StructureValidationConfig]
):
    name = "s04_structure_validation"
    input_type = StructureValidationInput
    output_type = StructureValidationOutput
    config_type = StructureValidationConfig

    def validate_inputs(self, inputs: StructureValidationInput) -> bool:
        return isinstance(inputs, StructureValidationInput)

    def run(self, inputs: StructureValidationInput) -> StructureValidationOutput:
        result = validate_room_structure(inputs.clusters, inputs.bounds, self.config)
        if not result.is_valid:
            logger.debug(f"Room structure rejected: {', '.join(result.failures)}")
        return result
