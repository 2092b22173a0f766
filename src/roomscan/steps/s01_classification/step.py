"""Step 01: Label each plane observation as floor, wall, ceiling or other."""

from __future__ import annotations

import logging

from roomscan.core.contracts import (
    Alignment, Classification, ClassifiedPlane, PlaneLabel, PlaneObservation,
)
from roomscan.core.step_base import BaseStep
from .config import ClassificationConfig
from .contracts import ClassificationInput, ClassificationOutput

logger = logging.getLogger(__name__)


def classify_plane(plane: PlaneObservation, config: ClassificationConfig | None = None) -> Classification:
    """Classify one observation from its alignment, origin height and extent area.

    Horizontal planes are split into floor / ceiling / other by strict
    comparison against the height bands, so a plane exactly on a band edge
    is "other". Vertical planes are walls once their area reaches the wall
    area threshold. Anything else is unknown.
    """
    if config is None:
        config = ClassificationConfig()

    height = plane.elevation
    area = plane.area

    if plane.alignment is Alignment.HORIZONTAL:
        if height < config.floor_max_height:
            label = PlaneLabel.FLOOR
        elif height > config.ceiling_min_height:
            label = PlaneLabel.CEILING
        else:
            # Table tops, shelves, etc.
            label = PlaneLabel.HORIZONTAL_OTHER
    elif plane.alignment is Alignment.VERTICAL:
        if area >= config.wall_area_threshold:
            label = PlaneLabel.WALL
        else:
            label = PlaneLabel.VERTICAL_OTHER
    else:
        label = PlaneLabel.UNKNOWN

    return Classification(label=label, area=area, height=height)


class ClassificationStep(BaseStep[ClassificationInput, ClassificationOutput, ClassificationConfig]):
    name = "s01_classification"
    input_type = ClassificationInput
    output_type = ClassificationOutput
    config_type = ClassificationConfig

    def validate_inputs(self, inputs: ClassificationInput) -> bool:
        return isinstance(inputs, ClassificationInput)

    def run(self, inputs: ClassificationInput) -> ClassificationOutput:
        classified = [
            ClassifiedPlane(plane=plane, classification=classify_plane(plane, self.config))
            for plane in inputs.planes
        ]

        num_floors = sum(1 for c in classified if c.classification.is_floor)
        num_walls = sum(1 for c in classified if c.classification.is_wall)
        num_ceilings = sum(1 for c in classified if c.classification.is_ceiling)
        num_other = len(classified) - num_floors - num_walls - num_ceilings

        logger.debug(
            f"Classified {len(classified)} planes: {num_floors} floors, "
            f"{num_walls} walls, {num_ceilings} ceilings, {num_other} other"
        )

        return ClassificationOutput(
            classified=classified,
            num_floors=num_floors,
            num_walls=num_walls,
            num_ceilings=num_ceilings,
            num_other=num_other,
        )
