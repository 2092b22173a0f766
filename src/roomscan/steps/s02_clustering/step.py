"""Step 02: Group classified planes into floor, wall and ceiling clusters."""

from __future__ import annotations

import logging

from roomscan.core.contracts import ClassifiedPlane, ClusterType, PlaneCluster
from roomscan.core.step_base import BaseStep
from .config import ClusteringConfig
from .contracts import ClusteringInput, ClusteringOutput

logger = logging.getLogger(__name__)


def cluster_planes(classified: list[ClassifiedPlane]) -> list[PlaneCluster]:
    """Build at most one cluster per structural role, in floor, wall, ceiling order.

    Planes labelled other/unknown are not part of any cluster. Empty
    clusters are omitted. Input order is preserved within a cluster.
    """
    floors = [c for c in classified if c.classification.is_floor]
    walls = [c for c in classified if c.classification.is_wall]
    ceilings = [c for c in classified if c.classification.is_ceiling]

    clusters: list[PlaneCluster] = []
    for cluster_type, members in (
        (ClusterType.FLOOR, floors),
        (ClusterType.WALL, walls),
        (ClusterType.CEILING, ceilings),
    ):
        if members:
            clusters.append(PlaneCluster(type=cluster_type, planes=members))
    return clusters


class ClusteringStep(BaseStep[ClusteringInput, ClusteringOutput, ClusteringConfig]):
    name = "s02_clustering"
    input_type = ClusteringInput
    output_type = ClusteringOutput
    config_type = ClusteringConfig

    def validate_inputs(self, inputs: ClusteringInput) -> bool:
        return isinstance(inputs, ClusteringInput)

    def run(self, inputs: ClusteringInput) -> ClusteringOutput:
        clusters = cluster_planes(inputs.classified)
        kept = sum(len(c.planes) for c in clusters)
        num_dropped = len(inputs.classified) - kept

        logger.debug(
            f"Clustered {kept} planes into {len(clusters)} clusters "
            f"({num_dropped} non-structural dropped)"
        )
        return ClusteringOutput(clusters=clusters, num_dropped=num_dropped)
