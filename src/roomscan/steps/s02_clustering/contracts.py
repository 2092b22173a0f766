"""I/O contracts for Step 02: Plane clustering."""

from pydantic import BaseModel, Field

from roomscan.core.contracts import ClassifiedPlane, PlaneCluster


class ClusteringInput(BaseModel):
    classified: list[ClassifiedPlane] = Field(default_factory=list)


class ClusteringOutput(BaseModel):
    clusters: list[PlaneCluster] = Field(default_factory=list, description="Non-empty floor/wall/ceiling clusters")
    num_dropped: int = Field(0, description="Planes with a non-structural label")
