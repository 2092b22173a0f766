"""I/O contracts for Step 03: Room bounds."""

from pydantic import BaseModel, Field

from roomscan.core.contracts import PlaneCluster, RoomBounds


class RoomBoundsInput(BaseModel):
    clusters: list[PlaneCluster] = Field(default_factory=list)


class RoomBoundsOutput(BaseModel):
    bounds: RoomBounds
    num_planes: int = Field(0, description="Planes folded into the bounds")
