"""I/O contracts for Step 04: Room structure validation."""

from pydantic import BaseModel, Field

from roomscan.core.contracts import PlaneCluster, RoomBounds


class StructureValidationInput(BaseModel):
    clusters: list[PlaneCluster] = Field(default_factory=list)
    bounds: RoomBounds = Field(default_factory=RoomBounds)


class StructureValidationOutput(BaseModel):
    is_valid: bool
    has_floors: bool = False
    has_walls: bool = False
    has_ceilings: bool = False
    has_reasonable_size: bool = False
    has_sufficient_area: bool = False
    failures: list[str] = Field(default_factory=list, description="Human-readable failed criteria")
