"""I/O contracts for Step 01: Surface classification."""

from pydantic import BaseModel, Field

from roomscan.core.contracts import ClassifiedPlane, PlaneObservation


class ClassificationInput(BaseModel):
    planes: list[PlaneObservation] = Field(default_factory=list, description="Raw plane observations")


class ClassificationOutput(BaseModel):
    classified: list[ClassifiedPlane] = Field(default_factory=list)
    num_floors: int = Field(0)
    num_walls: int = Field(0)
    num_ceilings: int = Field(0)
    num_other: int = Field(0, description="Horizontal/vertical non-structural and unknown planes")
