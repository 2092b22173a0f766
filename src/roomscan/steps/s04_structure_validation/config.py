"""Configuration for Step 04: Room structure validation."""

from pydantic import BaseModel, Field


class StructureValidationConfig(BaseModel):
    min_room_dimension: float = Field(2.0, ge=0, description="Minimum width, length and height (meters)")
    min_room_area: float = Field(4.0, ge=0, description="Minimum bounds footprint area (m²)")
