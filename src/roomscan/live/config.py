"""Configuration for the live room model and scan session."""

from pydantic import BaseModel, Field


class MergeConfig(BaseModel):
    merge_distance: float = Field(0.5, ge=0, description="Anchor origins strictly closer than this merge (meters)")
    min_surface_area: float = Field(0.5, ge=0, description="Observations below this area are dropped (m²)")
    significant_area: float = Field(1.0, ge=0, description="Merged surfaces at or above this area are significant (m²)")


class CompletenessConfig(BaseModel):
    min_floors: int = Field(1, ge=0)
    min_walls: int = Field(2, ge=0)
    min_room_area: float = Field(5.0, ge=0, description="Minimum summed significant floor area (m²)")


class ScanSessionConfig(BaseModel):
    analysis_weight: float = Field(0.6, ge=0, le=1, description="Weight of batch analysis progress in scan progress")
    surface_progress_step: float = Field(0.03, ge=0, description="Scan progress contributed per retained surface")
    surface_progress_cap: float = Field(0.4, ge=0, le=1, description="Cap on the surface-count contribution")
    auto_complete: bool = Field(True, description="Stop scanning once a room structure exists and progress is high")
    auto_complete_progress: float = Field(0.8, ge=0, le=1)
