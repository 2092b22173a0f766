"""Configuration for Step 01: Surface classification."""

from pydantic import BaseModel, Field, model_validator


class ClassificationConfig(BaseModel):
    # Height bands are policy, tuned for rooms with the tracking origin near the floor
    floor_max_height: float = Field(0.5, description="Horizontal planes strictly below this Y are floor (meters)")
    ceiling_min_height: float = Field(2.0, description="Horizontal planes strictly above this Y are ceiling (meters)")

    min_wall_height: float = Field(2.0, gt=0, description="Minimum expected wall height (meters)")
    wall_area_factor: float = Field(1.0, gt=0, description="Wall area threshold = min_wall_height x factor (m²)")

    @property
    def wall_area_threshold(self) -> float:
        return self.min_wall_height * self.wall_area_factor

    @model_validator(mode="after")
    def _check_bands(self) -> "ClassificationConfig":
        if self.ceiling_min_height < self.floor_max_height:
            raise ValueError("ceiling_min_height must not be below floor_max_height")
        return self
