"""Common Pydantic models shared by the batch pipeline and the live room model."""

from __future__ import annotations

import uuid
from datetime import datetime, timezone
from enum import Enum
from typing import Any

import numpy as np
from pydantic import BaseModel, ConfigDict, Field, FiniteFloat, field_validator, model_validator

from roomscan.live.config import CompletenessConfig, MergeConfig, ScanSessionConfig
from roomscan.steps.s01_classification.config import ClassificationConfig
from roomscan.steps.s02_clustering.config import ClusteringConfig
from roomscan.steps.s03_room_bounds.config import RoomBoundsConfig
from roomscan.steps.s04_structure_validation.config import StructureValidationConfig


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def _new_id() -> str:
    return uuid.uuid4().hex


class StepMeta(BaseModel):
    """Metadata attached to a batch pass for reproducibility."""

    step_name: str
    elapsed_seconds: float = 0.0
    params: dict[str, Any] = Field(default_factory=dict)


# ---------------------------------------------------------------------------
# Plane observations (input from the tracking subsystem)
# ---------------------------------------------------------------------------

class Alignment(str, Enum):
    """Coarse orientation tag assigned by the tracking subsystem."""

    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"
    UNKNOWN = "unknown"

    @classmethod
    def _missing_(cls, value: object) -> "Alignment":
        if isinstance(value, str) and value != value.lower():
            return cls(value.lower())
        # Tracking backends may report alignments we do not model.
        return cls.UNKNOWN


class PlaneObservation(BaseModel):
    """One detected plane: 4x4 world transform stored as a flat row-major tuple.

    Non-finite numbers are rejected anywhere in the observation.
    """

    model_config = ConfigDict(frozen=True, allow_inf_nan=False)

    identifier: str = Field(default_factory=_new_id)
    transform: tuple[FiniteFloat, ...] = Field(..., min_length=16, max_length=16)
    alignment: Alignment
    width: float = Field(..., ge=0, description="Plane extent along local X (meters)")
    height: float = Field(..., ge=0, description="Plane extent along local Z (meters)")
    confidence: float | None = Field(None, ge=0.0, le=1.0)
    timestamp: datetime = Field(default_factory=utcnow)

    @model_validator(mode="before")
    @classmethod
    def _expand_position(cls, data: Any) -> Any:
        """Accept a bare ``position: [x, y, z]`` in place of a full transform."""
        if isinstance(data, dict) and "transform" not in data and "position" in data:
            data = dict(data)
            x, y, z = data.pop("position")
            matrix = np.eye(4)
            matrix[:3, 3] = [x, y, z]
            data["transform"] = tuple(matrix.flatten().tolist())
        return data

    @field_validator("alignment", mode="before")
    @classmethod
    def _coerce_alignment(cls, value: Any) -> Alignment:
        return value if isinstance(value, Alignment) else Alignment(value)

    @property
    def matrix(self) -> np.ndarray:
        return np.asarray(self.transform, dtype=float).reshape(4, 4)

    @property
    def position(self) -> np.ndarray:
        """World-space origin of the plane (translation column of the transform)."""
        return self.matrix[:3, 3]

    @property
    def elevation(self) -> float:
        """Y coordinate of the plane origin."""
        return float(self.transform[7])

    @property
    def area(self) -> float:
        return self.width * self.height


class LightEstimate(BaseModel):
    """Ambient lighting telemetry forwarded by the tracking subsystem."""

    ambient_intensity: float = Field(1000.0, ge=0, description="Lumens; 1000 is neutral")
    ambient_color_temperature: float = Field(6500.0, ge=0, description="Kelvin")


# ---------------------------------------------------------------------------
# Classification
# ---------------------------------------------------------------------------

class PlaneLabel(str, Enum):
    FLOOR = "floor"
    WALL = "wall"
    CEILING = "ceiling"
    HORIZONTAL_OTHER = "horizontal_other"
    VERTICAL_OTHER = "vertical_other"
    UNKNOWN = "unknown"


class Classification(BaseModel):
    """Structural role of a single observation, with the area and height it was judged on."""

    model_config = ConfigDict(frozen=True)

    label: PlaneLabel
    area: float = Field(..., ge=0)
    height: float

    @property
    def is_floor(self) -> bool:
        return self.label is PlaneLabel.FLOOR

    @property
    def is_wall(self) -> bool:
        return self.label is PlaneLabel.WALL

    @property
    def is_ceiling(self) -> bool:
        return self.label is PlaneLabel.CEILING


class ClassifiedPlane(BaseModel):
    model_config = ConfigDict(frozen=True)

    plane: PlaneObservation
    classification: Classification


class ClusterType(str, Enum):
    FLOOR = "floor"
    WALL = "wall"
    CEILING = "ceiling"


class PlaneCluster(BaseModel):
    model_config = ConfigDict(frozen=True)

    type: ClusterType
    planes: list[ClassifiedPlane] = Field(default_factory=list)


# ---------------------------------------------------------------------------
# Room geometry
# ---------------------------------------------------------------------------

class RoomBounds(BaseModel):
    """Axis-aligned room box. Area and volume are derived."""

    model_config = ConfigDict(frozen=True)

    width: float = Field(0.0, ge=0)
    height: float = Field(0.0, ge=0)
    length: float = Field(0.0, ge=0)
    center: tuple[float, float, float] = (0.0, 0.0, 0.0)

    @property
    def area(self) -> float:
        return self.width * self.length

    @property
    def volume(self) -> float:
        return self.width * self.length * self.height


class RoomStructure(BaseModel):
    """Accepted room description. Only ever built from a validated batch pass."""

    model_config = ConfigDict(frozen=True)

    bounds: RoomBounds
    walls: list[PlaneObservation] = Field(default_factory=list)
    floors: list[PlaneObservation] = Field(default_factory=list)
    ceilings: list[PlaneObservation] = Field(default_factory=list)

    @property
    def wall_count(self) -> int:
        return len(self.walls)

    @property
    def floor_count(self) -> int:
        return len(self.floors)

    @property
    def ceiling_count(self) -> int:
        return len(self.ceilings)

    @property
    def total_wall_area(self) -> float:
        return sum(p.area for p in self.walls)

    @property
    def total_floor_area(self) -> float:
        return sum(p.area for p in self.floors)

    @property
    def total_ceiling_area(self) -> float:
        return sum(p.area for p in self.ceilings)

    def summary(self) -> str:
        return (
            f"Room: {self.bounds.area:.1f}m², {self.wall_count} walls, "
            f"{self.bounds.height:.1f}m height"
        )


# ---------------------------------------------------------------------------
# Live surfaces
# ---------------------------------------------------------------------------

class SurfaceType(str, Enum):
    FLOOR = "floor"
    WALL = "wall"
    CEILING = "ceiling"
    FURNITURE = "furniture"


class Rect(BaseModel):
    """2D rectangle in the plane's local frame."""

    model_config = ConfigDict(frozen=True)

    x: float = 0.0
    y: float = 0.0
    width: float = Field(0.0, ge=0)
    height: float = Field(0.0, ge=0)

    @property
    def min_x(self) -> float:
        return self.x

    @property
    def min_y(self) -> float:
        return self.y

    @property
    def max_x(self) -> float:
        return self.x + self.width

    @property
    def max_y(self) -> float:
        return self.y + self.height


class DetectedSurface(BaseModel):
    """A retained surface. Replaced wholesale on merge, never mutated."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(default_factory=_new_id)
    type: SurfaceType
    anchor: PlaneObservation
    bounds: Rect
    confidence: float = Field(1.0, ge=0.0, le=1.0)
    timestamp: datetime = Field(default_factory=utcnow)
    area: float = Field(..., ge=0, description="Surface area in square meters")
    is_significant: bool = False


# ---------------------------------------------------------------------------
# Configuration
# ---------------------------------------------------------------------------

class AnalyzerConfig(BaseModel):
    min_planes: int = Field(3, ge=0, description="Planes required before a batch pass is triggered")


class RoomScanConfig(BaseModel):
    """Top-level configuration loaded from room_scan.yaml. Missing sections use defaults."""

    classification: ClassificationConfig = Field(default_factory=ClassificationConfig)
    clustering: ClusteringConfig = Field(default_factory=ClusteringConfig)
    room_bounds: RoomBoundsConfig = Field(default_factory=RoomBoundsConfig)
    validation: StructureValidationConfig = Field(default_factory=StructureValidationConfig)
    analyzer: AnalyzerConfig = Field(default_factory=AnalyzerConfig)
    merge: MergeConfig = Field(default_factory=MergeConfig)
    completeness: CompletenessConfig = Field(default_factory=CompletenessConfig)
    session: ScanSessionConfig = Field(default_factory=ScanSessionConfig)
