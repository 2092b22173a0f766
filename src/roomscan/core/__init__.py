"""roomscan core: base step, shared contracts, logging."""

from .step_base import BaseStep
from .contracts import (
    Alignment,
    Classification,
    ClassifiedPlane,
    DetectedSurface,
    PlaneCluster,
    PlaneObservation,
    RoomBounds,
    RoomScanConfig,
    RoomStructure,
    StepMeta,
    SurfaceType,
)
from .logging import setup_logging

__all__ = [
    "BaseStep",
    "Alignment",
    "Classification",
    "ClassifiedPlane",
    "DetectedSurface",
    "PlaneCluster",
    "PlaneObservation",
    "RoomBounds",
    "RoomScanConfig",
    "RoomStructure",
    "StepMeta",
    "SurfaceType",
    "setup_logging",
]
