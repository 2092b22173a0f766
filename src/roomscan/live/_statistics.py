"""Room statistics derived from the retained surfaces."""

from __future__ import annotations

from collections.abc import Iterable

from pydantic import BaseModel, ConfigDict, Field

from roomscan.core.contracts import DetectedSurface, SurfaceType


class RoomDimensions(BaseModel):
    model_config = ConfigDict(frozen=True)

    width: float = 0.0
    length: float = 0.0
    height: float = 0.0


class RoomStatistics(BaseModel):
    model_config = ConfigDict(frozen=True)

    floor_count: int = 0
    wall_count: int = 0
    ceiling_count: int = 0
    room_area: float = 0.0
    dimensions: RoomDimensions = Field(default_factory=RoomDimensions)


class RoomSnapshot(BaseModel):
    """Surfaces and the statistics computed from them, published together."""

    model_config = ConfigDict(frozen=True)

    surfaces: tuple[DetectedSurface, ...] = ()
    statistics: RoomStatistics = Field(default_factory=RoomStatistics)
    version: int = 0


def compute_dimensions(surfaces: Iterable[DetectedSurface]) -> RoomDimensions:
    """Running maxima: floors give width/length, walls and ceilings give height."""
    width = length = height = 0.0
    for surface in surfaces:
        if surface.type is SurfaceType.FLOOR:
            width = max(width, surface.bounds.width)
            length = max(length, surface.bounds.height)
        elif surface.type in (SurfaceType.WALL, SurfaceType.CEILING):
            height = max(height, surface.anchor.elevation)
    return RoomDimensions(width=width, length=length, height=height)


def compute_statistics(surfaces: Iterable[DetectedSurface]) -> RoomStatistics:
    """Recompute every statistic from the significant surfaces only."""
    significant = [s for s in surfaces if s.is_significant]
    floors = [s for s in significant if s.type is SurfaceType.FLOOR]

    return RoomStatistics(
        floor_count=len(floors),
        wall_count=sum(1 for s in significant if s.type is SurfaceType.WALL),
        ceiling_count=sum(1 for s in significant if s.type is SurfaceType.CEILING),
        room_area=sum(s.area for s in floors),
        dimensions=compute_dimensions(significant),
    )
