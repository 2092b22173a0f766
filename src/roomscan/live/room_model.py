"""Incremental room model fed one plane observation at a time.

The model owns an ordered collection of DetectedSurface records and the
statistics derived from them. Both are published together as one frozen
RoomSnapshot which is swapped in a single assignment, so a reader on
another thread sees either the old or the new state, never a mix.
Mutations are serialised by a write lock; there is one writer in practice
(the tracking update loop).
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable
from datetime import datetime

from roomscan.core.contracts import (
    Classification,
    DetectedSurface,
    LightEstimate,
    PlaneLabel,
    PlaneObservation,
    Rect,
    RoomScanConfig,
    SurfaceType,
    utcnow,
)
from roomscan.steps.s01_classification.step import classify_plane
from ._merge import MergeOutcome, fold_surface
from ._statistics import RoomDimensions, RoomSnapshot, RoomStatistics, compute_statistics

logger = logging.getLogger(__name__)

SnapshotListener = Callable[[RoomSnapshot], None]

_SURFACE_TYPES: dict[PlaneLabel, SurfaceType] = {
    PlaneLabel.FLOOR: SurfaceType.FLOOR,
    PlaneLabel.WALL: SurfaceType.WALL,
    PlaneLabel.CEILING: SurfaceType.CEILING,
}


def surface_type_for(classification: Classification) -> SurfaceType:
    """Structural labels map one to one; everything else counts as furniture."""
    return _SURFACE_TYPES.get(classification.label, SurfaceType.FURNITURE)


class RoomModel:
    """Running room statistics built from individually ingested observations."""

    def __init__(
        self,
        config: RoomScanConfig | None = None,
        clock: Callable[[], datetime] = utcnow,
    ):
        self.config = config if config is not None else RoomScanConfig()
        self._clock = clock
        self._write_lock = threading.Lock()
        self._snapshot = RoomSnapshot()
        self._light_estimate: LightEstimate | None = None
        self._listeners: list[SnapshotListener] = []

    # -- read side ---------------------------------------------------------

    @property
    def snapshot(self) -> RoomSnapshot:
        return self._snapshot

    @property
    def surfaces(self) -> tuple[DetectedSurface, ...]:
        return self._snapshot.surfaces

    @property
    def statistics(self) -> RoomStatistics:
        return self._snapshot.statistics

    @property
    def floor_count(self) -> int:
        return self._snapshot.statistics.floor_count

    @property
    def wall_count(self) -> int:
        return self._snapshot.statistics.wall_count

    @property
    def ceiling_count(self) -> int:
        return self._snapshot.statistics.ceiling_count

    @property
    def room_area(self) -> float:
        return self._snapshot.statistics.room_area

    @property
    def room_dimensions(self) -> RoomDimensions:
        return self._snapshot.statistics.dimensions

    @property
    def light_estimate(self) -> LightEstimate | None:
        return self._light_estimate

    def is_complete(self) -> bool:
        """Enough floor, wall and area evidence to call the scan done."""
        stats = self._snapshot.statistics
        done = self.config.completeness
        return (
            stats.floor_count >= done.min_floors
            and stats.wall_count >= done.min_walls
            and stats.room_area >= done.min_room_area
        )

    def summary(self) -> str:
        stats = self._snapshot.statistics
        return f"Room: {stats.room_area:.1f}m², {stats.wall_count} walls, {stats.floor_count} floors"

    def subscribe(self, listener: SnapshotListener) -> Callable[[], None]:
        """Call ``listener`` with every new snapshot. Returns an unsubscribe callable."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    # -- write side --------------------------------------------------------

    def make_candidate(self, observation: PlaneObservation) -> DetectedSurface:
        classification = classify_plane(observation, self.config.classification)
        area = observation.area
        return DetectedSurface(
            type=surface_type_for(classification),
            anchor=observation,
            bounds=Rect(width=observation.width, height=observation.height),
            confidence=observation.confidence if observation.confidence is not None else 1.0,
            timestamp=observation.timestamp,
            area=area,
            is_significant=area >= self.config.merge.min_surface_area,
        )

    def ingest(self, observation: PlaneObservation) -> MergeOutcome:
        """Classify one observation and merge it into, or append it to, the surfaces."""
        candidate = self.make_candidate(observation)
        if candidate.area < self.config.merge.min_surface_area:
            return MergeOutcome.REJECTED

        with self._write_lock:
            surfaces, outcome = fold_surface(
                self._snapshot.surfaces, candidate, self._clock(), self.config.merge,
            )
            snapshot = self._publish(surfaces, compute_statistics(surfaces))
        self._notify(snapshot)
        return outcome

    def grow_dimensions(self, observation: PlaneObservation) -> RoomDimensions:
        """Fold an updated plane's extent and height into the dimension maxima.

        Surfaces are left alone; the next accepted ingest recomputes the
        dimensions from surfaces again.
        """
        with self._write_lock:
            current = self._snapshot.statistics.dimensions
            dimensions = RoomDimensions(
                width=max(current.width, observation.width),
                length=max(current.length, observation.height),
                height=max(current.height, observation.elevation),
            )
            snapshot = self._replace_dimensions(dimensions)
        self._notify(snapshot)
        return dimensions

    def update_room_dimensions(self, width: float, length: float, height: float) -> None:
        """Store externally measured dimensions until the next accepted ingest."""
        with self._write_lock:
            snapshot = self._replace_dimensions(RoomDimensions(width=width, length=length, height=height))
        self._notify(snapshot)

    def update_light_estimate(self, estimate: LightEstimate | None) -> None:
        self._light_estimate = estimate

    def reset(self) -> None:
        """Drop all surfaces and zero the statistics."""
        with self._write_lock:
            snapshot = self._publish((), RoomStatistics())
            self._light_estimate = None
        logger.debug("Room model reset")
        self._notify(snapshot)

    # -- internals ---------------------------------------------------------

    def _publish(self, surfaces: tuple[DetectedSurface, ...], statistics: RoomStatistics) -> RoomSnapshot:
        snapshot = RoomSnapshot(
            surfaces=surfaces,
            statistics=statistics,
            version=self._snapshot.version + 1,
        )
        self._snapshot = snapshot
        return snapshot

    def _replace_dimensions(self, dimensions: RoomDimensions) -> RoomSnapshot:
        statistics = self._snapshot.statistics.model_copy(update={"dimensions": dimensions})
        return self._publish(self._snapshot.surfaces, statistics)

    def _notify(self, snapshot: RoomSnapshot) -> None:
        for listener in list(self._listeners):
            listener(snapshot)
