"""Batch room analyzer: runs classification, clustering, bounds and validation in order."""

from __future__ import annotations

import logging
import threading
import time
from collections.abc import Callable, Sequence
from pathlib import Path

import yaml
from pydantic import BaseModel, Field

from roomscan.steps.s01_classification.contracts import ClassificationInput
from roomscan.steps.s01_classification.step import ClassificationStep
from roomscan.steps.s02_clustering.contracts import ClusteringInput
from roomscan.steps.s02_clustering.step import ClusteringStep
from roomscan.steps.s03_room_bounds.contracts import RoomBoundsInput
from roomscan.steps.s03_room_bounds.step import RoomBoundsStep
from roomscan.steps.s04_structure_validation.contracts import (
    StructureValidationInput, StructureValidationOutput,
)
from roomscan.steps.s04_structure_validation.step import StructureValidationStep
from .contracts import (
    ClusterType, PlaneCluster, PlaneObservation, RoomBounds, RoomScanConfig, RoomStructure, StepMeta,
)

logger = logging.getLogger(__name__)

ProgressListener = Callable[[float], None]


def load_room_scan_config(config_path: Path) -> RoomScanConfig:
    """Load and validate room_scan.yaml."""
    with open(config_path, encoding="utf-8") as f:
        raw = yaml.safe_load(f) or {}
    return RoomScanConfig(**raw)


def assemble_room_structure(clusters: list[PlaneCluster], bounds: RoomBounds) -> RoomStructure:
    by_type = {c.type: [cp.plane for cp in c.planes] for c in clusters}
    return RoomStructure(
        bounds=bounds,
        walls=by_type.get(ClusterType.WALL, []),
        floors=by_type.get(ClusterType.FLOOR, []),
        ceilings=by_type.get(ClusterType.CEILING, []),
    )


class AnalysisReport(BaseModel):
    """Outcome of one batch pass, accepted or not."""

    accepted: bool
    structure: RoomStructure | None = None
    bounds: RoomBounds
    validation: StructureValidationOutput
    num_planes: int = 0
    num_clustered: int = 0
    meta: StepMeta = Field(default_factory=lambda: StepMeta(step_name="room_analysis"))


class RoomAnalyzer:
    """Recomputes the room structure from scratch over a full plane snapshot.

    Only one pass runs at a time; a pass requested while another is running
    is dropped, not queued. A rejected pass leaves the previously accepted
    structure in place.
    """

    def __init__(self, config: RoomScanConfig | None = None):
        self.config = config if config is not None else RoomScanConfig()
        self._classification = ClassificationStep(self.config.classification)
        self._clustering = ClusteringStep(self.config.clustering)
        self._room_bounds = RoomBoundsStep(self.config.room_bounds)
        self._validation = StructureValidationStep(self.config.validation)

        self._in_progress = threading.Lock()
        self._room_structure: RoomStructure | None = None
        self._progress = 0.0
        self._listeners: list[ProgressListener] = []

    @property
    def room_structure(self) -> RoomStructure | None:
        return self._room_structure

    @property
    def is_analyzing(self) -> bool:
        return self._in_progress.locked()

    @property
    def analysis_progress(self) -> float:
        return self._progress

    def subscribe(self, listener: ProgressListener) -> Callable[[], None]:
        """Call ``listener`` on every progress change. Returns an unsubscribe callable."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def request_analysis(self, planes: Sequence[PlaneObservation]) -> AnalysisReport | None:
        """Batch trigger: run a pass when enough planes are available.

        Returns None when the trigger is ignored (too few planes or a pass
        already running).
        """
        if len(planes) < self.config.analyzer.min_planes:
            return None
        return self.analyze(planes)

    def analyze(self, planes: Sequence[PlaneObservation]) -> AnalysisReport | None:
        """Run one full pass. Returns None if another pass holds the guard."""
        if not self._in_progress.acquire(blocking=False):
            logger.debug("Room analysis already running; trigger dropped")
            return None
        try:
            return self._run_pass(list(planes))
        finally:
            self._in_progress.release()

    def reset(self) -> None:
        self._room_structure = None
        self._set_progress(0.0)

    def _run_pass(self, planes: list[PlaneObservation]) -> AnalysisReport:
        t0 = time.perf_counter()
        self._set_progress(0.0)

        # Step 1: classify
        classified = self._classification.execute(ClassificationInput(planes=planes))
        self._set_progress(0.2)

        # Step 2: cluster
        clustered = self._clustering.execute(ClusteringInput(classified=classified.classified))
        self._set_progress(0.4)

        # Step 3: bounds
        bounded = self._room_bounds.execute(RoomBoundsInput(clusters=clustered.clusters))
        self._set_progress(0.6)

        # Step 4: validate
        validation = self._validation.execute(
            StructureValidationInput(clusters=clustered.clusters, bounds=bounded.bounds)
        )
        self._set_progress(0.8)

        # Step 5: assemble
        structure = None
        if validation.is_valid:
            structure = assemble_room_structure(clustered.clusters, bounded.bounds)
            self._room_structure = structure
            logger.info(f"Room structure accepted: {structure.summary()}")
        else:
            logger.info(f"Room structure rejected: {', '.join(validation.failures)}")
        self._set_progress(1.0)

        return AnalysisReport(
            accepted=validation.is_valid,
            structure=structure,
            bounds=bounded.bounds,
            validation=validation,
            num_planes=len(planes),
            num_clustered=bounded.num_planes,
            meta=StepMeta(
                step_name="room_analysis",
                elapsed_seconds=time.perf_counter() - t0,
                params={
                    "min_room_dimension": self.config.validation.min_room_dimension,
                    "min_room_area": self.config.validation.min_room_area,
                },
            ),
        )

    def _set_progress(self, value: float) -> None:
        self._progress = value
        for listener in list(self._listeners):
            listener(value)
