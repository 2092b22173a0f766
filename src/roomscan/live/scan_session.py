"""Scan lifecycle: drives the live room model and the batch analyzer.

States::

    NOT_STARTED --start--> SCANNING --stop--> COMPLETED
         ^                                        |
         +------------------reset-----------------+

Any state moves to FAILED when tracking reports a failure. COMPLETED and
FAILED stay put until ``reset()`` or a restart via ``start()``.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from enum import Enum

from roomscan.core.contracts import LightEstimate, PlaneObservation, RoomScanConfig, RoomStructure
from roomscan.core.pipeline_runner import AnalysisReport, RoomAnalyzer
from ._merge import MergeOutcome
from .room_model import RoomModel

logger = logging.getLogger(__name__)


class ScanState(str, Enum):
    NOT_STARTED = "not_started"
    SCANNING = "scanning"
    COMPLETED = "completed"
    FAILED = "failed"


class TrackingState(str, Enum):
    NORMAL = "normal"
    LIMITED = "limited"
    NOT_AVAILABLE = "not_available"


class InvalidScanTransition(ValueError):
    """Raised for an explicit transition the current state does not allow."""


class ScanSession:
    """Owns one scanning session: state machine, live model and batch analyzer."""

    def __init__(
        self,
        config: RoomScanConfig | None = None,
        model: RoomModel | None = None,
        analyzer: RoomAnalyzer | None = None,
    ):
        self.config = config if config is not None else RoomScanConfig()
        self.model = model if model is not None else RoomModel(self.config)
        self.analyzer = analyzer if analyzer is not None else RoomAnalyzer(self.config)
        self._state = ScanState.NOT_STARTED
        self._failure_reason: str | None = None
        self._scan_progress = 0.0

    @property
    def state(self) -> ScanState:
        return self._state

    @property
    def failure_reason(self) -> str | None:
        return self._failure_reason

    @property
    def scan_progress(self) -> float:
        return self._scan_progress

    @property
    def room_structure(self) -> RoomStructure | None:
        return self.analyzer.room_structure

    # -- transitions -------------------------------------------------------

    def start(self) -> None:
        """Begin scanning, or restart after completion or failure."""
        if self._state is ScanState.SCANNING:
            raise InvalidScanTransition("scan already running")
        self._transition(ScanState.SCANNING)
        self._failure_reason = None

    def stop(self) -> None:
        if self._state is not ScanState.SCANNING:
            raise InvalidScanTransition(f"cannot stop a scan in state '{self._state.value}'")
        self._transition(ScanState.COMPLETED)

    def fail(self, reason: str) -> None:
        self._failure_reason = reason
        self._transition(ScanState.FAILED)
        logger.warning(f"Scan failed: {reason}")

    def reset(self) -> None:
        self.model.reset()
        self.analyzer.reset()
        self._scan_progress = 0.0
        self._failure_reason = None
        self._transition(ScanState.NOT_STARTED)

    # -- inbound events from the tracking collaborator -------------------

    def on_plane(self, observation: PlaneObservation) -> MergeOutcome:
        return self.model.ingest(observation)

    def on_plane_updated(self, observation: PlaneObservation) -> None:
        self.model.grow_dimensions(observation)

    def on_plane_snapshot(self, planes: Sequence[PlaneObservation]) -> AnalysisReport | None:
        """Full plane set available; run a batch pass if the analyzer accepts the trigger."""
        return self.analyzer.request_analysis(planes)

    def on_light_estimate(self, estimate: LightEstimate | None) -> None:
        self.model.update_light_estimate(estimate)

    def on_tracking_state(self, state: TrackingState, reason: str | None = None) -> float:
        """Per-frame tracking update. Returns the current scan progress."""
        if state is TrackingState.NORMAL:
            if self._state is ScanState.SCANNING:
                self.update_progress()
        elif state is TrackingState.NOT_AVAILABLE:
            self.fail(reason or "AR tracking not available")
        else:
            # Limited tracking keeps the current progress
            logger.debug(f"Tracking limited: {reason or 'unspecified'}")
        return self._scan_progress

    # -- progress ----------------------------------------------------------

    def compute_progress(self) -> float:
        cfg = self.config.session
        surface_progress = min(len(self.model.surfaces) * cfg.surface_progress_step, cfg.surface_progress_cap)
        return min(self.analyzer.analysis_progress * cfg.analysis_weight + surface_progress, 1.0)

    def update_progress(self) -> float:
        """Refresh scan progress and stop the scan once the room is understood."""
        self._scan_progress = self.compute_progress()
        cfg = self.config.session
        if (
            cfg.auto_complete
            and self._state is ScanState.SCANNING
            and self.analyzer.room_structure is not None
            and self._scan_progress >= cfg.auto_complete_progress
        ):
            logger.info(f"Auto-completing scan at {self._scan_progress:.0%}: {self.model.summary()}")
            self.stop()
        return self._scan_progress

    def _transition(self, new_state: ScanState) -> None:
        if new_state is not self._state:
            logger.info(f"Scan state: {self._state.value} -> {new_state.value}")
        self._state = new_state
