"""Surface deduplication: fold a new surface into the retained collection.

The same physical surface is reported many times while tracking refines
it. A candidate of the same type whose anchor origin lies within the merge
distance of a retained surface is folded into that surface; otherwise it
is admitted as a new one.

Matching looks only at anchor origins. Bounds are merged but never
compared, so two surfaces with distant extents can still merge when their
origins are close.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from datetime import datetime
from enum import Enum

from roomscan.core.contracts import DetectedSurface
from roomscan.utils.geometry import anchor_distance, covering_rect
from .config import MergeConfig

logger = logging.getLogger(__name__)


class MergeOutcome(str, Enum):
    REJECTED = "rejected"
    MERGED = "merged"
    ADMITTED = "admitted"


def find_merge_target(
    candidate: DetectedSurface,
    surfaces: Sequence[DetectedSurface],
    merge_distance: float,
) -> int | None:
    """Index of the first same-type surface strictly within merge distance."""
    for index, existing in enumerate(surfaces):
        if existing.type != candidate.type:
            continue
        if anchor_distance(existing.anchor, candidate.anchor) < merge_distance:
            return index
    return None


def merge_surfaces(
    existing: DetectedSurface,
    incoming: DetectedSurface,
    timestamp: datetime,
    significant_area: float = 1.0,
) -> DetectedSurface:
    """Combine two surfaces into a new record. The existing anchor is kept."""
    area = existing.area + incoming.area
    return DetectedSurface(
        type=existing.type,
        anchor=existing.anchor,
        bounds=covering_rect(existing.bounds, incoming.bounds),
        confidence=max(existing.confidence, incoming.confidence),
        timestamp=timestamp,
        area=area,
        is_significant=area >= significant_area,
    )


def fold_surface(
    surfaces: tuple[DetectedSurface, ...],
    candidate: DetectedSurface,
    timestamp: datetime,
    config: MergeConfig | None = None,
) -> tuple[tuple[DetectedSurface, ...], MergeOutcome]:
    """Return the surface collection after offering it one candidate.

    At most one merge happens per call; the first match wins. Candidates
    below the minimum area leave the collection untouched.
    """
    if config is None:
        config = MergeConfig()

    if candidate.area < config.min_surface_area:
        return surfaces, MergeOutcome.REJECTED

    index = find_merge_target(candidate, surfaces, config.merge_distance)
    if index is None:
        logger.debug(f"Admitted {candidate.type.value} surface ({candidate.area:.2f}m²)")
        return surfaces + (candidate,), MergeOutcome.ADMITTED

    merged = merge_surfaces(surfaces[index], candidate, timestamp, config.significant_area)
    logger.debug(
        f"Merged {candidate.type.value} surface into slot {index} "
        f"({surfaces[index].area:.2f} + {candidate.area:.2f}m²)"
    )
    return surfaces[:index] + (merged,) + surfaces[index + 1:], MergeOutcome.MERGED
