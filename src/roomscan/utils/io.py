"""I/O utilities: loading recorded plane observations."""

from __future__ import annotations

from pathlib import Path

import yaml

from roomscan.core.contracts import PlaneObservation


def load_observations(path: Path) -> list[PlaneObservation]:
    """Read observations from a YAML or JSON file.

    The file holds either a list of observations or a mapping with an
    ``observations`` list. Each entry carries a 16-number ``transform`` or a
    3-number ``position``.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Observation file not found: {path}")

    with open(path, encoding="utf-8") as f:
        raw = yaml.safe_load(f) or []

    if isinstance(raw, dict):
        raw = raw.get("observations", [])
    if not isinstance(raw, list):
        raise ValueError(f"{path}: expected a list of observations")

    return [PlaneObservation(**entry) for entry in raw]


def dump_observations(observations: list[PlaneObservation], path: Path) -> None:
    """Write observations as YAML in the format ``load_observations`` reads."""
    data = [obs.model_dump(mode="json") for obs in observations]
    with open(path, "w", encoding="utf-8") as f:
        yaml.safe_dump({"observations": data}, f, sort_keys=False)
