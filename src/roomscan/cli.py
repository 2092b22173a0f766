"""CLI entry point for roomscan.

Usage:
    roomscan analyze observations.yaml   # One batch pass over a plane snapshot
    roomscan replay observations.yaml    # Feed observations one by one through a scan session
    roomscan info                        # Show effective configuration
"""

from __future__ import annotations

from pathlib import Path

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.table import Table

from roomscan.core.contracts import RoomScanConfig
from roomscan.core.logging import setup_logging

app = typer.Typer(name="roomscan", help="Room understanding from tracked planes")
console = Console()

DEFAULT_CONFIG = Path("configs/room_scan.yaml")


def _load_config(config: Path) -> RoomScanConfig:
    from roomscan.core.pipeline_runner import load_room_scan_config

    if not config.exists():
        if config == DEFAULT_CONFIG:
            return RoomScanConfig()
        console.print(f"[red]Config file not found: {config}[/red]")
        raise typer.Exit(1)
    try:
        return load_room_scan_config(config)
    except ValidationError as e:
        console.print(f"[red]Invalid config {config}:[/red]\n{e}")
        raise typer.Exit(1)


def _load_observations(path: Path):
    from roomscan.utils.io import load_observations

    try:
        return load_observations(path)
    except (FileNotFoundError, ValueError) as e:
        console.print(f"[red]{e}[/red]")
        raise typer.Exit(1)


@app.command()
def analyze(
    observations: Path = typer.Argument(..., help="YAML/JSON file of plane observations"),
    config: Path = typer.Option(DEFAULT_CONFIG, help="Room scan config path"),
    log_level: str = typer.Option("WARNING", help="Logging level"),
) -> None:
    """Run one batch room analysis pass."""
    setup_logging(log_level)
    from roomscan.core.pipeline_runner import RoomAnalyzer

    cfg = _load_config(config)
    planes = _load_observations(observations)
    report = RoomAnalyzer(cfg).analyze(planes)

    bounds = report.bounds
    table = Table(title=f"Room analysis: {len(planes)} planes")
    table.add_column("Metric", style="cyan")
    table.add_column("Value", style="green")
    table.add_row("Clustered planes", str(report.num_clustered))
    table.add_row("Width (m)", f"{bounds.width:.2f}")
    table.add_row("Length (m)", f"{bounds.length:.2f}")
    table.add_row("Height (m)", f"{bounds.height:.2f}")
    table.add_row("Area (m²)", f"{bounds.area:.2f}")
    table.add_row("Volume (m³)", f"{bounds.volume:.2f}")
    console.print(table)

    if report.structure is None:
        console.print(f"[yellow]No room structure: {', '.join(report.validation.failures)}[/yellow]")
        raise typer.Exit(2)

    s = report.structure
    console.print(
        f"[green]{s.summary()}[/green] "
        f"({s.floor_count} floors, {s.ceiling_count} ceilings)"
    )


@app.command()
def replay(
    observations: Path = typer.Argument(..., help="YAML/JSON file of plane observations"),
    config: Path = typer.Option(DEFAULT_CONFIG, help="Room scan config path"),
    log_level: str = typer.Option("WARNING", help="Logging level"),
) -> None:
    """Replay observations through a scan session and report live statistics."""
    setup_logging(log_level)
    from roomscan.live.scan_session import ScanSession, ScanState, TrackingState

    cfg = _load_config(config)
    planes = _load_observations(observations)

    session = ScanSession(cfg)
    session.start()
    for i, plane in enumerate(planes):
        outcome = session.on_plane(plane)
        session.on_plane_snapshot(planes[: i + 1])
        session.on_tracking_state(TrackingState.NORMAL)
        console.print(f"[dim]{plane.identifier}: {outcome.value}[/dim]")
        if session.state is not ScanState.SCANNING:
            break

    stats = session.model.statistics
    table = Table(title="Live room statistics")
    table.add_column("Metric", style="cyan")
    table.add_column("Value", style="green")
    table.add_row("Surfaces", str(len(session.model.surfaces)))
    table.add_row("Floors", str(stats.floor_count))
    table.add_row("Walls", str(stats.wall_count))
    table.add_row("Ceilings", str(stats.ceiling_count))
    table.add_row("Room area (m²)", f"{stats.room_area:.2f}")
    dims = stats.dimensions
    table.add_row("Dimensions (m)", f"{dims.width:.2f} x {dims.length:.2f} x {dims.height:.2f}")
    table.add_row("Scan progress", f"{session.scan_progress:.0%}")
    table.add_row("State", session.state.value)
    table.add_row("Complete", "Y" if session.model.is_complete() else "N")
    console.print(table)
    console.print(session.model.summary())
    if session.room_structure is not None:
        console.print(f"[green]{session.room_structure.summary()}[/green]")


@app.command()
def info(config: Path = typer.Option(DEFAULT_CONFIG, help="Room scan config path")) -> None:
    """Show the effective configuration."""
    cfg = _load_config(config)
    table = Table(title=f"Config: {config}")
    table.add_column("Section", style="cyan")
    table.add_column("Key", style="green")
    table.add_column("Value", style="yellow")

    for section, values in cfg.model_dump().items():
        if not values:
            table.add_row(section, "-", "-")
        for key, value in values.items():
            table.add_row(section, key, str(value))
    console.print(table)


if __name__ == "__main__":
    app()
