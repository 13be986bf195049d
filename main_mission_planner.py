"""Mini README: Entry point CLI for planning and flying detour missions.

Commands:
    * plan - assemble a mission and print it as JSON or GeoJSON.
    * fly - plan relative to the vehicle's position and run the mission.
    * serve - launch the FastAPI planner with uvicorn.

Defaults come from ``ARCDETOUR_*`` environment variables via ``get_settings``.
"""

from __future__ import annotations

import json
from typing import Optional

import typer
import uvicorn

from arcdetour.configuration import get_settings
from arcdetour.drone_control import REGISTRY, MissionExecutor
from arcdetour.errors import MissionExecutionError, PlanningError
from arcdetour.logging_utils import configure_root_logger
from arcdetour.route_planning import RoutePlanner, extrapolate_obstacle
from arcdetour.utils.geojson import path_to_geojson

cli = typer.Typer(help="Plan and fly missions that detour around an obstacle.")


def _planner(segment_count: Optional[int], detour_radius: Optional[float]) -> RoutePlanner:
    settings = get_settings()
    return RoutePlanner(
        parameters=settings.mission_parameters(),
        segment_count=settings.segment_count if segment_count is None else segment_count,
        detour_radius=settings.detour_radius if detour_radius is None else detour_radius,
    )


@cli.command()
def plan(
    start_lat: float = typer.Option(..., help="Start latitude in degrees."),
    start_lon: float = typer.Option(..., help="Start longitude in degrees."),
    end_lat: float = typer.Option(..., help="End latitude in degrees."),
    end_lon: float = typer.Option(..., help="End longitude in degrees."),
    obstacle_lat: Optional[float] = typer.Option(
        None, help="Obstacle latitude; derived from start/end when omitted."
    ),
    obstacle_lon: Optional[float] = typer.Option(
        None, help="Obstacle longitude; derived from start/end when omitted."
    ),
    entry_angle: Optional[float] = typer.Option(None, help="Arc entry angle in radians."),
    segments: Optional[int] = typer.Option(None, help="Number of arc subdivisions."),
    radius: Optional[float] = typer.Option(None, help="Detour radius in degrees."),
    geojson: bool = typer.Option(False, help="Print a GeoJSON overlay instead of mission items."),
) -> None:
    """Assemble a detour mission and print it."""

    settings = get_settings()
    configure_root_logger(settings.log_level)
    start = (start_lat, start_lon)
    end = (end_lat, end_lon)
    if (obstacle_lat is None) != (obstacle_lon is None):
        typer.echo("Provide both --obstacle-lat and --obstacle-lon, or neither.", err=True)
        raise typer.Exit(code=2)
    if obstacle_lat is None:
        obstacle = extrapolate_obstacle(start, end)
    else:
        obstacle = (obstacle_lat, obstacle_lon)

    try:
        path = _planner(segments, radius).plan_detour(
            start,
            end,
            obstacle,
            entry_angle=settings.entry_angle if entry_angle is None else entry_angle,
        )
    except PlanningError as error:
        typer.echo(f"Planning failed: {error}", err=True)
        raise typer.Exit(code=1) from error

    payload = path_to_geojson(path, obstacle=obstacle) if geojson else path.as_mission_items()
    typer.echo(json.dumps(payload, indent=2))


@cli.command()
def fly(
    provider: Optional[str] = typer.Option(None, help="Registered provider identifier."),
    connection: Optional[str] = typer.Option(None, help="Provider connection string."),
) -> None:
    """Plan the standard detour from the vehicle's position and fly it."""

    settings = get_settings()
    configure_root_logger(settings.log_level)
    REGISTRY.load_plugins()
    try:
        vehicle = REGISTRY.create(
            provider or settings.provider,
            connection_string=connection or settings.connection_string,
        )
    except KeyError as error:
        typer.echo(str(error), err=True)
        raise typer.Exit(code=1) from error

    executor = MissionExecutor(
        vehicle,
        poll_interval=settings.poll_interval_seconds,
        hover_seconds=settings.hover_seconds,
        health_timeout=settings.health_timeout_seconds,
        mission_timeout=settings.mission_timeout_seconds,
    )
    try:
        # Home is only trustworthy once the vehicle reports healthy.
        home = executor.prepare()
        path = _planner(None, None).plan_from_home(
            home, leg_offset=settings.leg_offset_deg, entry_angle=settings.entry_angle
        )
        report = executor.execute(path)
    except (PlanningError, MissionExecutionError) as error:
        executor.close()
        typer.echo(f"Mission aborted: {error}", err=True)
        raise typer.Exit(code=1) from error

    typer.echo(
        f"Finished {report.waypoint_count}-waypoint mission on {report.provider}; "
        f"final position {report.final_position}"
    )


@cli.command()
def serve(
    host: str = typer.Option(None, help="Host interface to bind."),
    port: int = typer.Option(None, help="Port to listen on."),
    production: bool = typer.Option(
        False, help="Use production server settings (disable auto-reload)."
    ),
) -> None:
    """Start the FastAPI planner using uvicorn."""

    settings = get_settings()
    effective_host = host or settings.interface_host
    effective_port = port or settings.interface_port
    configure_root_logger(settings.log_level)

    browser_host = "127.0.0.1" if effective_host in {"0.0.0.0", "::"} else effective_host
    typer.echo(
        f"Starting ArcDetour on {effective_host}:{effective_port}.\n"
        f"API docs at http://{browser_host}:{effective_port}/docs"
    )
    uvicorn.run(
        "arcdetour.interface.web_app:create_application",
        host=effective_host,
        port=effective_port,
        factory=True,
        reload=not production,
    )


if __name__ == "__main__":
    cli()
