"""Mini README: FastAPI service exposing the detour planner.

Structure:
    * create_application - application factory wiring routes and settings.

The service is stateless: each request assembles a fresh mission from the
submitted coordinates and returns the waypoints plus a GeoJSON overlay.
Planning errors map to HTTP 400 so a client never receives a partial path.
"""

from __future__ import annotations

from typing import Optional

from fastapi import FastAPI, Form, HTTPException
from fastapi.responses import JSONResponse

from ..configuration import get_settings
from ..drone_control import REGISTRY
from ..errors import PlanningError
from ..logging_utils import configure_root_logger, get_logger
from ..route_planning import RoutePlanner, extrapolate_obstacle
from ..utils.geojson import path_to_geojson

LOGGER = get_logger(__name__)


def create_application() -> FastAPI:
    """Create the FastAPI application with routes and dependencies."""

    settings = get_settings()
    configure_root_logger(settings.log_level)
    app = FastAPI(title="ArcDetour Mission Planner", version="0.1.0")
    parameters = settings.mission_parameters()
    provider_registry = REGISTRY

    @app.get("/")
    async def overview() -> JSONResponse:
        """Describe available providers and default planning parameters."""

        providers = list(provider_registry.available_providers())
        LOGGER.debug("Rendering overview with providers: %s", providers)
        return JSONResponse(
            {
                "environment": settings.environment,
                "providers": providers,
                "defaults": {
                    "segment_count": settings.segment_count,
                    "detour_radius": settings.detour_radius,
                    "entry_angle": settings.entry_angle,
                    "relative_altitude_m": parameters.relative_altitude_m,
                    "speed_m_s": parameters.speed_m_s,
                    "fly_through": parameters.fly_through,
                },
            }
        )

    @app.post("/plan-mission")
    async def plan_mission(
        start_lat: float = Form(...),
        start_lon: float = Form(...),
        end_lat: float = Form(...),
        end_lon: float = Form(...),
        obstacle_lat: Optional[float] = Form(None),
        obstacle_lon: Optional[float] = Form(None),
        entry_angle: Optional[float] = Form(None),
        segment_count: Optional[int] = Form(None),
        detour_radius: Optional[float] = Form(None),
    ) -> JSONResponse:
        """Return the start -> detour -> end mission for the submitted points."""

        start = (start_lat, start_lon)
        end = (end_lat, end_lon)
        if (obstacle_lat is None) != (obstacle_lon is None):
            raise HTTPException(
                status_code=400,
                detail="Provide both obstacle_lat and obstacle_lon, or neither",
            )
        if obstacle_lat is None:
            obstacle = extrapolate_obstacle(start, end)
        else:
            obstacle = (obstacle_lat, obstacle_lon)

        planner = RoutePlanner(
            parameters=parameters,
            segment_count=settings.segment_count if segment_count is None else segment_count,
            detour_radius=settings.detour_radius if detour_radius is None else detour_radius,
        )
        try:
            path = planner.plan_detour(
                start,
                end,
                obstacle,
                entry_angle=settings.entry_angle if entry_angle is None else entry_angle,
            )
        except PlanningError as error:
            LOGGER.warning("Rejected mission request: %s", error)
            raise HTTPException(status_code=400, detail=str(error)) from error

        LOGGER.info("Generated mission with %s waypoints", len(path))
        return JSONResponse(
            {
                "obstacle": {"latitude": obstacle[0], "longitude": obstacle[1]},
                "waypoints": path.as_mission_items(),
                "overlay": path_to_geojson(path, obstacle=obstacle),
            }
        )

    return app
