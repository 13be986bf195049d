"""Mini README: Centralised configuration models and helpers for ArcDetour.

Structure:
    * ArcDetourSettings - Pydantic model describing runtime configuration.
    * get_settings - cached accessor for environment-aware settings.

Usage:
    Import ``get_settings`` to read ``ARCDETOUR_*`` environment variables (or a
    local ``.env`` file). Flight constants that used to be literals in the
    mission code live here and are turned into ``MissionParameters`` through
    ``mission_parameters``.
"""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import Optional

from pydantic import Field, validator
from pydantic_settings import BaseSettings

from .route_planning.avoidance import MAX_SEGMENT_COUNT
from .route_planning.waypoints import DEFAULT_SPEED_M_S, MissionParameters


class ArcDetourSettings(BaseSettings):
    """Runtime configuration for planning and flying detour missions."""

    environment: str = Field(
        "development",
        description="Environment label controlling debug toggles and logging levels.",
    )
    log_level: str = Field("INFO", description="Root logging level.")
    interface_host: str = Field(
        "0.0.0.0",
        description="Network interface for the web service to bind to.",
    )
    interface_port: int = Field(
        8000,
        description="Default port the web service exposes.",
        ge=1,
        le=65535,
    )
    relative_altitude_m: float = Field(
        10.0,
        description="Altitude above the launch point for every waypoint.",
        ge=0.0,
    )
    cruise_speed_m_s: float = Field(
        DEFAULT_SPEED_M_S,
        description="Commanded speed for every waypoint (default 100 km/h).",
        gt=0.0,
    )
    fly_through: bool = Field(
        True,
        description="Pass through waypoints without hovering.",
    )
    segment_count: int = Field(
        15,
        description="Number of arc subdivisions around the obstacle.",
        ge=1,
        le=MAX_SEGMENT_COUNT,
    )
    detour_radius: float = Field(
        0.00015,
        description="Clearance from the obstacle centre, in degrees.",
        gt=0.0,
    )
    entry_angle: float = Field(
        0.0001,
        description="Heading in radians at which the arc begins.",
    )
    leg_offset_deg: float = Field(
        0.001,
        description="Longitude offset between home and the first mission point.",
    )
    provider: str = Field("simulated", description="Drone control provider identifier.")
    connection_string: Optional[str] = Field(
        None,
        description="Provider connection string, e.g. udp://:14540.",
    )
    poll_interval_seconds: float = Field(1.0, gt=0.0)
    hover_seconds: float = Field(
        10.0,
        description="Time spent holding position after the last waypoint.",
        ge=0.0,
    )
    health_timeout_seconds: float = Field(60.0, gt=0.0)
    mission_timeout_seconds: float = Field(600.0, gt=0.0)

    class Config:
        env_prefix = "ARCDETOUR_"
        env_file = ".env"
        case_sensitive = False

    @validator("log_level", pre=True)
    def _normalise_level(cls, value: str) -> str:
        """Accept lower case level names; reject names logging does not know."""

        level = str(value).strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level '{value}'")
        return level

    def mission_parameters(self) -> MissionParameters:
        """Build the per-waypoint flight constants from settings."""

        return MissionParameters(
            relative_altitude_m=self.relative_altitude_m,
            speed_m_s=self.cruise_speed_m_s,
            fly_through=self.fly_through,
        )


@lru_cache()
def get_settings() -> ArcDetourSettings:
    """Return cached settings, ensuring consistent configuration across modules."""

    return ArcDetourSettings()
