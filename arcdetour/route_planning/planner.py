"""Mini README: Mission assembly around a single static obstacle.

Structure:
    * Coordinate - (latitude, longitude) tuple alias.
    * extrapolate_obstacle - legacy obstacle placement from two mission points.
    * RoutePlanner - builds start -> avoidance arc -> end mission paths.

The planner only sequences the building blocks in ``waypoints`` and
``avoidance``. Errors raised by them abort the whole assembly; a partially
built path is never returned.
"""

from __future__ import annotations

from typing import Iterable, Tuple

from ..logging_utils import get_logger
from .avoidance import DEFAULT_DETOUR_RADIUS, DEFAULT_SEGMENT_COUNT, generate_avoidance_arc
from .waypoints import MissionParameters, MissionPath, Waypoint, WaypointFactory

LOGGER = get_logger(__name__)

Coordinate = Tuple[float, float]

DEFAULT_ENTRY_ANGLE = 0.0001
DEFAULT_LEG_OFFSET = 0.001


def extrapolate_obstacle(start: Coordinate, end: Coordinate) -> Coordinate:
    """Place the obstacle the way the field missions always have.

    Latitude is pushed half a leg back from ``start`` while longitude moves
    half a leg towards ``end``. The two components intentionally use opposite
    differences; see DESIGN.md before changing this.
    """

    start_lat, start_lon = start
    end_lat, end_lon = end
    return (
        start_lat + 0.5 * (start_lat - end_lat),
        start_lon + 0.5 * (end_lon - start_lon),
    )


class RoutePlanner:
    """Assemble detour missions from fixed endpoints and an obstacle."""

    def __init__(
        self,
        *,
        parameters: MissionParameters | None = None,
        segment_count: int = DEFAULT_SEGMENT_COUNT,
        detour_radius: float = DEFAULT_DETOUR_RADIUS,
    ) -> None:
        self.factory = WaypointFactory(parameters)
        self.segment_count = segment_count
        self.detour_radius = detour_radius
        LOGGER.debug(
            "Initialised RoutePlanner with segment_count=%s detour_radius=%s",
            segment_count,
            detour_radius,
        )

    def plan_detour(
        self,
        start: Coordinate,
        end: Coordinate,
        obstacle: Coordinate,
        *,
        entry_angle: float = DEFAULT_ENTRY_ANGLE,
    ) -> MissionPath:
        """Return start, the avoidance arc, then end as one mission path."""

        path = MissionPath(description="Obstacle detour")
        self.factory.append(path, *start)
        generate_avoidance_arc(
            path,
            self.factory,
            obstacle[0],
            obstacle[1],
            entry_angle,
            segment_count=self.segment_count,
            detour_radius=self.detour_radius,
        )
        self.factory.append(path, *end)
        LOGGER.info(
            "Planned detour mission start=%s end=%s obstacle=%s with %s waypoints",
            start,
            end,
            obstacle,
            len(path),
        )
        return path

    def plan_from_home(
        self,
        home: Coordinate,
        *,
        leg_offset: float = DEFAULT_LEG_OFFSET,
        entry_angle: float = DEFAULT_ENTRY_ANGLE,
    ) -> MissionPath:
        """Lay out the standard eastbound test mission relative to ``home``."""

        home_lat, home_lon = home
        start = (home_lat, home_lon + leg_offset)
        end = (home_lat, home_lon + 2 * leg_offset)
        obstacle = extrapolate_obstacle(start, end)
        LOGGER.debug("Home %s -> start %s end %s obstacle %s", home, start, end, obstacle)
        return self.plan_detour(start, end, obstacle, entry_angle=entry_angle)

    def custom_path(self, waypoints: Iterable[Waypoint]) -> MissionPath:
        """Wrap manually provided waypoints into a mission path."""

        waypoints_list = list(waypoints)
        if not waypoints_list:
            raise ValueError("At least one waypoint is required")
        LOGGER.info("Constructed custom path with %s waypoints", len(waypoints_list))
        return MissionPath(_waypoints=waypoints_list, description="Custom path")
