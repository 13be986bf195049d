"""Mini README: Route planning subsystem for obstacle detour missions.

Exports the waypoint factory, the avoidance arc generator and the planner
that splices the arc between a mission's start and end points.
"""

from .avoidance import AvoidanceManoeuvre, arc_coordinates, generate_avoidance_arc
from .planner import RoutePlanner, extrapolate_obstacle
from .waypoints import MissionParameters, MissionPath, Waypoint, WaypointFactory

__all__ = [
    "AvoidanceManoeuvre",
    "MissionParameters",
    "MissionPath",
    "RoutePlanner",
    "Waypoint",
    "WaypointFactory",
    "arc_coordinates",
    "extrapolate_obstacle",
    "generate_avoidance_arc",
]
