"""Mini README: Half-ellipse detour around a single point obstacle.

Structure:
    * AvoidanceManoeuvre - obstacle centre, entry angle and arc resolution.
    * arc_coordinates - closed-form arc positions in traversal order.
    * generate_avoidance_arc - turns the arc into waypoints on a mission path.

For step ``i`` in ``0..N`` the arc angle is ``entry_angle + i * pi / N`` and
the position is::

    lat = obstacle_lat - r * sin(theta)
    lon = obstacle_lon - 1.5 * r * cos(theta)

so the vehicle sweeps exactly half a turn. The longitude axis is stretched
by ``LONGITUDE_CLEARANCE_FACTOR`` to widen lateral clearance; the shape is an
ellipse, not a circle, and must stay that way.
"""

from __future__ import annotations

import math
import numbers
from dataclasses import dataclass
from typing import List, Tuple

import numpy as np

from ..errors import InvalidConfiguration
from ..logging_utils import get_logger
from .waypoints import MissionPath, WaypointFactory

LOGGER = get_logger(__name__)

DEFAULT_SEGMENT_COUNT = 15
DEFAULT_DETOUR_RADIUS = 0.00015
MAX_SEGMENT_COUNT = 10_000
LONGITUDE_CLEARANCE_FACTOR = 1.5
ARC_SWEEP = math.pi


@dataclass(frozen=True, slots=True)
class AvoidanceManoeuvre:
    """Parameters of one detour around an obstacle."""

    obstacle_latitude: float
    obstacle_longitude: float
    entry_angle: float
    segment_count: int = DEFAULT_SEGMENT_COUNT
    detour_radius: float = DEFAULT_DETOUR_RADIUS

    def validate(self) -> None:
        """Reject parameters that would give a degenerate or undefined arc."""

        if isinstance(self.segment_count, bool) or not isinstance(
            self.segment_count, numbers.Integral
        ):
            raise InvalidConfiguration(
                "Segment count must be an integer",
                {"segment_count": self.segment_count},
            )
        if self.segment_count <= 0:
            raise InvalidConfiguration(
                "Segment count must be at least 1",
                {"segment_count": self.segment_count},
            )
        if self.segment_count > MAX_SEGMENT_COUNT:
            raise InvalidConfiguration(
                f"Segment count must not exceed {MAX_SEGMENT_COUNT}",
                {"segment_count": self.segment_count},
            )
        if not _is_finite_number(self.detour_radius) or self.detour_radius <= 0:
            raise InvalidConfiguration(
                "Detour radius must be a finite, positive number",
                {"detour_radius": self.detour_radius},
            )
        if not _is_finite_number(self.entry_angle):
            raise InvalidConfiguration(
                "Entry angle must be a finite number of radians",
                {"entry_angle": self.entry_angle},
            )

    @property
    def waypoint_count(self) -> int:
        return self.segment_count + 1


def _is_finite_number(value: object) -> bool:
    return isinstance(value, numbers.Real) and math.isfinite(value)


def arc_coordinates(manoeuvre: AvoidanceManoeuvre) -> List[Tuple[float, float]]:
    """Return ``segment_count + 1`` (lat, lon) pairs in traversal order."""

    manoeuvre.validate()
    steps = np.arange(manoeuvre.waypoint_count, dtype=float)
    thetas = manoeuvre.entry_angle + steps * ARC_SWEEP / manoeuvre.segment_count
    latitudes = manoeuvre.obstacle_latitude - manoeuvre.detour_radius * np.sin(thetas)
    longitudes = manoeuvre.obstacle_longitude - (
        LONGITUDE_CLEARANCE_FACTOR * manoeuvre.detour_radius * np.cos(thetas)
    )
    return [(float(lat), float(lon)) for lat, lon in zip(latitudes, longitudes)]


def generate_avoidance_arc(
    path: MissionPath,
    factory: WaypointFactory,
    obstacle_latitude: float,
    obstacle_longitude: float,
    entry_angle: float,
    *,
    segment_count: int = DEFAULT_SEGMENT_COUNT,
    detour_radius: float = DEFAULT_DETOUR_RADIUS,
) -> None:
    """Append the detour waypoints around an obstacle to ``path``.

    Nothing is appended unless every arc waypoint is valid, so a rejected
    manoeuvre leaves the path exactly as it was.
    """

    manoeuvre = AvoidanceManoeuvre(
        obstacle_latitude=obstacle_latitude,
        obstacle_longitude=obstacle_longitude,
        entry_angle=entry_angle,
        segment_count=segment_count,
        detour_radius=detour_radius,
    )
    coordinates = arc_coordinates(manoeuvre)
    waypoints = [factory.make_waypoint(lat, lon) for lat, lon in coordinates]
    path.extend(waypoints)
    LOGGER.info(
        "Added %s-point avoidance arc around (%.7f, %.7f) entry=%.4f rad radius=%s",
        len(waypoints),
        obstacle_latitude,
        obstacle_longitude,
        entry_angle,
        detour_radius,
    )
