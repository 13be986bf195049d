"""Mini README: Waypoint records and the factory that builds them.

Structure:
    * MissionParameters - per-waypoint flight constants (altitude, speed, fly-through).
    * Waypoint - immutable mission stop.
    * MissionPath - append-only ordered collection of waypoints.
    * WaypointFactory - validates coordinates and stamps mission constants.

Every coordinate that reaches a mission passes through ``WaypointFactory``,
so out-of-range or non-finite input is rejected here rather than at upload
time on the vehicle.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Dict, Iterable, Iterator, List, Union, overload

from ..errors import InvalidConfiguration, InvalidCoordinate
from ..logging_utils import get_logger

LOGGER = get_logger(__name__)

DEFAULT_ALTITUDE_M = 10.0
DEFAULT_SPEED_M_S = 100.0 / 3.6


@dataclass(frozen=True, slots=True)
class MissionParameters:
    """Flight constants shared by every waypoint of a mission."""

    relative_altitude_m: float = DEFAULT_ALTITUDE_M
    speed_m_s: float = DEFAULT_SPEED_M_S
    fly_through: bool = True

    def __post_init__(self) -> None:
        if not math.isfinite(self.relative_altitude_m) or self.relative_altitude_m < 0:
            raise InvalidConfiguration(
                "Relative altitude must be a finite, non-negative number",
                {"relative_altitude_m": self.relative_altitude_m},
            )
        if not math.isfinite(self.speed_m_s) or self.speed_m_s <= 0:
            raise InvalidConfiguration(
                "Speed must be a finite, positive number",
                {"speed_m_s": self.speed_m_s},
            )


@dataclass(frozen=True, slots=True)
class Waypoint:
    """Single mission stop."""

    latitude: float
    longitude: float
    relative_altitude_m: float
    speed_m_s: float
    fly_through: bool

    def as_mission_item(self) -> Dict[str, object]:
        """Return the tuple of fields a mission upload backend consumes."""

        return {
            "latitude_deg": self.latitude,
            "longitude_deg": self.longitude,
            "relative_altitude_m": self.relative_altitude_m,
            "speed_m_s": self.speed_m_s,
            "is_fly_through": self.fly_through,
        }


@dataclass(slots=True)
class MissionPath:
    """Ordered waypoints; insertion order is flight order."""

    _waypoints: List[Waypoint] = field(default_factory=list, repr=False)
    description: str = ""

    def append(self, waypoint: Waypoint) -> None:
        self._waypoints.append(waypoint)

    def extend(self, waypoints: Iterable[Waypoint]) -> None:
        self._waypoints.extend(waypoints)

    @property
    def waypoints(self) -> List[Waypoint]:
        """Copy of the waypoints, so callers cannot reorder the mission."""

        return list(self._waypoints)

    def __len__(self) -> int:
        return len(self._waypoints)

    def __iter__(self) -> Iterator[Waypoint]:
        return iter(self._waypoints)

    @overload
    def __getitem__(self, index: int) -> Waypoint: ...

    @overload
    def __getitem__(self, index: slice) -> List[Waypoint]: ...

    def __getitem__(self, index: Union[int, slice]) -> Union[Waypoint, List[Waypoint]]:
        return self._waypoints[index]

    def as_mission_items(self) -> List[Dict[str, object]]:
        """Convert waypoints to upload-ready dictionaries."""

        return [waypoint.as_mission_item() for waypoint in self._waypoints]


def validate_coordinate(latitude: float, longitude: float) -> None:
    """Raise ``InvalidCoordinate`` unless both values are finite and in range."""

    try:
        latitude = float(latitude)
        longitude = float(longitude)
    except (TypeError, ValueError) as error:
        raise InvalidCoordinate(
            "Coordinates must be numeric",
            {"latitude": latitude, "longitude": longitude},
        ) from error
    if not (math.isfinite(latitude) and math.isfinite(longitude)):
        raise InvalidCoordinate(
            "Coordinates must be finite",
            {"latitude": latitude, "longitude": longitude},
        )
    if not -90.0 <= latitude <= 90.0:
        raise InvalidCoordinate(
            "Latitude must be between -90 and 90 degrees", {"latitude": latitude}
        )
    if not -180.0 <= longitude <= 180.0:
        raise InvalidCoordinate(
            "Longitude must be between -180 and 180 degrees", {"longitude": longitude}
        )


class WaypointFactory:
    """Turn raw coordinates into waypoints carrying the mission constants."""

    def __init__(self, parameters: MissionParameters | None = None) -> None:
        self.parameters = parameters or MissionParameters()
        LOGGER.debug("Initialised WaypointFactory with %s", self.parameters)

    def make_waypoint(self, latitude: float, longitude: float) -> Waypoint:
        """Validate the coordinate and build an immutable waypoint."""

        validate_coordinate(latitude, longitude)
        return Waypoint(
            latitude=float(latitude),
            longitude=float(longitude),
            relative_altitude_m=self.parameters.relative_altitude_m,
            speed_m_s=self.parameters.speed_m_s,
            fly_through=self.parameters.fly_through,
        )

    def append(self, path: MissionPath, latitude: float, longitude: float) -> Waypoint:
        """Build a waypoint and append it to ``path``."""

        waypoint = self.make_waypoint(latitude, longitude)
        path.append(waypoint)
        return waypoint
