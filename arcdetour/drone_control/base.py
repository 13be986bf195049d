"""Mini README: Abstract base class describing vehicle mission capabilities.

Structure:
    * MissionItem - upload-ready mapping produced by ``MissionPath``.
    * MissionControlProvider - abstract interface implemented by backends.

A provider wraps one vehicle-control SDK. Methods are synchronous and raise
``MissionExecutionError`` when the vehicle rejects a request, so callers can
run the flight sequence as plain request/response steps.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Dict, Optional, Sequence, Tuple

from ..logging_utils import get_logger

LOGGER = get_logger(__name__)

MissionItem = Dict[str, object]


class MissionControlProvider(ABC):
    """Base interface for vehicle backends accepting waypoint missions."""

    provider_name: str = "generic"

    def __init__(self, connection_string: Optional[str] = None) -> None:
        self.connection_string = connection_string
        LOGGER.debug(
            "Initialising %s provider with connection '%s'", self.provider_name, connection_string
        )

    @abstractmethod
    def connect(self) -> None:
        """Establish a connection with the vehicle or simulator."""

    @abstractmethod
    def disconnect(self) -> None:
        """Safely terminate the connection and release resources."""

    @abstractmethod
    def health_all_ok(self) -> bool:
        """Return True once the vehicle reports it is ready to arm."""

    @abstractmethod
    def current_position(self) -> Tuple[float, float]:
        """Latest (latitude, longitude) reported by telemetry."""

    @abstractmethod
    def upload_mission(self, items: Sequence[MissionItem]) -> None:
        """Replace the vehicle's mission with ``items`` in order."""

    @abstractmethod
    def arm(self) -> None: ...

    @abstractmethod
    def start_mission(self) -> None: ...

    @abstractmethod
    def is_mission_finished(self) -> bool: ...

    @abstractmethod
    def land(self) -> None: ...

    @abstractmethod
    def is_armed(self) -> bool: ...

    def metadata(self) -> Dict[str, str]:
        """Return diagnostic metadata for interface displays."""

        return {
            "provider": self.provider_name,
            "connection": self.connection_string or "not configured",
        }
