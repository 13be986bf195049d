"""Mini README: In-memory vehicle used for demos, tests and dry runs.

Structure:
    * SimulatedProvider - concrete provider with no hardware dependency.

The simulated vehicle becomes healthy right after connecting, advances one
mission item per ``is_mission_finished`` poll and disarms once it lands.
"""

from __future__ import annotations

from typing import List, Optional, Sequence, Tuple

from ..base import MissionControlProvider, MissionItem
from ..registry import REGISTRY
from ...errors import MissionExecutionError
from ...logging_utils import get_logger

LOGGER = get_logger(__name__)

DEFAULT_HOME = (37.5, 127.0)


class SimulatedProvider(MissionControlProvider):
    """Provider that fakes a multicopter following uploaded missions."""

    provider_name = "simulated"

    def __init__(
        self,
        connection_string: Optional[str] = None,
        *,
        home: Tuple[float, float] = DEFAULT_HOME,
    ) -> None:
        super().__init__(connection_string=connection_string)
        self.home = home
        self.connected = False
        self.armed = False
        self.in_air = False
        self.mission_items: List[MissionItem] = []
        self.current_item = 0
        self._position = home

    def connect(self) -> None:
        LOGGER.info("Connecting to simulated vehicle '%s'", self.connection_string or "local")
        self.connected = True

    def disconnect(self) -> None:
        LOGGER.info("Disconnecting simulated vehicle")
        self.connected = False

    def _require_connection(self, step: str) -> None:
        if not self.connected:
            raise MissionExecutionError("Simulated vehicle is not connected", step=step)

    def health_all_ok(self) -> bool:
        return self.connected

    def current_position(self) -> Tuple[float, float]:
        self._require_connection("telemetry")
        return self._position

    def upload_mission(self, items: Sequence[MissionItem]) -> None:
        self._require_connection("upload")
        if not items:
            raise MissionExecutionError("Refusing to upload an empty mission", step="upload")
        self.mission_items = list(items)
        self.current_item = 0
        LOGGER.info("Simulated vehicle accepted %s mission items", len(self.mission_items))

    def arm(self) -> None:
        self._require_connection("arm")
        self.armed = True

    def start_mission(self) -> None:
        self._require_connection("start")
        if not self.armed:
            raise MissionExecutionError("Vehicle must be armed before starting", step="start")
        if not self.mission_items:
            raise MissionExecutionError("No mission uploaded", step="start")
        self.in_air = True

    def is_mission_finished(self) -> bool:
        if not self.in_air:
            return False
        if self.current_item < len(self.mission_items):
            item = self.mission_items[self.current_item]
            self._position = (float(item["latitude_deg"]), float(item["longitude_deg"]))
            self.current_item += 1
            LOGGER.debug(
                "Simulated vehicle reached item %s/%s", self.current_item, len(self.mission_items)
            )
        return self.current_item >= len(self.mission_items)

    def land(self) -> None:
        self._require_connection("land")
        self.in_air = False
        self.armed = False

    def is_armed(self) -> bool:
        return self.armed


REGISTRY.register(SimulatedProvider)
