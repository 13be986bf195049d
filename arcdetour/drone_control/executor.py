"""Mini README: Synchronous flight sequence for an assembled mission.

Structure:
    * MissionReport - summary returned after a successful flight.
    * MissionExecutor - connect, wait for health, upload, arm, fly, hover,
      land, disarm.

Each step is a blocking call on the provider followed by polling where the
vehicle needs time. Timeouts are expressed as a number of polls so tests can
swap ``sleep`` for a no-op without touching the wall clock.

Callers that plan relative to the vehicle's position run ``prepare`` first:
it connects once, waits until the vehicle is healthy and only then reads the
home position. ``execute`` reuses that connection.
"""

from __future__ import annotations

import math
import time
from dataclasses import dataclass
from typing import Callable, Optional, Tuple

from .base import MissionControlProvider
from ..errors import MissionExecutionError
from ..logging_utils import get_logger
from ..route_planning.waypoints import MissionPath

LOGGER = get_logger(__name__)


@dataclass(slots=True)
class MissionReport:
    """What happened during a completed mission."""

    provider: str
    waypoint_count: int
    progress_polls: int
    final_position: Optional[tuple] = None


class MissionExecutor:
    """Drive a provider through the full mission lifecycle."""

    def __init__(
        self,
        provider: MissionControlProvider,
        *,
        poll_interval: float = 1.0,
        hover_seconds: float = 10.0,
        health_timeout: float = 60.0,
        mission_timeout: float = 600.0,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        if poll_interval <= 0:
            raise ValueError("poll_interval must be positive")
        self.provider = provider
        self.poll_interval = poll_interval
        self.hover_seconds = hover_seconds
        self.health_timeout = health_timeout
        self.mission_timeout = mission_timeout
        self._sleep = sleep
        self._connected = False
        self._ready = False

    def _max_polls(self, timeout: float) -> int:
        return max(1, math.ceil(timeout / self.poll_interval))

    def _wait_for(self, condition: Callable[[], bool], timeout: float, step: str) -> int:
        """Poll ``condition`` until it holds; return the number of polls used."""

        for attempt in range(1, self._max_polls(timeout) + 1):
            if condition():
                return attempt
            self._sleep(self.poll_interval)
        raise MissionExecutionError(f"Timed out after {timeout}s waiting for {step}", step=step)

    def prepare(self) -> Tuple[float, float]:
        """Connect, wait for a healthy vehicle and return its home position."""

        provider = self.provider
        try:
            if not self._connected:
                provider.connect()
                self._connected = True
            if not self._ready:
                LOGGER.info("Waiting for %s vehicle to report healthy", provider.provider_name)
                self._wait_for(provider.health_all_ok, self.health_timeout, "health")
                self._ready = True
            home = provider.current_position()
        except MissionExecutionError:
            self.close()
            raise
        LOGGER.info("Vehicle ready at %s", home)
        return home

    def close(self) -> None:
        """Disconnect if a connection is open; safe to call repeatedly."""

        if self._connected:
            self.provider.disconnect()
        self._connected = False
        self._ready = False

    def execute(self, path: MissionPath) -> MissionReport:
        """Fly ``path`` and return once the vehicle has landed and disarmed."""

        provider = self.provider
        try:
            if len(path) == 0:
                raise MissionExecutionError("Mission path is empty", step="upload")
            if not self._ready:
                self.prepare()

            provider.upload_mission(path.as_mission_items())
            LOGGER.info("Uploaded mission with %s waypoints", len(path))

            LOGGER.info("Arming...")
            provider.arm()

            LOGGER.info("Starting mission.")
            provider.start_mission()
            polls = self._wait_for(
                provider.is_mission_finished, self.mission_timeout, "mission completion"
            )

            if self.hover_seconds > 0:
                LOGGER.info("Mission finished; holding for %ss", self.hover_seconds)
                self._sleep(self.hover_seconds)

            LOGGER.info("Landing...")
            provider.land()
            self._wait_for(
                lambda: not provider.is_armed(), self.mission_timeout, "disarm"
            )
            LOGGER.info("Disarmed; mission complete")
            return MissionReport(
                provider=provider.provider_name,
                waypoint_count=len(path),
                progress_polls=polls,
                final_position=provider.current_position(),
            )
        except MissionExecutionError as error:
            LOGGER.error("Mission aborted during %s: %s", error.step or "unknown step", error)
            raise
        finally:
            self.close()
