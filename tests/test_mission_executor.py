"""Mini README: Tests for the synchronous flight sequence.

Runs planned missions against the simulated provider with a recording
``sleep`` so no test waits on the wall clock.
"""

from __future__ import annotations

from typing import List

import pytest

from arcdetour.drone_control import MissionExecutor
from arcdetour.drone_control.providers import SimulatedProvider
from arcdetour.errors import MissionExecutionError
from arcdetour.route_planning import MissionPath, RoutePlanner


class _RecordingSleep:
    def __init__(self) -> None:
        self.calls: List[float] = []

    def __call__(self, seconds: float) -> None:
        self.calls.append(seconds)


def test_execute_flies_whole_mission_and_disarms() -> None:
    provider = SimulatedProvider()
    path = RoutePlanner(segment_count=4).plan_from_home(provider.home)
    sleep = _RecordingSleep()

    report = MissionExecutor(provider, poll_interval=0.5, hover_seconds=10.0, sleep=sleep).execute(path)

    assert report.waypoint_count == 7
    assert report.progress_polls == 7
    assert report.final_position == (path[-1].latitude, path[-1].longitude)
    assert provider.mission_items == path.as_mission_items()
    assert provider.armed is False
    assert provider.connected is False
    assert 10.0 in sleep.calls


def test_execute_rejects_empty_path() -> None:
    provider = SimulatedProvider()

    with pytest.raises(MissionExecutionError):
        MissionExecutor(provider, sleep=_RecordingSleep()).execute(MissionPath())
    assert provider.mission_items == []


def test_health_timeout_aborts_before_upload() -> None:
    class UnhealthyProvider(SimulatedProvider):
        def health_all_ok(self) -> bool:
            return False

    provider = UnhealthyProvider()
    sleep = _RecordingSleep()
    path = RoutePlanner(segment_count=2).plan_from_home(provider.home)

    with pytest.raises(MissionExecutionError) as excinfo:
        MissionExecutor(provider, poll_interval=1.0, health_timeout=3.0, sleep=sleep).execute(path)

    assert excinfo.value.step == "health"
    assert len(sleep.calls) == 3
    assert provider.mission_items == []
    assert provider.connected is False


def test_provider_failure_propagates_and_disconnects() -> None:
    class RefusingProvider(SimulatedProvider):
        def arm(self) -> None:
            raise MissionExecutionError("Arming failed: pre-arm check", step="arm")

    provider = RefusingProvider()
    path = RoutePlanner(segment_count=2).plan_from_home(provider.home)

    with pytest.raises(MissionExecutionError, match="Arming failed"):
        MissionExecutor(provider, sleep=_RecordingSleep()).execute(path)
    assert provider.in_air is False
    assert provider.connected is False


def test_poll_interval_must_be_positive() -> None:
    with pytest.raises(ValueError):
        MissionExecutor(SimulatedProvider(), poll_interval=0)


class LateTelemetryProvider(SimulatedProvider):
    """Reports no position fix until the second health poll."""

    provider_name = "late-telemetry"

    def __init__(self, connection_string=None) -> None:
        super().__init__(connection_string)
        self.calls: List[str] = []
        self._health_polls = 0

    def connect(self) -> None:
        self.calls.append("connect")
        super().connect()

    def disconnect(self) -> None:
        self.calls.append("disconnect")
        super().disconnect()

    def health_all_ok(self) -> bool:
        self.calls.append("health")
        self._health_polls += 1
        return self._health_polls >= 2

    def current_position(self):
        self.calls.append("position")
        if self._health_polls < 2:
            return (0.0, 0.0)
        return super().current_position()

    def upload_mission(self, items) -> None:
        self.calls.append("upload")
        super().upload_mission(items)


def test_prepare_reads_home_only_after_vehicle_is_healthy() -> None:
    provider = LateTelemetryProvider()
    executor = MissionExecutor(provider, hover_seconds=0.0, sleep=_RecordingSleep())

    home = executor.prepare()
    path = RoutePlanner(segment_count=2).plan_from_home(home)
    executor.execute(path)

    assert home == provider.home
    assert provider.calls[:4] == ["connect", "health", "health", "position"]
    assert provider.calls.count("connect") == 1
    assert provider.calls.count("disconnect") == 1
    assert provider.calls.index("upload") > provider.calls.index("position")


def test_close_after_failed_prepare_disconnects_once() -> None:
    class NeverHealthy(LateTelemetryProvider):
        def health_all_ok(self) -> bool:
            self.calls.append("health")
            return False

    provider = NeverHealthy()
    executor = MissionExecutor(provider, health_timeout=2.0, sleep=_RecordingSleep())

    with pytest.raises(MissionExecutionError):
        executor.prepare()
    executor.close()

    assert provider.calls.count("connect") == 1
    assert provider.calls.count("disconnect") == 1
    assert "position" not in provider.calls
