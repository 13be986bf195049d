"""Mini README: Tests for environment driven settings."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from arcdetour.configuration import ArcDetourSettings


def test_defaults_match_field_mission_profile() -> None:
    settings = ArcDetourSettings()
    parameters = settings.mission_parameters()

    assert settings.segment_count == 15
    assert settings.detour_radius == pytest.approx(0.00015)
    assert parameters.relative_altitude_m == pytest.approx(10.0)
    assert parameters.speed_m_s == pytest.approx(100 / 3.6)
    assert parameters.fly_through is True


def test_environment_overrides(monkeypatch) -> None:
    monkeypatch.setenv("ARCDETOUR_SEGMENT_COUNT", "30")
    monkeypatch.setenv("ARCDETOUR_RELATIVE_ALTITUDE_M", "25")
    monkeypatch.setenv("ARCDETOUR_LOG_LEVEL", "debug")

    settings = ArcDetourSettings()

    assert settings.segment_count == 30
    assert settings.mission_parameters().relative_altitude_m == pytest.approx(25.0)
    assert settings.log_level == "DEBUG"


@pytest.mark.parametrize(
    "name, value",
    [("ARCDETOUR_SEGMENT_COUNT", "0"), ("ARCDETOUR_DETOUR_RADIUS", "-0.001")],
)
def test_degenerate_arc_settings_are_rejected(monkeypatch, name: str, value: str) -> None:
    monkeypatch.setenv(name, value)

    with pytest.raises(ValidationError):
        ArcDetourSettings()


def test_unknown_log_level_is_rejected(monkeypatch) -> None:
    monkeypatch.setenv("ARCDETOUR_LOG_LEVEL", "verbose")

    with pytest.raises(ValidationError):
        ArcDetourSettings()


def test_segment_count_above_limit_is_rejected(monkeypatch) -> None:
    monkeypatch.setenv("ARCDETOUR_SEGMENT_COUNT", "1000000000")

    with pytest.raises(ValidationError):
        ArcDetourSettings()
