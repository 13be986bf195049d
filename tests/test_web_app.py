"""Mini README: Tests for the FastAPI planning service."""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from arcdetour.interface import create_application


@pytest.fixture()
def client() -> TestClient:
    return TestClient(create_application())


def test_overview_lists_providers_and_defaults(client: TestClient) -> None:
    response = client.get("/")

    assert response.status_code == 200
    payload = response.json()
    assert "simulated" in payload["providers"]
    assert payload["defaults"]["segment_count"] == 15
    assert payload["defaults"]["detour_radius"] == pytest.approx(0.00015)


def test_plan_mission_returns_waypoints_and_overlay(client: TestClient) -> None:
    response = client.post(
        "/plan-mission",
        data={"start_lat": 37.5, "start_lon": 127.0, "end_lat": 37.5, "end_lon": 127.001, "segment_count": 6},
    )

    assert response.status_code == 200
    payload = response.json()
    assert len(payload["waypoints"]) == 9
    assert payload["obstacle"]["longitude"] == pytest.approx(127.0005)
    line = payload["overlay"]["features"][0]
    assert line["geometry"]["coordinates"][0] == [127.0, 37.5]
    assert line["properties"]["waypoint_count"] == 9


def test_plan_mission_accepts_explicit_obstacle(client: TestClient) -> None:
    response = client.post(
        "/plan-mission",
        data={
            "start_lat": 37.5,
            "start_lon": 127.0,
            "end_lat": 37.5,
            "end_lon": 127.002,
            "obstacle_lat": 37.5005,
            "obstacle_lon": 127.001,
        },
    )

    assert response.status_code == 200
    assert response.json()["obstacle"] == {"latitude": 37.5005, "longitude": 127.001}


@pytest.mark.parametrize(
    "extra",
    [{"segment_count": 0}, {"detour_radius": -0.1}, {"obstacle_lat": 37.5}],
)
def test_plan_mission_rejects_bad_input(client: TestClient, extra: dict) -> None:
    data = {"start_lat": 37.5, "start_lon": 127.0, "end_lat": 37.5, "end_lon": 127.001}
    data.update(extra)

    response = client.post("/plan-mission", data=data)

    assert response.status_code == 400


def test_plan_mission_rejects_out_of_range_start(client: TestClient) -> None:
    response = client.post(
        "/plan-mission",
        data={"start_lat": 95.0, "start_lon": 127.0, "end_lat": 37.5, "end_lon": 127.001},
    )

    assert response.status_code == 400
    assert "Latitude" in response.json()["detail"]


def test_plan_mission_rejects_huge_segment_count(client: TestClient) -> None:
    response = client.post(
        "/plan-mission",
        data={
            "start_lat": 37.5,
            "start_lon": 127.0,
            "end_lat": 37.5,
            "end_lon": 127.001,
            "segment_count": 1_000_000_000,
        },
    )

    assert response.status_code == 400
    assert "must not exceed" in response.json()["detail"]
