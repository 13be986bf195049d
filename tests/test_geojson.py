"""Mini README: Tests for GeoJSON mission overlays."""

import pytest

from arcdetour.route_planning import MissionPath, RoutePlanner
from arcdetour.utils.geojson import path_to_geojson


def test_path_to_geojson_uses_lon_lat_order():
    path = RoutePlanner(segment_count=2).plan_detour((37.5, 127.0), (37.5, 127.001), (37.5, 127.0005))
    overlay = path_to_geojson(path, obstacle=(37.5, 127.0005))

    line, obstacle = overlay["features"]
    assert line["geometry"]["coordinates"][-1] == [127.001, 37.5]
    assert line["properties"]["waypoint_count"] == 5
    assert obstacle["geometry"]["coordinates"] == [127.0005, 37.5]


def test_path_to_geojson_rejects_empty_path():
    with pytest.raises(ValueError):
        path_to_geojson(MissionPath())
