"""Mini README: GeoJSON helpers for mission previews.

Converts mission paths into GeoJSON features so the web interface and the
CLI can hand plans to any map viewer. GeoJSON positions are (lon, lat).
"""

from __future__ import annotations

from typing import Dict, Optional, Tuple

from ..route_planning.waypoints import MissionPath


def path_to_geojson(
    path: MissionPath, *, obstacle: Optional[Tuple[float, float]] = None
) -> Dict:
    """Return a FeatureCollection holding the flight line and optional obstacle."""

    if len(path) == 0:
        raise ValueError("Cannot export an empty mission path")

    features = [
        {
            "type": "Feature",
            "geometry": {
                "type": "LineString",
                "coordinates": [[waypoint.longitude, waypoint.latitude] for waypoint in path],
            },
            "properties": {
                "description": path.description,
                "waypoint_count": len(path),
            },
        }
    ]
    if obstacle is not None:
        features.append(
            {
                "type": "Feature",
                "geometry": {"type": "Point", "coordinates": [obstacle[1], obstacle[0]]},
                "properties": {"role": "obstacle"},
            }
        )
    return {"type": "FeatureCollection", "features": features}
