"""Mini README: Utility helper functions for ArcDetour.

Exports the entry point plugin loader and the GeoJSON mission exporter.
"""

from .geojson import path_to_geojson
from .plugin_loader import load_entry_point_plugins

__all__ = ["load_entry_point_plugins", "path_to_geojson"]
