"""Mini README: Core package initializer for ArcDetour.

ArcDetour plans waypoint missions that fly a half-ellipse around a single
known obstacle between two fixed points. Planning lives in
``route_planning``; talking to vehicles lives in ``drone_control``.
"""

from .logging_utils import get_logger

__all__ = ["get_logger"]
