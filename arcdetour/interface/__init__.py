"""Mini README: Interactive interfaces for ArcDetour.

Exports the FastAPI application factory. The Typer CLI lives in
``main_mission_planner.py`` at the repository root.
"""

from .web_app import create_application

__all__ = ["create_application"]
