"""Mini README: Vehicle control subsystem package initialiser.

Re-exports key abstractions to simplify imports for the CLI and web
handlers. The package is divided into ``base`` for abstract classes,
``registry`` for plugin management, ``executor`` for the flight sequence and
``providers`` for concrete backends.
"""

from .base import MissionControlProvider, MissionItem
from .executor import MissionExecutor, MissionReport
from .registry import DroneProviderRegistry, REGISTRY
from . import providers  # noqa: F401  # ensure built-in providers register on import

__all__ = [
    "DroneProviderRegistry",
    "MissionControlProvider",
    "MissionExecutor",
    "MissionItem",
    "MissionReport",
    "REGISTRY",
]
