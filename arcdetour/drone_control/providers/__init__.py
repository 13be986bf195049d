"""Mini README: Concrete vehicle provider implementations.

New providers should export a subclass of ``MissionControlProvider`` and call
``REGISTRY.register`` during module import to keep the system discoverable.
"""

from .simulated_provider import SimulatedProvider

__all__ = ["SimulatedProvider"]
