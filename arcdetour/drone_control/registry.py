"""Mini README: Provider registry enabling extensible vehicle integrations.

Structure:
    * DroneProviderRegistry - manages registration and instantiation of
      ``MissionControlProvider`` implementations.

Built-in providers register on import. Third-party packages can expose
providers through the ``arcdetour.providers`` entry point group and have
them picked up by ``load_plugins``.
"""

from __future__ import annotations

from typing import Dict, Iterable, Optional, Type

from .base import MissionControlProvider
from ..logging_utils import get_logger
from ..utils.plugin_loader import load_entry_point_plugins

LOGGER = get_logger(__name__)

PROVIDER_ENTRY_POINT_GROUP = "arcdetour.providers"


class DroneProviderRegistry:
    """Simple registry for mapping provider identifiers to classes."""

    def __init__(self) -> None:
        self._providers: Dict[str, Type[MissionControlProvider]] = {}

    def register(self, provider: Type[MissionControlProvider]) -> None:
        """Register a new provider class with the registry."""

        identifier = provider.provider_name.lower()
        LOGGER.debug("Registering provider '%s'", identifier)
        self._providers[identifier] = provider

    def available_providers(self) -> Iterable[str]:
        """Return iterable of provider identifiers for display."""

        return sorted(self._providers.keys())

    def create(self, identifier: str, *, connection_string: Optional[str] = None) -> MissionControlProvider:
        """Instantiate a provider matching the identifier."""

        provider_cls = self._providers.get(identifier.lower())
        if not provider_cls:
            raise KeyError(f"Unknown drone provider '{identifier}'")
        LOGGER.info("Creating provider '%s'", identifier)
        return provider_cls(connection_string=connection_string)

    def load_plugins(self, group: str = PROVIDER_ENTRY_POINT_GROUP) -> int:
        """Register provider classes advertised through entry points."""

        registered = 0
        for plugin in load_entry_point_plugins(group):
            if isinstance(plugin, type) and issubclass(plugin, MissionControlProvider):
                self.register(plugin)
                registered += 1
            else:
                LOGGER.warning("Ignoring entry point object %r; not a provider class", plugin)
        return registered


REGISTRY = DroneProviderRegistry()
