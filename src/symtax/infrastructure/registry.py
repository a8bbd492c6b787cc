"""Taxonomy registry — the named taxonomies a project can validate against.

Taxonomies come from the ``[[taxonomies]]`` tables of ``symtax.toml``
and from plugins. Configured taxonomies are registered first; on a name
clash the first registration wins and the clash is reported as a warning.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from symtax.config.settings import SymtaxSettings
    from symtax.domain.taxonomy import Taxonomy
    from symtax.plugins.manager import PluginManager

logger = logging.getLogger(__name__)


class TaxonomyRegistry:
    """Name-indexed collection of :class:`Taxonomy` objects.

    Attributes:
        warnings: Non-fatal issues met while populating the registry.
    """

    def __init__(self, plugin_manager: PluginManager | None = None) -> None:
        self._taxonomies: dict[str, Taxonomy] = {}
        self._sources: dict[str, str] = {}
        self.plugin_manager = plugin_manager
        self.warnings: list[str] = []

    @classmethod
    def from_settings(cls, settings: SymtaxSettings) -> TaxonomyRegistry:
        """Build a registry from configuration and, if enabled, plugins.

        Raises:
            TaxonomyConfigError: If a configured taxonomy is inconsistent.
        """
        plugin_manager: PluginManager | None = None
        if settings.plugins.enabled:
            from symtax.plugins.manager import PluginManager

            plugin_manager = PluginManager()
            plugin_manager.discover_and_load(local_dir=settings.plugin_dir)

        registry = cls(plugin_manager)
        source = str(settings.config_path) if settings.config_path else "config"
        for definition in settings.taxonomies:
            registry.register(definition.to_taxonomy(), source=source)

        if plugin_manager is not None:
            for plugin_name, taxonomy in plugin_manager.collect_taxonomies(registry.warnings):
                registry.register(taxonomy, source=f"plugin:{plugin_name}")
        return registry

    def register(self, taxonomy: Taxonomy, *, source: str = "code") -> bool:
        """Add *taxonomy*; returns False if the name was already taken."""
        if taxonomy.name in self._taxonomies:
            msg = (
                f"Taxonomy {taxonomy.name!r} from {source} ignored: "
                f"already registered from {self._sources[taxonomy.name]}"
            )
            logger.warning(msg)
            self.warnings.append(msg)
            return False
        self._taxonomies[taxonomy.name] = taxonomy
        self._sources[taxonomy.name] = source
        logger.debug("Registered taxonomy %s from %s", taxonomy.name, source)
        return True

    def get(self, name: str) -> Taxonomy | None:
        return self._taxonomies.get(name)

    def source_of(self, name: str) -> str | None:
        return self._sources.get(name)

    def names(self) -> list[str]:
        return sorted(self._taxonomies)

    def __contains__(self, name: object) -> bool:
        return name in self._taxonomies

    def __len__(self) -> int:
        return len(self._taxonomies)

    def __iter__(self) -> Iterator[Taxonomy]:
        return (self._taxonomies[n] for n in self.names())
