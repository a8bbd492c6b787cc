"""Plugin discovery, loading, and hook dispatch.

Plugins come from two places: distributions advertising the
``symtax.plugins`` entry point group, and single ``*.py`` files dropped
into the project's local plugin directory (``.symtax/plugins/``).
"""

from __future__ import annotations

import importlib.util
import inspect
import logging
import sys
from collections.abc import Iterator
from pathlib import Path
from types import ModuleType
from typing import TYPE_CHECKING

import pluggy

from symtax.plugins.hookspecs import PROJECT_NAME, SymtaxHookSpec

if TYPE_CHECKING:
    from symtax.domain.taxonomy import Taxonomy

ENTRY_POINT_GROUP = "symtax.plugins"
LOCAL_MODULE_PREFIX = "symtax_local_plugin_"

_IMPL_MARKER = f"{PROJECT_NAME}_impl"

logger = logging.getLogger(__name__)


def _carries_hookimpls(cls: type) -> bool:
    return any(
        callable(member) and getattr(member, _IMPL_MARKER, None)
        for name, member in inspect.getmembers(cls)
        if not name.startswith("_")
    )


def _import_file(path: Path) -> ModuleType | None:
    """Execute *path* as a fresh module, or return None if it fails."""
    module_name = LOCAL_MODULE_PREFIX + path.stem
    spec = importlib.util.spec_from_file_location(module_name, path)
    if spec is None or spec.loader is None:
        logger.warning("No module spec for local plugin %s", path)
        return None
    module = importlib.util.module_from_spec(spec)
    sys.modules[module_name] = module
    try:
        spec.loader.exec_module(module)
    except Exception:
        del sys.modules[module_name]
        logger.warning("Failed to load local plugin %s", path, exc_info=True)
        return None
    return module


def _plugin_classes(module: ModuleType) -> Iterator[type]:
    """Classes defined in *module* itself that implement at least one hook."""
    for _, cls in inspect.getmembers(module, inspect.isclass):
        if cls.__module__ == module.__name__ and _carries_hookimpls(cls):
            yield cls


class PluginManager:
    """Thin wrapper around :class:`pluggy.PluginManager` for symtax hooks."""

    def __init__(self) -> None:
        self._pm = pluggy.PluginManager(PROJECT_NAME)
        self._pm.add_hookspecs(SymtaxHookSpec)
        self._loaded = False

    @property
    def hook(self) -> pluggy.HookRelay:
        return self._pm.hook

    @property
    def is_loaded(self) -> bool:
        return self._loaded

    def discover_and_load(self, *, local_dir: Path | None = None) -> list[str]:
        """Register entry-point plugins, then local ones; return all plugin names."""
        self._pm.load_setuptools_entrypoints(ENTRY_POINT_GROUP)
        self._instantiate_class_plugins()
        if local_dir is not None and local_dir.is_dir():
            for path in sorted(local_dir.glob("*.py")):
                if not path.name.startswith("_"):
                    self._load_local_file(path)
        self._loaded = True
        return self.list_plugin_names()

    def register_plugin(self, plugin: object, name: str | None = None) -> None:
        name = name or type(plugin).__name__
        self._pm.register(plugin, name=name)
        logger.debug("Registered plugin: %s", name)

    def unregister(self, plugin: object) -> None:
        self._pm.unregister(plugin)

    def list_plugin_names(self) -> list[str]:
        return [self._name_of(plugin) for plugin in self._pm.get_plugins()]

    def collect_taxonomies(self, warnings: list[str]) -> list[tuple[str, Taxonomy]]:
        """Call each ``register_taxonomies`` implementation in isolation.

        A failing or malformed implementation is skipped and reported in
        *warnings*; the others still contribute.
        """
        from symtax.domain.taxonomy import Taxonomy

        collected: list[tuple[str, Taxonomy]] = []
        for impl in self._pm.hook.register_taxonomies.get_hookimpls():
            name = impl.plugin_name
            try:
                provided = impl.function()
            except Exception:
                logger.warning("Plugin %s failed to register taxonomies", name, exc_info=True)
                warnings.append(f"Plugin {name} failed to register taxonomies")
                continue
            if provided is None:
                continue
            if not isinstance(provided, (list, tuple)):
                warnings.append(f"Plugin {name} returned a non-list from register_taxonomies")
                continue
            for item in provided:
                if not isinstance(item, Taxonomy):
                    warnings.append(f"Plugin {name} returned a non-Taxonomy value: {item!r}")
                    continue
                collected.append((name, item))
        return collected

    def notify_validated(
        self,
        warnings: list[str],
        *,
        taxonomy: str,
        contract: str | None,
        outcome: str,
        valid: bool,
    ) -> None:
        """Fire ``post_validate``; a raising plugin becomes a warning."""
        try:
            self._pm.hook.post_validate(taxonomy=taxonomy, contract=contract, outcome=outcome, valid=valid)
        except Exception:
            logger.debug("post_validate dispatch failed", exc_info=True)
            warnings.append("Event dispatch failed for post_validate")

    def _name_of(self, plugin: object) -> str:
        return self._pm.get_name(plugin) or type(plugin).__name__

    def _load_local_file(self, path: Path) -> None:
        module = _import_file(path)
        if module is None:
            return
        for cls in _plugin_classes(module):
            try:
                instance = cls()
            except Exception:
                logger.warning("Failed to instantiate plugin class %s from %s", cls.__name__, path, exc_info=True)
                continue
            self.register_plugin(instance, name=f"{module.__name__}.{cls.__name__}")

    def _instantiate_class_plugins(self) -> None:
        # Entry points may name a class; hooks need a bound instance.
        for plugin in list(self._pm.get_plugins()):
            if not (inspect.isclass(plugin) and _carries_hookimpls(plugin)):
                continue
            name = self._name_of(plugin)
            self._pm.unregister(plugin)
            try:
                self._pm.register(plugin(), name=name)
            except Exception:
                logger.warning("Failed to instantiate entry-point plugin %s", name, exc_info=True)
