#!/usr/bin/env python3
# webterm/interface/loader.py
from __future__ import annotations

"""
Dynamic plugin loader.

Features:
- Imports all modules under a given package (default: 'webterm.plugins').
- Supports 'entrypoint.py' inside a subpackage.
- Collects COMMAND (one plugin) / COMMANDS (iterable of plugins) exports;
  a plugin class is instantiated fresh on every load.
- Orders plugins by the package's COMMAND_ORDER, then by discovery order.
"""

import importlib
import logging
import pkgutil
from pathlib import Path
from types import ModuleType
from typing import Iterable

from webterm.commands import CommandPlugin, CommandRegistry

logger = logging.getLogger(__name__)

DEFAULT_PLUGIN_PACKAGE = "webterm.plugins"


def _plugins_from_module(module: ModuleType) -> list[CommandPlugin]:
    """
    Return COMMAND/COMMANDS exported by a module, if present.

    Plugin classes are instantiated here, so each load gets its own
    instances; exported instances are used as-is.
    """
    exported: list[object] = []
    if hasattr(module, "COMMAND"):
        exported.append(getattr(module, "COMMAND"))
    if hasattr(module, "COMMANDS"):
        objs = getattr(module, "COMMANDS")
        if isinstance(objs, Iterable) and not isinstance(objs, (str, bytes)):
            exported.extend(objs)

    plugins: list[CommandPlugin] = []
    for obj in exported:
        if isinstance(obj, type) and issubclass(obj, CommandPlugin):
            try:
                obj = obj()
            except Exception:
                logger.exception("Failed to instantiate plugin %s in %s",
                                 obj.__name__, module.__name__)
                continue
        if isinstance(obj, CommandPlugin):
            plugins.append(obj)
        else:
            logger.warning("Ignoring non-plugin export %r in %s", obj, module.__name__)
    return plugins


def _iter_plugin_modules(package_name: str) -> list[str]:
    """
    List importable module names under the package.

    Supported layouts:
      1) Plain modules: plugins/foo.py -> plugins.foo
      2) Packages with an entrypoint: plugins/bar/entrypoint.py -> plugins.bar.entrypoint
      3) Packages without one: plugins/baz/__init__.py -> plugins.baz
    """
    package = importlib.import_module(package_name)
    package_paths = [str(p) for p in getattr(package, "__path__", [])]
    if not package_paths:
        raise RuntimeError(
            f"'{package_name}' must be a package (folder) with modules.")

    module_names: list[str] = []
    for base_path in package_paths:
        for modinfo in sorted(pkgutil.iter_modules([base_path]), key=lambda m: m.name):
            if modinfo.name.startswith("_"):
                continue
            if modinfo.ispkg and (Path(base_path) / modinfo.name / "entrypoint.py").exists():
                module_names.append(f"{package_name}.{modinfo.name}.entrypoint")
            else:
                module_names.append(f"{package_name}.{modinfo.name}")
    return module_names


def _apply_order(plugins: list[CommandPlugin], order: Iterable[str]) -> list[CommandPlugin]:
    by_name = {p.name.lower(): p for p in plugins}
    ordered: list[CommandPlugin] = []
    for name in order:
        plugin = by_name.get(str(name).lower())
        if plugin is None:
            logger.warning("COMMAND_ORDER names unknown plugin '%s'", name)
            continue
        if plugin not in ordered:
            ordered.append(plugin)
    ordered.extend(p for p in plugins if p not in ordered)
    return ordered


def collect_plugins(package_name: str = DEFAULT_PLUGIN_PACKAGE) -> list[CommandPlugin]:
    """Import the plugin package and return its plugins in priority order."""
    discovered: list[CommandPlugin] = []
    for module_name in _iter_plugin_modules(package_name):
        try:
            module = importlib.import_module(module_name)
        except Exception:
            logger.exception("Failed to import plugin module '%s'", module_name)
            continue
        discovered.extend(_plugins_from_module(module))

    package = importlib.import_module(package_name)
    order = getattr(package, "COMMAND_ORDER", None) or ()
    return _apply_order(discovered, order)


def load_plugins(package_name: str = DEFAULT_PLUGIN_PACKAGE) -> CommandRegistry:
    """
    Build a registry from every plugin found under `package_name`.

    Plugins that cannot be registered (reserved or duplicate names) are
    skipped with a warning.
    """
    registry = CommandRegistry()
    for plugin in collect_plugins(package_name):
        try:
            registry.register(plugin)
        except ValueError as exc:
            logger.warning("Skipping plugin %r: %s", plugin, exc)
    logger.debug("Loaded %d plugin(s) from '%s'", len(registry), package_name)
    return registry
