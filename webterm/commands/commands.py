#!/usr/bin/env python3
# webterm/commands/commands.py
from __future__ import annotations

"""
Ordered command registry.

Registration order is dispatch priority: the first plugin whose `detect`
claims a line handles it. The registry is built once at startup and frozen
before the first dispatch.
"""

from typing import Iterable, Iterator, Optional

from webterm.commands.command_types import CommandPlugin, RegistryFrozenError

# Intercepted by the dispatcher before any plugin is consulted
RESERVED_NAMES: frozenset[str] = frozenset({"help"})


class CommandRegistry:
    """Holds command plugins in priority order."""

    def __init__(self, plugins: Iterable[CommandPlugin] = ()) -> None:
        self._plugins: list[CommandPlugin] = []
        self._names: set[str] = set()
        self._frozen = False
        for plugin in plugins:
            self.register(plugin)

    # ---------------- Registration ----------------

    def register(self, plugin: CommandPlugin) -> None:
        """Append a plugin, ensuring no name collisions."""
        if self._frozen:
            raise RegistryFrozenError(
                f"Cannot register '{getattr(plugin, 'name', plugin)}': registry is frozen.")
        if not isinstance(plugin, CommandPlugin):
            raise TypeError(
                f"Expected a CommandPlugin instance, got {type(plugin).__name__}.")

        key = (plugin.name or type(plugin).__name__).lower()
        if key in RESERVED_NAMES:
            raise ValueError(f"Command name '{key}' is reserved.")
        if key in self._names:
            raise ValueError(f"Command '{key}' already registered.")

        self._names.add(key)
        self._plugins.append(plugin)

    def freeze(self) -> None:
        """Make the registry read-only."""
        self._frozen = True

    @property
    def frozen(self) -> bool:
        return self._frozen

    # ---------------- Lookup ----------------

    def get(self, name: str) -> Optional[CommandPlugin]:
        """Return the plugin registered under `name`, or None."""
        key = name.lower()
        for plugin in self._plugins:
            if (plugin.name or type(plugin).__name__).lower() == key:
                return plugin
        return None

    def all(self) -> list[CommandPlugin]:
        """Return plugins in priority order."""
        return list(self._plugins)

    def names(self) -> list[str]:
        return [p.name for p in self._plugins]

    def __iter__(self) -> Iterator[CommandPlugin]:
        return iter(tuple(self._plugins))

    def __len__(self) -> int:
        return len(self._plugins)
