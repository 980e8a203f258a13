#!/usr/bin/env python3
# webterm/interface/handler.py
from __future__ import annotations

"""
Command dispatch and help listing.

Dispatch order for a submitted line:
  1) blank lines are ignored
  2) 'help' (first token, case-insensitive) lists every plugin's help
  3) the first plugin whose detect() claims the line executes it
  4) otherwise an "Unknown command" line is shown

Plugin failures never escape dispatch(); they are logged and reported as a
single escaped error line.
"""

import logging
from typing import TYPE_CHECKING

from webterm.commands import CommandPlugin, CommandRegistry, DispatchOutcome
from webterm.interface.parser import first_token, tokenize
from webterm.ui import Display, escape

if TYPE_CHECKING:  # pragma: no cover
    from webterm.config import AppConfig

logger = logging.getLogger(__name__)

HELP_COMMAND = "help"
HELP_HEADER = "<strong>Available commands:</strong>"
HELP_EMPTY = "No commands registered."
HELP_SELF = "help - Displays this help message."


def _plugin_label(plugin: CommandPlugin) -> str:
    return plugin.name or type(plugin).__name__


class Dispatcher:
    """Routes submitted lines to the registered command plugins."""

    def __init__(self, registry: CommandRegistry, display: Display) -> None:
        self._registry = registry
        self._display = display
        self._initialized = False

    @property
    def registry(self) -> CommandRegistry:
        return self._registry

    @property
    def display(self) -> Display:
        return self._display

    # ---------------- Lifecycle ----------------

    def initialize_plugins(self, config: AppConfig | None = None) -> list[str]:
        """
        Run every plugin's initialize() once and freeze the registry.
        With a `config`, each plugin's configure(config) runs first.

        Returns the names of plugins whose initialization raised. Those plugins
        stay registered; they are simply left uninitialized.
        """
        if self._initialized:
            return []
        failed: list[str] = []
        for plugin in self._registry:
            try:
                if config is not None:
                    plugin.configure(config)
                plugin.initialize()
            except Exception:
                logger.exception("Initialization failed for plugin '%s'", _plugin_label(plugin))
                failed.append(_plugin_label(plugin))
        self._registry.freeze()
        self._initialized = True
        return failed

    # ---------------- Dispatch ----------------

    def dispatch(self, line: str) -> DispatchOutcome:
        """Interpret one raw input line. Never raises."""
        trimmed = line.strip() if isinstance(line, str) else ""
        if not trimmed:
            return DispatchOutcome.EMPTY

        lowered = tokenize(trimmed.lower())
        if lowered and lowered[0] == HELP_COMMAND:
            self._show_help()
            return DispatchOutcome.HELP

        for plugin in self._registry:
            try:
                claimed = plugin.detect(trimmed)
            except Exception:
                logger.exception("detect() raised in plugin '%s'; skipping", _plugin_label(plugin))
                continue
            if not claimed:
                continue
            return self._execute(plugin, trimmed)

        self._emit(
            f"Unknown command: {escape(first_token(trimmed))}. "
            f"Type '{HELP_COMMAND}' for available commands.")
        return DispatchOutcome.UNKNOWN

    def _execute(self, plugin: CommandPlugin, line: str) -> DispatchOutcome:
        logger.debug("Dispatching %r to plugin '%s'", line, _plugin_label(plugin))
        try:
            plugin.execute(line, self._display)
        except Exception:
            logger.exception("Error executing command '%s'", _plugin_label(plugin))
            self._emit(
                f"Error: An error occurred while executing '{escape(first_token(line))}'.")
            return DispatchOutcome.FAILED
        return DispatchOutcome.HANDLED

    def _show_help(self) -> None:
        self._emit(HELP_HEADER)
        if not len(self._registry):
            self._emit(HELP_EMPTY)
        for plugin in self._registry:
            try:
                text = plugin.describe_help()
            except Exception:
                logger.warning("describe_help() raised in plugin '%s'", _plugin_label(plugin))
                text = f"{escape(_plugin_label(plugin).lower())} - (No detailed help available)"
            self._emit(text)
        self._emit(HELP_SELF)

    def _emit(self, content: str) -> None:
        try:
            self._display.emit_line(content)
        except Exception:
            logger.exception("Display failed to render a line")
