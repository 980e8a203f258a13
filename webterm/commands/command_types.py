#!/usr/bin/env python3
# webterm/commands/command_types.py
from __future__ import annotations

"""
Command plugin contract.

This module defines:
- CommandPlugin: the four-capability base class every command implements.
- DispatchOutcome: what the dispatcher did with a submitted line.
- RegistryFrozenError: raised when registering into a frozen registry.
"""

import enum
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:  # pragma: no cover
    from webterm.config import AppConfig
    from webterm.ui.display import Display


class RegistryFrozenError(RuntimeError):
    """Raised when a plugin is registered after the registry was frozen."""


class DispatchOutcome(enum.Enum):
    """Informational result of a single dispatch."""

    EMPTY = "empty"
    HELP = "help"
    HANDLED = "handled"
    FAILED = "failed"
    UNKNOWN = "unknown"


class CommandPlugin(ABC):
    """
    A pluggable terminal command.

    Capabilities:
        configure: receives the loaded AppConfig before initialize (default: no-op).
        initialize: one-time setup before the first dispatch (default: no-op).
        detect: pure predicate deciding whether this plugin claims a trimmed line.
        execute: performs the command, writing output through `display`.
        describe_help: one-line help text (default: a generic fallback).

    Subclasses set `name`; it is shown in help fallbacks and logs.
    """

    name: str = ""

    def configure(self, config: AppConfig) -> None:
        """Take settings from the application config. Called right before initialize()."""

    def initialize(self) -> None:
        """Prepare the plugin. Called once per process, before any dispatch."""

    @abstractmethod
    def detect(self, line: str) -> bool:
        """Return True if this plugin handles `line`. Must not produce output."""

    @abstractmethod
    def execute(self, line: str, display: Display) -> None:
        """Run the command for `line`. Only called after `detect` returned True."""

    def describe_help(self) -> str:
        return f"{self.name or type(self).__name__.lower()} - (No detailed help available)"

    def __repr__(self) -> str:
        return f"<{type(self).__name__} name={self.name!r}>"
