#!/usr/bin/env python3
# webterm/interface/__init__.py
from __future__ import annotations

"""
Package for line interpretation and command dispatch.

Provides:
- Quote-aware tokenizer.
- Dispatcher with built-in help and failure isolation.
- History navigator for up/down recall.
- Terminal facade tying dispatch and history together.
- Dynamic plugin loader.
- CLI frontends (prompt_toolkit / plain input).
"""


from .parser import tokenize, first_token
from .history import HistoryNavigator
from .handler import Dispatcher, HELP_COMMAND
from .terminal import Terminal
from .loader import load_plugins, collect_plugins, DEFAULT_PLUGIN_PACKAGE
from .cli import BaseCLI, PlainCLI, PromptToolkitCLI, make_cli

__all__ = [
    # parser
    "tokenize",
    "first_token",
    # history
    "HistoryNavigator",
    # handler
    "Dispatcher",
    "HELP_COMMAND",
    # terminal
    "Terminal",
    # loader
    "load_plugins",
    "collect_plugins",
    "DEFAULT_PLUGIN_PACKAGE",
    # cli
    "BaseCLI",
    "PlainCLI",
    "PromptToolkitCLI",
    "make_cli",
]
