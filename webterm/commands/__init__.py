#!/usr/bin/env python3
# webterm/commands/__init__.py
from __future__ import annotations

"""
Package for the command plugin contract and registry.

Provides:
- The plugin base class and dispatch outcome (`CommandPlugin`, `DispatchOutcome`).
- The ordered, freezable registry (`CommandRegistry`, `RegistryFrozenError`).

This package re-exports public APIs from:
- command_types.py
- commands.py
"""


from .command_types import CommandPlugin, DispatchOutcome, RegistryFrozenError
from .commands import CommandRegistry, RESERVED_NAMES

__all__ = [
    "CommandPlugin",
    "DispatchOutcome",
    "RegistryFrozenError",
    "CommandRegistry",
    "RESERVED_NAMES",
]
