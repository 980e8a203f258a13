#!/usr/bin/env python3
# webterm/__init__.py
from __future__ import annotations
"""
webterm: a pseudo-terminal that interprets typed lines as commands and
dispatches them to pluggable command handlers.
"""

__version__ = "0.1.0"

from webterm.commands import CommandPlugin, CommandRegistry, DispatchOutcome  # noqa: E402

__all__ = ["CommandPlugin", "CommandRegistry", "DispatchOutcome", "__version__"]
