#!/usr/bin/env python3
# webterm/boot/__init__.py
from __future__ import annotations
"""
Boot sequence package.

Exports:
- boot_sequence: startup pipeline with Linux-style [  OK  ] / [FAILED] lines.
- BootState: Dataclass with config, logger, registry, terminal and failed plugin names.
"""


from .boot import BootState, boot_sequence

__all__ = ["boot_sequence", "BootState"]
