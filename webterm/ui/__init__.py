#!/usr/bin/env python3
# webterm/ui/__init__.py
from __future__ import annotations
# Re-export convenient top-level API
from .utils import (
    ANSI,
    strip_ansi,
    enable_windows_vt,
    clear_screen,
    colorize,
    PRINT_MUTEX,
    print_line,
    escape,
    render_markup,
)
from .static import (
    init_logger,
    ColorizingStreamHandler,
    PlainFormatter,
)
from .display import (
    Display,
    BufferDisplay,
    ConsoleDisplay,
    DEFAULT_TIMESTAMP_FORMAT,
    format_timestamp,
)

__all__ = [
    "ANSI",
    "strip_ansi",
    "enable_windows_vt",
    "clear_screen",
    "colorize",
    "PRINT_MUTEX",
    "print_line",
    "escape",
    "render_markup",
    "init_logger",
    "ColorizingStreamHandler",
    "PlainFormatter",
    "Display",
    "BufferDisplay",
    "ConsoleDisplay",
    "DEFAULT_TIMESTAMP_FORMAT",
    "format_timestamp",
]
