#!/usr/bin/env python3
# webterm/ui/utils/ansi.py
from __future__ import annotations

import ctypes
import os
import re
import sys
from typing import Optional

# ---- Core SGR maps ----------------------------------------------------------

ANSI = {
    # reset
    "reset": "\x1b[0m",

    # styles
    "bold": "\x1b[1m",
    "dim": "\x1b[2m",
    "underline": "\x1b[4m",

    # fg 8-color
    "red": "\x1b[31m",
    "green": "\x1b[32m",
    "yellow": "\x1b[33m",
    "blue": "\x1b[34m",
    "magenta": "\x1b[35m",
    "cyan": "\x1b[36m",

    # fg bright
    "bright_black": "\x1b[90m",
}

ANSI_REGEX = re.compile(r"\x1b\[[0-9;]*[A-Za-z]")

_vt_enabled_cache: Optional[bool] = None  # cached across calls


# ---- Utilities --------------------------------------------------------------

def strip_ansi(text: str) -> str:
    """Remove ANSI escape sequences from text."""
    return ANSI_REGEX.sub("", text)


def enable_windows_vt() -> bool:
    """
    Enable ANSI (VT) processing on Windows consoles when possible.
    Returns True if ANSI escapes should work on the current process.
    On non-Windows systems, always returns True.
    """
    global _vt_enabled_cache
    if _vt_enabled_cache is not None:
        return _vt_enabled_cache

    if os.name != "nt":
        _vt_enabled_cache = True
        return True

    if (
        os.environ.get("WT_SESSION")                  # Windows Terminal
        or os.environ.get("ANSICON")
        or os.environ.get("TERM", "").startswith(("xterm", "vt100"))
    ):
        _vt_enabled_cache = True
        return True

    try:
        kernel32 = ctypes.windll.kernel32  # type: ignore[attr-defined]
        ENABLE_VIRTUAL_TERMINAL_PROCESSING = 0x0004
        STD_OUTPUT_HANDLE = -11
        handle = kernel32.GetStdHandle(STD_OUTPUT_HANDLE)
        mode = ctypes.c_uint32()
        if not kernel32.GetConsoleMode(handle, ctypes.byref(mode)):
            _vt_enabled_cache = False
            return False
        new_mode = mode.value | ENABLE_VIRTUAL_TERMINAL_PROCESSING
        _vt_enabled_cache = bool(kernel32.SetConsoleMode(handle, new_mode))
    except Exception:
        _vt_enabled_cache = False
    return _vt_enabled_cache


def colorize(text: str, *styles: str) -> str:
    """Wrap `text` in the named ANSI styles (unknown names are ignored)."""
    prefix = "".join(ANSI[s] for s in styles if s in ANSI)
    if not prefix:
        return text
    return f"{prefix}{text}{ANSI['reset']}"


def clear_screen(stream=None) -> None:
    """Clear the visible terminal and move the cursor home."""
    out = stream or sys.stdout
    if os.name == "nt" and not enable_windows_vt():
        os.system("cls")
        return
    out.write("\x1b[2J\x1b[H")
    out.flush()
