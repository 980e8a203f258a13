#!/usr/bin/env python3
# webterm/ui/display.py
from __future__ import annotations

"""
Display sinks for the terminal output log.

A display receives fully formed output fragments (already escaped where they
embed user input) one line at a time, and can be cleared.
"""

import sys
from datetime import datetime
from typing import Callable, Protocol, TextIO, runtime_checkable

from .utils import PRINT_MUTEX, clear_screen, colorize, render_markup

DEFAULT_TIMESTAMP_FORMAT = "%m/%d/%Y %H:%M:%S"


def format_timestamp(fmt: str = DEFAULT_TIMESTAMP_FORMAT, now: datetime | None = None) -> str:
    """Return the current local time rendered with `fmt` (mm/dd/yyyy hh:mm:ss by default)."""
    return (now or datetime.now()).strftime(fmt)


@runtime_checkable
class Display(Protocol):
    """Sink for terminal output lines."""

    def emit_line(self, content: str) -> None:  # pragma: no cover - signature only
        ...

    def clear(self) -> None:  # pragma: no cover - signature only
        ...


class BufferDisplay:
    """In-memory display; keeps emitted fragments as-is."""

    def __init__(self) -> None:
        self.lines: list[str] = []
        self.clear_count = 0

    def emit_line(self, content: str) -> None:
        self.lines.append(content)

    def clear(self) -> None:
        self.lines.clear()
        self.clear_count += 1


class ConsoleDisplay:
    """
    Writes each line as "[<timestamp>]: <text>" to a text stream.

    Markup is rendered for the terminal (bold tags to ANSI, entities decoded).
    """

    def __init__(
        self,
        stream: TextIO | None = None,
        *,
        timestamp_format: str = DEFAULT_TIMESTAMP_FORMAT,
        color: bool = True,
        clock: Callable[[], datetime] = datetime.now,
    ) -> None:
        self._stream = stream
        self._timestamp_format = timestamp_format
        self._color = color
        self._clock = clock

    @property
    def stream(self) -> TextIO:
        return self._stream or sys.stdout

    def emit_line(self, content: str) -> None:
        stamp = f"[{format_timestamp(self._timestamp_format, self._clock())}]:"
        if self._color:
            stamp = colorize(stamp, "bright_black")
        text = render_markup(content, color=self._color)
        with PRINT_MUTEX:
            self.stream.write(f"{stamp} {text}\n")
            self.stream.flush()

    def clear(self) -> None:
        with PRINT_MUTEX:
            clear_screen(self.stream)
