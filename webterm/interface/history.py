#!/usr/bin/env python3
# webterm/interface/history.py
from __future__ import annotations

"""
Input history with bounded up/down recall.

The cursor ranges over [0, len(entries)]; len(entries) means "composing a new
line". Recording resets the cursor there.
"""

from typing import Optional


class HistoryNavigator:
    """Append-only buffer of submitted lines plus a recall cursor."""

    def __init__(self) -> None:
        self._entries: list[str] = []
        self._cursor = 0

    @property
    def entries(self) -> tuple[str, ...]:
        return tuple(self._entries)

    @property
    def cursor(self) -> int:
        return self._cursor

    def __len__(self) -> int:
        return len(self._entries)

    def record(self, line: str) -> None:
        """Remember a submitted line unless blank or a repeat of the last one."""
        if line.strip() and (not self._entries or self._entries[-1] != line):
            self._entries.append(line)
        self._cursor = len(self._entries)

    def recall_previous(self) -> Optional[str]:
        """Step back one entry, stopping at the oldest."""
        if not self._entries:
            return None
        self._cursor = max(self._cursor - 1, 0)
        return self._entries[self._cursor]

    def recall_next(self) -> Optional[str]:
        """Step forward one entry; past the newest returns "" once, then None."""
        last = len(self._entries) - 1
        if self._cursor < last:
            self._cursor += 1
            return self._entries[self._cursor]
        if self._cursor == last:
            self._cursor = len(self._entries)
            return ""
        return None
