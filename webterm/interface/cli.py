#!/usr/bin/env python3
# webterm/interface/cli.py
from __future__ import annotations

"""
Interactive input frontends.

Selection order:
    1) prompt_toolkit (Up/Down recall through the terminal's history navigator)
    2) plain input (last resort, no recall)
"""

from typing import Any

from webterm.interface.terminal import Terminal


class BaseCLI:
    """
    Base interface for CLI frontends.

    Subclasses implement get_line(); setup()/teardown() are optional hooks.
    This base also provides context manager support to guarantee teardown.
    """

    def __init__(self, terminal: Terminal) -> None:
        self.terminal = terminal

    def setup(self) -> None:
        ...

    def get_line(self) -> str:
        raise NotImplementedError

    def teardown(self) -> None:
        ...

    def run(self) -> None:
        """Read and submit lines until EOF or Ctrl-C."""
        while True:
            try:
                line = self.get_line()
            except (EOFError, KeyboardInterrupt):
                break
            self.terminal.submit(line)

    # Context manager helpers
    def __enter__(self) -> "BaseCLI":
        self.setup()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.teardown()


class PlainCLI(BaseCLI):
    """stdin reader without line editing."""

    def get_line(self) -> str:
        return input(f"{self.terminal.prompt()} ")


def _apply_recall(buffer: Any, text: str | None) -> None:
    """Replace the buffer text with a recalled line, cursor at the end."""
    if text is None:
        return
    buffer.text = text
    buffer.cursor_position = len(text)


class PromptToolkitCLI(BaseCLI):
    """Line editor whose Up/Down keys walk the terminal's history navigator."""

    def __init__(self, terminal: Terminal) -> None:
        super().__init__(terminal)
        from prompt_toolkit import PromptSession
        from prompt_toolkit.key_binding import KeyBindings

        kb = KeyBindings()

        @kb.add("up")
        def _(event):
            _apply_recall(event.app.current_buffer, self.terminal.recall_previous())

        @kb.add("down")
        def _(event):
            _apply_recall(event.app.current_buffer, self.terminal.recall_next())

        self._key_bindings = kb
        self._session = PromptSession(key_bindings=kb)

    def get_line(self) -> str:
        return self._session.prompt(lambda: f"{self.terminal.prompt()} ")


def make_cli(terminal: Terminal) -> BaseCLI:
    """
    Factory to select the best available CLI frontend at runtime.
    """
    try:
        return PromptToolkitCLI(terminal)
    except Exception:
        # No prompt_toolkit or no usable console
        return PlainCLI(terminal)
