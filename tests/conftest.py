"""Shared test fixtures for the webterm test suite.

Provides a buffer display and small configurable command plugins.
"""

from __future__ import annotations

import logging

import pytest

from webterm.commands import CommandPlugin, CommandRegistry
from webterm.interface import Dispatcher
from webterm.ui import BufferDisplay


class FakePlugin(CommandPlugin):
    """Plugin claiming lines whose first word is `word`; records every call."""

    def __init__(
        self,
        name: str,
        word: str | None = None,
        *,
        output: str | None = None,
        execute_error: Exception | None = None,
        detect_error: Exception | None = None,
        init_error: Exception | None = None,
        help_error: Exception | None = None,
    ) -> None:
        self.name = name
        self.word = word if word is not None else name
        self.output = output
        self.execute_error = execute_error
        self.detect_error = detect_error
        self.init_error = init_error
        self.help_error = help_error
        self.executed: list[str] = []
        self.init_calls = 0
        self.configured_with = None
        self.lifecycle: list[str] = []

    def configure(self, config) -> None:
        self.configured_with = config
        self.lifecycle.append("configure")

    def initialize(self) -> None:
        self.init_calls += 1
        self.lifecycle.append("initialize")
        if self.init_error:
            raise self.init_error

    def detect(self, line: str) -> bool:
        if self.detect_error:
            raise self.detect_error
        return line.lower().split(" ")[0] == self.word

    def execute(self, line, display) -> None:
        self.executed.append(line)
        if self.execute_error:
            raise self.execute_error
        if self.output is not None:
            display.emit_line(self.output)

    def describe_help(self) -> str:
        if self.help_error:
            raise self.help_error
        return f"{self.name} - fake command"


@pytest.fixture
def display() -> BufferDisplay:
    return BufferDisplay()


@pytest.fixture
def make_dispatcher(display):
    """Build a dispatcher over the given plugins and the shared buffer display."""

    def _make(*plugins: CommandPlugin) -> Dispatcher:
        return Dispatcher(CommandRegistry(plugins), display)

    return _make


@pytest.fixture
def fake_plugin() -> type[FakePlugin]:
    return FakePlugin


@pytest.fixture(autouse=True)
def _reset_webterm_logger():
    """init_logger() detaches the 'webterm' logger from root; undo that so caplog sees records."""
    yield
    logger = logging.getLogger("webterm")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.propagate = True
    logger.setLevel(logging.NOTSET)
