#!/usr/bin/env python3
# webterm/interface/terminal.py
from __future__ import annotations

"""
Terminal facade used by frontends: submit a line, recall history, render the prompt.
"""

from typing import Optional

from webterm.commands import DispatchOutcome
from webterm.interface.handler import Dispatcher
from webterm.interface.history import HistoryNavigator
from webterm.ui import DEFAULT_TIMESTAMP_FORMAT, format_timestamp


class Terminal:
    def __init__(
        self,
        dispatcher: Dispatcher,
        history: HistoryNavigator | None = None,
        *,
        timestamp_format: str = DEFAULT_TIMESTAMP_FORMAT,
    ) -> None:
        self.dispatcher = dispatcher
        self.history = history if history is not None else HistoryNavigator()
        self.timestamp_format = timestamp_format

    def submit(self, line: str) -> DispatchOutcome:
        """Record `line` in history, then dispatch it."""
        self.history.record(line)
        return self.dispatcher.dispatch(line)

    def recall_previous(self) -> Optional[str]:
        return self.history.recall_previous()

    def recall_next(self) -> Optional[str]:
        return self.history.recall_next()

    def prompt(self) -> str:
        return f"{format_timestamp(self.timestamp_format)}:>"
