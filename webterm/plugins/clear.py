# webterm/plugins/clear.py
from __future__ import annotations

from webterm.commands import CommandPlugin
from webterm.ui import Display


class ClearCommand(CommandPlugin):
    name = "clear"

    def detect(self, line: str) -> bool:
        return line.strip().lower() == "clear"

    def execute(self, line: str, display: Display) -> None:
        display.clear()

    def describe_help(self) -> str:
        return "clear - Clears all text from the terminal display."


COMMAND = ClearCommand
