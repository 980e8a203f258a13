# webterm/plugins/echo.py
from __future__ import annotations

from webterm.commands import CommandPlugin
from webterm.interface.parser import tokenize
from webterm.ui import Display, escape


class EchoCommand(CommandPlugin):
    name = "echo"

    def detect(self, line: str) -> bool:
        tokens = tokenize(line.strip().lower())
        return bool(tokens) and tokens[0] == "echo"

    def execute(self, line: str, display: Display) -> None:
        args = tokenize(line.strip())[1:]
        display.emit_line(escape(" ".join(args)))

    def describe_help(self) -> str:
        return 'echo &lt;text...&gt; - Prints its arguments; use "double quotes" to keep spaces.'


COMMAND = EchoCommand
