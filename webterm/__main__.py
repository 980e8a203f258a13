#!/usr/bin/env python3
# webterm/__main__.py
from __future__ import annotations

import sys

from webterm.boot import boot_sequence
from webterm.interface import HELP_COMMAND, make_cli

BANNER = f"webterm ready. Type '{HELP_COMMAND}' for available commands."


def main() -> int:
    try:
        state = boot_sequence()
    except Exception:
        return 1

    if state.config.show_banner:
        state.terminal.dispatcher.display.emit_line(BANNER)

    with make_cli(state.terminal) as cli:
        cli.run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
