# webterm/plugins/__init__.py
from __future__ import annotations

"""
Bundled terminal commands:
- clear: wipe the output log
- kv: small key-value store (sqlite-backed)
- echo: print arguments back
"""

# Dispatch priority; plugins not listed follow in module name order
COMMAND_ORDER = ("clear", "kv", "echo")
