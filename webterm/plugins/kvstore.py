# webterm/plugins/kvstore.py
from __future__ import annotations

"""
Key-value store command backed by SQLite.

    kv set <key> <value...>   store a value (remaining tokens joined by spaces)
    kv get <key>              show a value
    kv del <key>              remove a key
    kv list                   show all keys and values

The database file comes from KV_DATABASE_PATH (handed over through configure());
without it the store lives in memory for the lifetime of the plugin.
"""

import logging
import sqlite3
from pathlib import Path
from typing import Optional

from webterm.commands import CommandPlugin
from webterm.config import AppConfig
from webterm.interface.parser import tokenize
from webterm.ui import Display, escape

logger = logging.getLogger(__name__)

MEMORY_DATABASE = ":memory:"
USAGE = "Usage: kv set &lt;key&gt; &lt;value&gt; | kv get &lt;key&gt; | kv del &lt;key&gt; | kv list"


class KvStoreCommand(CommandPlugin):
    name = "kv"

    def __init__(self, db_path: str | Path | None = None) -> None:
        self._db_path = db_path
        self._conn: Optional[sqlite3.Connection] = None

    # ---------- lifecycle ----------

    def configure(self, config: AppConfig) -> None:
        # An explicit constructor path wins over KV_DATABASE_PATH
        if self._db_path is None and config.kv_database_path is not None:
            self._db_path = config.kv_database_path

    def initialize(self) -> None:
        if self._conn is not None:
            return
        path = MEMORY_DATABASE if self._db_path is None else str(self._db_path)
        if path != MEMORY_DATABASE:
            Path(path).parent.mkdir(parents=True, exist_ok=True)
        conn = sqlite3.connect(path)
        conn.execute(
            """
            CREATE TABLE IF NOT EXISTS kv (
                key TEXT PRIMARY KEY,
                value TEXT NOT NULL
            )
            """
        )
        conn.commit()
        self._conn = conn
        logger.debug("kv store opened at %s", path)

    def close(self) -> None:
        if self._conn is not None:
            self._conn.close()
            self._conn = None

    # ---------- storage ----------

    def _connection(self) -> sqlite3.Connection:
        if self._conn is None:
            raise RuntimeError("kv store is not initialized")
        return self._conn

    def set(self, key: str, value: str) -> None:
        with self._connection() as conn:
            conn.execute(
                "INSERT INTO kv(key, value) VALUES(?, ?) "
                "ON CONFLICT(key) DO UPDATE SET value=excluded.value",
                (key, value),
            )

    def get(self, key: str) -> Optional[str]:
        row = self._connection().execute(
            "SELECT value FROM kv WHERE key=?", (key,)).fetchone()
        return None if row is None else row[0]

    def delete(self, key: str) -> bool:
        with self._connection() as conn:
            cur = conn.execute("DELETE FROM kv WHERE key=?", (key,))
        return cur.rowcount > 0

    def items(self) -> list[tuple[str, str]]:
        return [(k, v) for k, v in self._connection().execute(
            "SELECT key, value FROM kv ORDER BY key")]

    # ---------- command ----------

    def detect(self, line: str) -> bool:
        tokens = tokenize(line.strip().lower())
        return bool(tokens) and tokens[0] == "kv"

    def execute(self, line: str, display: Display) -> None:
        args = tokenize(line.strip())[1:]
        action = args[0].lower() if args else ""

        if action == "set" and len(args) >= 3:
            key, value = args[1], " ".join(args[2:])
            self.set(key, value)
            display.emit_line(f"kv: {escape(key)} = {escape(value)}")
        elif action == "get" and len(args) == 2:
            value = self.get(args[1])
            if value is None:
                display.emit_line(f"kv: no such key: {escape(args[1])}")
            else:
                display.emit_line(escape(value))
        elif action == "del" and len(args) == 2:
            if self.delete(args[1]):
                display.emit_line(f"kv: deleted {escape(args[1])}")
            else:
                display.emit_line(f"kv: no such key: {escape(args[1])}")
        elif action == "list" and len(args) == 1:
            rows = self.items()
            if not rows:
                display.emit_line("kv: store is empty")
            for key, value in rows:
                display.emit_line(f"{escape(key)} = {escape(value)}")
        else:
            display.emit_line(USAGE)

    def describe_help(self) -> str:
        return ("kv set &lt;key&gt; &lt;value&gt; | get &lt;key&gt; | del &lt;key&gt; | list"
                " - Stores and retrieves values by key.")


COMMAND = KvStoreCommand
