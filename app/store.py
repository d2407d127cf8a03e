from __future__ import annotations

import sqlite3
import time
from contextlib import closing
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Dict, List


class TicketStoreError(Exception):
    pass


@dataclass
class Ticket:
    id: int
    name: str
    message: str
    created_at: float

    def as_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "message": self.message,
            "createdAt": datetime.fromtimestamp(self.created_at, tz=timezone.utc).isoformat(),
        }


class TicketStore:
    """SQLite-backed ticket table.

    Every call opens its own connection, so the store can be shared between
    request threads.
    """

    def __init__(self, path: str):
        self.path = path
        self._ready = False

    def _connect(self) -> sqlite3.Connection:
        if not self._ready:
            self.init_schema()
        return sqlite3.connect(self.path)

    def init_schema(self) -> None:
        try:
            with closing(sqlite3.connect(self.path)) as conn, conn:
                conn.execute("""
                CREATE TABLE IF NOT EXISTS tickets (
                  id INTEGER PRIMARY KEY AUTOINCREMENT,
                  ts REAL NOT NULL,
                  name TEXT NOT NULL,
                  message TEXT NOT NULL
                )
                """)
        except sqlite3.Error as e:
            raise TicketStoreError(f"schema setup failed: {e}") from e
        self._ready = True

    def create(self, name: str, message: str) -> Ticket:
        ts = time.time()
        try:
            with closing(self._connect()) as conn, conn:
                cur = conn.execute(
                    "INSERT INTO tickets (ts, name, message) VALUES (?,?,?)",
                    (ts, name, message),
                )
                ticket_id = cur.lastrowid
        except sqlite3.Error as e:
            raise TicketStoreError(f"insert failed: {e}") from e
        return Ticket(id=ticket_id, name=name, message=message, created_at=ts)

    def list_recent(self) -> List[Ticket]:
        try:
            with closing(self._connect()) as conn:
                rows = conn.execute("""
                    SELECT id, name, message, ts
                    FROM tickets ORDER BY ts DESC, id DESC
                """).fetchall()
        except sqlite3.Error as e:
            raise TicketStoreError(f"query failed: {e}") from e
        return [Ticket(id=r[0], name=r[1], message=r[2], created_at=r[3]) for r in rows]
