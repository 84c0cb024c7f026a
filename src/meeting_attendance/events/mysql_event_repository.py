from __future__ import annotations

import uuid
from datetime import date
from typing import Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import Event
from .repository import EventRepository

_COLUMNS = "id, title, date, description, created_at"


def _to_event(r: dict) -> Event:
    return Event(
        id=str(r["id"]),
        title=r["title"],
        date=r["date"],
        description=r.get("description"),
        created_at=r.get("created_at"),
    )


class MySQLEventRepository(EventRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list(self) -> Sequence[Event]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM events ORDER BY date ASC, created_at ASC")
            return [_to_event(r) for r in fetchall(cur)]

    def get(self, event_id: str) -> Optional[Event]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM events WHERE id=%s", (event_id,))
            r = fetchone(cur)
            return _to_event(r) if r else None

    def create(self, *, title: str, date: date, description: Optional[str] = None) -> Event:
        event_id = str(uuid.uuid4())
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO events(id, title, date, description)
                VALUES(%s,%s,%s,%s)
                """,
                (event_id, title, date, description),
            )
            cur.execute(f"SELECT {_COLUMNS} FROM events WHERE id=%s", (event_id,))
            return _to_event(fetchone(cur))

    def update(self, event_id: str, *, title: str, date: date, description: Optional[str]) -> Optional[Event]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                UPDATE events
                SET title=%s, date=%s, description=%s
                WHERE id=%s
                """,
                (title, date, description, event_id),
            )
            # rowcount is 0 for a no-op update too; re-read to tell missing from unchanged.
            cur.execute(f"SELECT {_COLUMNS} FROM events WHERE id=%s", (event_id,))
            r = fetchone(cur)
            return _to_event(r) if r else None

    def delete(self, event_id: str) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM events WHERE id=%s", (event_id,))
            return cur.rowcount > 0
