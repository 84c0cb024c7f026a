from __future__ import annotations

import uuid
from typing import Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall
from .model import AttendanceRecord
from .repository import AttendanceRepository

_SELECT = "SELECT id, event_id, member_id, is_present, justification FROM attendance"


def _to_record(r: dict) -> AttendanceRecord:
    return AttendanceRecord(
        id=str(r["id"]),
        event_id=str(r["event_id"]),
        member_id=str(r["member_id"]),
        is_present=bool(r["is_present"]),
        justification=r.get("justification"),
    )


class MySQLAttendanceRepository(AttendanceRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_by_event(self, event_id: str) -> Sequence[AttendanceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"{_SELECT} WHERE event_id=%s", (event_id,))
            return [_to_record(r) for r in fetchall(cur)]

    def list_by_member(self, member_id: str) -> Sequence[AttendanceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"{_SELECT} WHERE member_id=%s", (member_id,))
            return [_to_record(r) for r in fetchall(cur)]

    def list_all(self) -> Sequence[AttendanceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(_SELECT)
            return [_to_record(r) for r in fetchall(cur)]

    def upsert(
        self,
        *,
        event_id: str,
        member_id: str,
        is_present: bool,
        justification: Optional[str] = None,
    ) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO attendance(id, event_id, member_id, is_present, justification)
                VALUES(%s,%s,%s,%s,%s)
                ON DUPLICATE KEY UPDATE is_present=VALUES(is_present), justification=VALUES(justification)
                """,
                (str(uuid.uuid4()), event_id, member_id, int(bool(is_present)), justification),
            )
