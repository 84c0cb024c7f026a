from __future__ import annotations

import uuid
from typing import Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import Member
from .repository import MemberRepository


def _to_member(r: dict) -> Member:
    return Member(id=str(r["id"]), name=r["name"], created_at=r.get("created_at"))


class MySQLMemberRepository(MemberRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list(self) -> Sequence[Member]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT id, name, created_at FROM members ORDER BY name ASC")
            return [_to_member(r) for r in fetchall(cur)]

    def get(self, member_id: str) -> Optional[Member]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT id, name, created_at FROM members WHERE id=%s", (member_id,))
            r = fetchone(cur)
            return _to_member(r) if r else None

    def create(self, *, name: str) -> Member:
        member_id = str(uuid.uuid4())
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("INSERT INTO members(id, name) VALUES(%s,%s)", (member_id, name))
            cur.execute("SELECT id, name, created_at FROM members WHERE id=%s", (member_id,))
            return _to_member(fetchone(cur))

    def delete(self, member_id: str) -> bool:
        # attendance rows are removed by ON DELETE CASCADE
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM members WHERE id=%s", (member_id,))
            return cur.rowcount > 0
