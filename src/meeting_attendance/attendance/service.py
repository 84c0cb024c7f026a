from __future__ import annotations

import logging
from typing import Optional, Sequence

from ..common.query_cache import QueryCache
from ..common.validators import validate_justification
from ..core.enums import AttendanceState
from ..core.exceptions import NotFoundError
from ..events.repository import EventRepository
from ..members.model import Member
from ..members.repository import MemberRepository
from .drafts import JustificationDrafts
from .model import AttendanceRecord, state_of
from .repository import AttendanceRepository

logger = logging.getLogger(__name__)


class AttendanceService:
    def __init__(
        self,
        attendance: AttendanceRepository,
        members: MemberRepository,
        events: EventRepository,
        *,
        cache: QueryCache | None = None,
    ):
        self._attendance = attendance
        self._members = members
        self._events = events
        self._cache = cache or QueryCache(enabled=False)

    def for_event(self, event_id: str) -> Sequence[AttendanceRecord]:
        return self._cache.get_or_load(
            ("attendance", "event", event_id), lambda: list(self._attendance.list_by_event(event_id))
        )

    def for_member(self, member_id: str) -> Sequence[AttendanceRecord]:
        return self._cache.get_or_load(
            ("attendance", "member", member_id), lambda: list(self._attendance.list_by_member(member_id))
        )

    def all_records(self) -> Sequence[AttendanceRecord]:
        return self._cache.get_or_load(("attendance", "all"), lambda: list(self._attendance.list_all()))

    def _require_pair(self, event_id: str, member_id: str) -> None:
        if not self._events.get(event_id):
            raise NotFoundError("Evento não encontrado")
        if not self._members.get(member_id):
            raise NotFoundError("Membro não encontrado")

    def mark(
        self,
        event_id: str,
        member_id: str,
        *,
        is_present: bool,
        justification: Optional[str] = None,
    ) -> AttendanceState:
        """Upsert one (event, member) record.

        A present member never keeps a justification.
        """

        justification = None if is_present else validate_justification(justification)
        self._require_pair(event_id, member_id)

        self._attendance.upsert(
            event_id=event_id,
            member_id=member_id,
            is_present=bool(is_present),
            justification=justification,
        )
        self._cache.invalidate("attendance")
        logger.info(
            "attendance marked event=%s member=%s present=%s justified=%s",
            event_id,
            member_id,
            bool(is_present),
            justification is not None,
        )

        if is_present:
            return AttendanceState.PRESENT
        return AttendanceState.ABSENT_JUSTIFIED if justification else AttendanceState.ABSENT_UNJUSTIFIED

    def toggle(self, event_id: str, member_id: str, *, drafts: Optional[JustificationDrafts] = None) -> AttendanceState:
        """Flip presence; a member with no record becomes present."""

        current = self._find(event_id, member_id)
        will_be_present = not (current.is_present if current else False)

        state = self.mark(event_id, member_id, is_present=will_be_present)
        if will_be_present and drafts is not None:
            drafts.clear(member_id)
        return state

    def justify(self, event_id: str, member_id: str, text: Optional[str]) -> AttendanceState:
        return self.mark(event_id, member_id, is_present=False, justification=text)

    def sheet(self, event_id: str, members: Sequence[Member]) -> list[dict]:
        """One row per roster member for the given event."""

        by_member = {r.member_id: r for r in self.for_event(event_id)}
        return [self._to_row(m, by_member.get(m.id)) for m in members]

    def _find(self, event_id: str, member_id: str) -> Optional[AttendanceRecord]:
        for r in self.for_event(event_id):
            if r.member_id == member_id:
                return r
        return None

    def _to_row(self, member: Member, record: Optional[AttendanceRecord]) -> dict:
        state = state_of(record)
        return {
            "member_id": member.id,
            "name": member.name,
            "state": state.value,
            "is_present": state == AttendanceState.PRESENT,
            "marked": record is not None,
            "justification": record.justification if state == AttendanceState.ABSENT_JUSTIFIED else None,
        }
