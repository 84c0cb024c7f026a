from __future__ import annotations

from datetime import date
from typing import Mapping, Optional

from ..attendance.service import AttendanceService
from ..events.service import EventService
from ..members.service import MemberService
from .aggregator import AbsenceStatus, event_statistics, member_stats_across_events, with_draft_justifications
from .rules.base import AbsenceRule
from .rules.unmarked_absent_rule import UnmarkedAsAbsentRule


class StatsService:
    """Read-side use cases: feeds current store snapshots to the aggregator."""

    def __init__(
        self,
        members: MemberService,
        events: EventService,
        attendance: AttendanceService,
        *,
        rule: Optional[AbsenceRule] = None,
    ):
        self._members = members
        self._events = events
        self._attendance = attendance
        self._rule = rule or UnmarkedAsAbsentRule()

    def absence_status(self, member_id: str) -> AbsenceStatus:
        self._members.get_member(member_id)
        total_events = len(self._events.list_events())
        return self._rule.status(member_id, self._attendance.for_member(member_id), total_events=total_events)

    def event_stats(self, event_id: str) -> dict:
        event = self._events.get_event(event_id)
        stats = event_statistics(event, self._members.list_members(), self._attendance.for_event(event_id))
        return stats.to_dict()

    def absences_with_drafts(self, event_id: str, drafts: Mapping[str, str]) -> dict[str, AbsenceStatus]:
        """Per-member absence status while ``event_id`` is being edited.

        Unsaved justifications typed for that event already exempt the
        member's absence there.
        """

        self._events.get_event(event_id)
        total_events = len(self._events.list_events())
        records = with_draft_justifications(self._attendance.all_records(), event_id, drafts)
        return {
            m.id: self._rule.status(m.id, records, total_events=total_events)
            for m in self._members.list_members()
        }

    def member_summary(self) -> dict:
        members = self._members.list_members()
        total_events = len(self._events.list_events())
        records = self._attendance.all_records()

        rows = []
        for m in members:
            stats = member_stats_across_events(m.id, records, total_events)
            status = self._rule.status(m.id, records, total_events=total_events)
            row = {"member_id": m.id, "name": m.name, **stats.to_dict()}
            row.update(absence_count=status.count, tier=status.tier.value, label=status.tier.label)
            rows.append(row)

        return {"total_events": total_events, "members": rows}

    def event_summary(self) -> list[dict]:
        members = self._members.list_members()
        records = self._attendance.all_records()

        events = sorted(self._events.list_events(), key=lambda e: e.date, reverse=True)
        return [
            {**e.to_dict(), "stats": event_statistics(e, members, records).to_dict()}
            for e in events
        ]

    def dashboard(self, *, today: date) -> dict:
        members = self._members.list_members()
        events = self._events.list_events()
        records = self._attendance.all_records()

        absences = []
        for m in members:
            status = self._rule.status(m.id, records, total_events=len(events))
            absences.append({"member_id": m.id, "name": m.name, **status.to_dict()})

        return {
            "members": len(members),
            "events": len(events),
            "upcoming_events": self._events.count_upcoming(today),
            "absences": absences,
        }
