"""Attendance aggregation.

Pure functions over members, events and attendance records. Nothing here
does I/O or keeps state, and malformed input yields zeroed statistics
instead of an exception.

Records may be ``AttendanceRecord`` objects or plain mappings with the same
keys (``event_id``, ``member_id``, ``is_present``, ``justification``).
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Iterable, Mapping, NamedTuple, Optional

from ..core.constants import ATTENTION_ABSENCES, OUT_ABSENCES
from ..core.enums import AttendanceState, RiskTier


class _Fields(NamedTuple):
    event_id: Any
    member_id: Any
    is_present: bool
    justification: Optional[str]


def _fields(record: Any) -> Optional[_Fields]:
    if record is None:
        return None
    if isinstance(record, Mapping):
        get = record.get
    else:
        def get(name, default=None):
            return getattr(record, name, default)

    event_id = get("event_id")
    member_id = get("member_id")
    if event_id is None or member_id is None:
        return None

    justification = get("justification")
    if not isinstance(justification, str):
        justification = None
    return _Fields(event_id, member_id, bool(get("is_present", False)), justification)


def _state(f: _Fields) -> AttendanceState:
    if f.is_present:
        return AttendanceState.PRESENT
    if f.justification and f.justification.strip():
        return AttendanceState.ABSENT_JUSTIFIED
    return AttendanceState.ABSENT_UNJUSTIFIED


def _as_count(value: Any) -> int:
    try:
        return max(int(value), 0)
    except (TypeError, ValueError):
        return 0


def _id_of(obj: Any) -> Any:
    if isinstance(obj, Mapping):
        return obj.get("id")
    return getattr(obj, "id", obj)


def _member_records(member_id: Any, records: Optional[Iterable[Any]]) -> list[_Fields]:
    # one record per event; a later duplicate replaces an earlier one
    by_event: dict[Any, _Fields] = {}
    for r in records or ():
        f = _fields(r)
        if f is not None and f.member_id == member_id:
            by_event[f.event_id] = f
    return list(by_event.values())


def percent(count: int, total: int) -> int:
    """Whole percentage, halves rounded up; 0 when total is 0."""
    total = _as_count(total)
    if total == 0:
        return 0
    return int(math.floor(_as_count(count) / total * 100 + 0.5))


def absence_tier(count: int) -> RiskTier:
    count = _as_count(count)
    if count >= OUT_ABSENCES:
        return RiskTier.OUT
    if count == ATTENTION_ABSENCES:
        return RiskTier.ATTENTION
    return RiskTier.OK


@dataclass(frozen=True)
class AbsenceStatus:
    count: int
    tier: RiskTier

    def to_dict(self) -> dict:
        return {"count": self.count, "tier": self.tier.value, "label": self.tier.label}


@dataclass(frozen=True)
class EventStats:
    total: int
    present: int
    justified: int
    absent: int

    @property
    def present_percent(self) -> int:
        return percent(self.present, self.total)

    @property
    def justified_percent(self) -> int:
        return percent(self.justified, self.total)

    @property
    def absent_percent(self) -> int:
        return percent(self.absent, self.total)

    def to_dict(self) -> dict:
        return {
            "total": self.total,
            "present": self.present,
            "justified": self.justified,
            "absent": self.absent,
            "present_percent": self.present_percent,
            "justified_percent": self.justified_percent,
            "absent_percent": self.absent_percent,
        }


@dataclass(frozen=True)
class MemberStats:
    present: int
    justified: int
    absent: int
    not_marked: int

    @property
    def total_absent(self) -> int:
        """Explicit unjustified absences plus events never marked."""
        return self.absent + self.not_marked

    @property
    def tier(self) -> RiskTier:
        return absence_tier(self.total_absent)

    def to_dict(self) -> dict:
        return {
            "present": self.present,
            "justified": self.justified,
            "absent": self.absent,
            "not_marked": self.not_marked,
            "total_absent": self.total_absent,
            "tier": self.tier.value,
            "label": self.tier.label,
        }


def member_absence_status(
    member_id: Any,
    records: Optional[Iterable[Any]],
    *,
    total_events: Optional[int] = None,
) -> AbsenceStatus:
    """Unjustified absences of one member and the tier they imply.

    Scans ``records`` (system-wide) for the member's absences without a
    justification. With ``total_events`` the events the member was never
    marked for count as unjustified absences too.
    """

    mine = _member_records(member_id, records)
    count = sum(1 for f in mine if _state(f) == AttendanceState.ABSENT_UNJUSTIFIED)
    if total_events is not None:
        count += max(_as_count(total_events) - len(mine), 0)
    return AbsenceStatus(count=count, tier=absence_tier(count))


def event_statistics(event: Any, members: Optional[Iterable[Any]], records: Optional[Iterable[Any]]) -> EventStats:
    """Partition the roster into present / justified / absent for one event.

    Members without a record land in ``absent``; records of members that are
    not on the roster are ignored so the three buckets always sum to ``total``.
    """

    roster = {_id_of(m) for m in members or ()}
    roster.discard(None)
    event_id = _id_of(event)

    by_member: dict[Any, AttendanceState] = {}
    for r in records or ():
        f = _fields(r)
        if f is None or f.event_id != event_id or f.member_id not in roster:
            continue
        by_member[f.member_id] = _state(f)

    total = len(roster)
    present = sum(1 for s in by_member.values() if s == AttendanceState.PRESENT)
    justified = sum(1 for s in by_member.values() if s == AttendanceState.ABSENT_JUSTIFIED)
    return EventStats(total=total, present=present, justified=justified, absent=total - present - justified)


def member_stats_across_events(
    member_id: Any,
    records: Optional[Iterable[Any]],
    total_event_count: int,
) -> MemberStats:
    mine = _member_records(member_id, records)
    states = [_state(f) for f in mine]
    return MemberStats(
        present=states.count(AttendanceState.PRESENT),
        justified=states.count(AttendanceState.ABSENT_JUSTIFIED),
        absent=states.count(AttendanceState.ABSENT_UNJUSTIFIED),
        not_marked=max(_as_count(total_event_count) - len(mine), 0),
    )


def with_draft_justifications(
    records: Optional[Iterable[Any]],
    event_id: Any,
    drafts: Optional[Mapping[Any, str]],
) -> list[Any]:
    """Records as they would read if the drafts for ``event_id`` were saved.

    A non-blank draft turns the member's absence at that event into a
    justified one, including when the member has no record there yet.
    Presences are left alone.
    """

    drafts = {m: t for m, t in (drafts or {}).items() if isinstance(t, str) and t.strip()}
    marked: set = set()
    out: list[Any] = []
    for r in records or ():
        f = _fields(r)
        if f is None:
            continue
        if f.event_id == event_id:
            marked.add(f.member_id)
            if not f.is_present and f.member_id in drafts:
                r = {
                    "event_id": f.event_id,
                    "member_id": f.member_id,
                    "is_present": False,
                    "justification": drafts[f.member_id],
                }
        out.append(r)

    for member_id, text in drafts.items():
        if member_id not in marked:
            out.append({"event_id": event_id, "member_id": member_id, "is_present": False, "justification": text})
    return out
