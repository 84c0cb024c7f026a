from __future__ import annotations

from typing import Any, Iterable

from ..aggregator import AbsenceStatus, member_absence_status
from .base import AbsenceRule


class UnmarkedAsAbsentRule(AbsenceRule):
    """Events the member was never marked for count as unjustified absences."""

    def status(self, member_id: Any, records: Iterable[Any], *, total_events: int) -> AbsenceStatus:
        return member_absence_status(member_id, records, total_events=total_events)
