from __future__ import annotations

from typing import Any, Iterable

from ..aggregator import AbsenceStatus, member_absence_status
from .base import AbsenceRule


class RecordScanRule(AbsenceRule):
    """Only explicit absence records without justification count."""

    def status(self, member_id: Any, records: Iterable[Any], *, total_events: int) -> AbsenceStatus:
        return member_absence_status(member_id, records)
