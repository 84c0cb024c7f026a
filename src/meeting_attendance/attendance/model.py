from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..core.enums import AttendanceState


def is_blank(text: Optional[str]) -> bool:
    return not text or not text.strip()


@dataclass(frozen=True)
class AttendanceRecord:
    """Domain entity: presence of one member at one event.

    At most one record exists per (event_id, member_id).
    """

    id: str
    event_id: str
    member_id: str
    is_present: bool
    justification: Optional[str] = None

    @property
    def state(self) -> AttendanceState:
        if self.is_present:
            return AttendanceState.PRESENT
        if is_blank(self.justification):
            return AttendanceState.ABSENT_UNJUSTIFIED
        return AttendanceState.ABSENT_JUSTIFIED


def state_of(record: Optional[AttendanceRecord]) -> AttendanceState:
    """State for a (event, member) pair; no record reads as unjustified absence."""
    if record is None:
        return AttendanceState.ABSENT_UNJUSTIFIED
    return record.state
