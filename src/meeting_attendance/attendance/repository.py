from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import AttendanceRecord


class AttendanceRepository(Protocol):
    def list_by_event(self, event_id: str) -> Sequence[AttendanceRecord]:
        raise NotImplementedError

    def list_by_member(self, member_id: str) -> Sequence[AttendanceRecord]:
        raise NotImplementedError

    def list_all(self) -> Sequence[AttendanceRecord]:
        raise NotImplementedError

    def upsert(
        self,
        *,
        event_id: str,
        member_id: str,
        is_present: bool,
        justification: Optional[str] = None,
    ) -> None:
        """Create or update the record keyed by (event_id, member_id)."""

        raise NotImplementedError
