from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Iterable

from ..aggregator import AbsenceStatus


class AbsenceRule(ABC):
    """Strategy: how a member's unjustified absences are counted."""

    @abstractmethod
    def status(self, member_id: Any, records: Iterable[Any], *, total_events: int) -> AbsenceStatus:
        raise NotImplementedError
