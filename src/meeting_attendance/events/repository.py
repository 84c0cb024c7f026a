from __future__ import annotations

from datetime import date
from typing import Optional, Protocol, Sequence

from .model import Event


class EventRepository(Protocol):
    def list(self) -> Sequence[Event]:
        """All events ordered by date ascending (ties by creation)."""

        raise NotImplementedError

    def get(self, event_id: str) -> Optional[Event]:
        raise NotImplementedError

    def create(self, *, title: str, date: date, description: Optional[str] = None) -> Event:
        raise NotImplementedError

    def update(self, event_id: str, *, title: str, date: date, description: Optional[str]) -> Optional[Event]:
        """Overwrite the editable fields; None when the event does not exist."""

        raise NotImplementedError

    def delete(self, event_id: str) -> bool:
        raise NotImplementedError
