from __future__ import annotations

import logging
from datetime import date
from typing import Any, Mapping, Optional, Sequence

from ..common.query_cache import QueryCache
from ..common.validators import validate_event_date, validate_event_description, validate_event_title
from ..core.exceptions import NotFoundError, ValidationError
from .model import Event
from .repository import EventRepository

logger = logging.getLogger(__name__)

_EDITABLE_FIELDS = {"title", "date", "description"}


class EventService:
    """Use case: create, edit and look up meetings."""

    def __init__(self, events: EventRepository, *, cache: QueryCache | None = None):
        self._events = events
        self._cache = cache or QueryCache(enabled=False)

    def list_events(self) -> Sequence[Event]:
        return self._cache.get_or_load(("events",), lambda: list(self._events.list()))

    def get_event(self, event_id: str) -> Event:
        event = self._events.get(event_id)
        if not event:
            raise NotFoundError("Evento não encontrado")
        return event

    def create_event(self, *, title: str, date, description: Optional[str] = None) -> Event:
        title = validate_event_title(title)
        day = validate_event_date(date)
        description = validate_event_description(description)

        event = self._events.create(title=title, date=day, description=description)
        self._cache.invalidate("events")
        logger.info("event created id=%s date=%s", event.id, event.date)
        return event

    def update_event(self, event_id: str, changes: Mapping[str, Any]) -> Event:
        """Apply a partial update.

        Attendance rows stay keyed by event id, so moving the date keeps them.
        """

        unknown = set(changes) - _EDITABLE_FIELDS
        if unknown:
            raise ValidationError(f"Campos inválidos: {', '.join(sorted(unknown))}")

        current = self.get_event(event_id)
        title = validate_event_title(changes.get("title", current.title))
        day = validate_event_date(changes.get("date", current.date))
        description = validate_event_description(changes.get("description", current.description))

        event = self._events.update(event_id, title=title, date=day, description=description)
        if not event:
            raise NotFoundError("Evento não encontrado")
        self._cache.invalidate("events")
        logger.info("event updated id=%s", event_id)
        return event

    def delete_event(self, event_id: str) -> None:
        if not self._events.delete(event_id):
            raise NotFoundError("Evento não encontrado")
        self._cache.invalidate("events", "attendance")
        logger.info("event deleted id=%s", event_id)

    def find_for_date(self, day) -> Optional[Event]:
        """First event on ``day`` in list order.

        Dates are not unique; callers that treat the date as a key get the
        earliest-created event of that day.
        """

        day = validate_event_date(day)
        for event in self.list_events():
            if event.date == day:
                return event
        return None

    def count_upcoming(self, today: date) -> int:
        return sum(1 for e in self.list_events() if e.date >= today)
