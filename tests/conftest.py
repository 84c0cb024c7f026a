from __future__ import annotations

import uuid
from datetime import date
from typing import Optional

import pytest

from meeting_attendance.attendance.model import AttendanceRecord
from meeting_attendance.container import wire
from meeting_attendance.events.model import Event
from meeting_attendance.members.model import Member


class InMemoryAttendance:
    def __init__(self):
        self._by_pair: dict[tuple[str, str], AttendanceRecord] = {}
        self.list_calls = 0

    def list_by_event(self, event_id: str):
        self.list_calls += 1
        return [r for r in self._by_pair.values() if r.event_id == event_id]

    def list_by_member(self, member_id: str):
        self.list_calls += 1
        return [r for r in self._by_pair.values() if r.member_id == member_id]

    def list_all(self):
        self.list_calls += 1
        return list(self._by_pair.values())

    def upsert(self, *, event_id: str, member_id: str, is_present: bool, justification: Optional[str] = None) -> None:
        existing = self._by_pair.get((event_id, member_id))
        self._by_pair[(event_id, member_id)] = AttendanceRecord(
            id=existing.id if existing else str(uuid.uuid4()),
            event_id=event_id,
            member_id=member_id,
            is_present=is_present,
            justification=justification,
        )

    def drop(self, *, event_id: Optional[str] = None, member_id: Optional[str] = None) -> None:
        for k in list(self._by_pair):
            if (event_id and k[0] == event_id) or (member_id and k[1] == member_id):
                del self._by_pair[k]


class InMemoryMembers:
    def __init__(self, attendance: InMemoryAttendance):
        self._members: dict[str, Member] = {}
        self._attendance = attendance
        self.list_calls = 0

    def list(self):
        self.list_calls += 1
        return sorted(self._members.values(), key=lambda m: m.name)

    def get(self, member_id: str) -> Optional[Member]:
        return self._members.get(member_id)

    def create(self, *, name: str) -> Member:
        member = Member(id=str(uuid.uuid4()), name=name)
        self._members[member.id] = member
        return member

    def delete(self, member_id: str) -> bool:
        if self._members.pop(member_id, None) is None:
            return False
        self._attendance.drop(member_id=member_id)
        return True


class InMemoryEvents:
    def __init__(self, attendance: InMemoryAttendance):
        self._events: dict[str, Event] = {}
        self._attendance = attendance

    def list(self):
        # dicts keep insertion order, so ties on date stay in creation order
        return sorted(self._events.values(), key=lambda e: e.date)

    def get(self, event_id: str) -> Optional[Event]:
        return self._events.get(event_id)

    def create(self, *, title: str, date: date, description: Optional[str] = None) -> Event:
        event = Event(id=str(uuid.uuid4()), title=title, date=date, description=description)
        self._events[event.id] = event
        return event

    def update(self, event_id: str, *, title: str, date: date, description: Optional[str]) -> Optional[Event]:
        if event_id not in self._events:
            return None
        event = Event(id=event_id, title=title, date=date, description=description)
        self._events[event_id] = event
        return event

    def delete(self, event_id: str) -> bool:
        if self._events.pop(event_id, None) is None:
            return False
        self._attendance.drop(event_id=event_id)
        return True


class Stores:
    def __init__(self):
        self.attendance = InMemoryAttendance()
        self.members = InMemoryMembers(self.attendance)
        self.events = InMemoryEvents(self.attendance)


@pytest.fixture
def stores() -> Stores:
    return Stores()


@pytest.fixture
def container(stores):
    return wire(members_repo=stores.members, events_repo=stores.events, attendance_repo=stores.attendance)


@pytest.fixture
def fixed_today() -> date:
    return date(2026, 3, 1)


@pytest.fixture
def app(container, monkeypatch):
    from meeting_attendance.main import create_app

    monkeypatch.setenv("APP_ENV", "testing")
    return create_app(container)


@pytest.fixture
def client(app):
    return app.test_client()
