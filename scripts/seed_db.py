"""Seed demo members and meetings through the service layer."""

from __future__ import annotations

import importlib

from meeting_attendance.config import get_settings_module
from meeting_attendance.container import build_container

DEMO_MEMBERS = ["Ana Souza", "Bruno Lima", "Carla D'Ávila", "João-Pedro Alves"]
DEMO_EVENTS = [
    ("Reunião de planejamento", "2026-01-10", "Pauta do semestre"),
    ("Reunião mensal", "2026-02-07", None),
]


def main() -> None:
    settings = importlib.import_module(get_settings_module())
    container = build_container(db_config=settings.DB_CONFIG, cache_enabled=False)

    existing = {m.name for m in container.member_service.list_members()}
    for name in DEMO_MEMBERS:
        if name not in existing:
            container.member_service.add_member(name)

    for title, day, description in DEMO_EVENTS:
        if container.event_service.find_for_date(day) is None:
            container.event_service.create_event(title=title, date=day, description=description)

    db = settings.DB_CONFIG
    print(f"OK: Seeded database -> {db.get('user')}@{db.get('host')}:{db.get('port', 3306)}/{db.get('database')}")


if __name__ == "__main__":
    main()
