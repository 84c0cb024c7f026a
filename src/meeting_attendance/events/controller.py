from __future__ import annotations

from flask import Flask

from ..common.http import json_body, ok
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/events", methods=["GET"], endpoint="list_events")
    def list_events():
        return ok([e.to_dict() for e in container.event_service.list_events()])

    @app.route("/api/events", methods=["POST"], endpoint="create_event")
    def create_event():
        data = json_body()
        event = container.event_service.create_event(
            title=data.get("title"),
            date=data.get("date"),
            description=data.get("description"),
        )
        return ok(event.to_dict(), 201)

    @app.route("/api/events/<event_id>", methods=["PATCH"], endpoint="update_event")
    def update_event(event_id: str):
        event = container.event_service.update_event(event_id, json_body())
        return ok(event.to_dict())

    @app.route("/api/events/<event_id>", methods=["DELETE"], endpoint="delete_event")
    def delete_event(event_id: str):
        container.event_service.delete_event(event_id)
        return ok()

    @app.route("/api/events/on/<day>", methods=["GET"], endpoint="event_for_date")
    def event_for_date(day: str):
        event = container.event_service.find_for_date(day)
        return ok(event.to_dict() if event else None)
