from __future__ import annotations

from flask import Flask, session

from ..common.http import json_body, ok
from ..common.validators import validate_justification
from ..core.exceptions import ValidationError
from ..container import Container
from .drafts import JustificationDrafts

_DRAFTS_KEY = "justification_drafts"


def register(app: Flask, container: Container) -> None:
    def _load_drafts(event_id: str) -> JustificationDrafts:
        drafts = JustificationDrafts.from_dict(session.get(_DRAFTS_KEY))
        drafts.select_event(event_id)
        return drafts

    def _save_drafts(drafts: JustificationDrafts) -> None:
        session[_DRAFTS_KEY] = drafts.to_dict()

    @app.route("/api/events/<event_id>/attendance", methods=["GET"], endpoint="event_attendance")
    def event_attendance(event_id: str):
        """Selects the event and returns its sheet, statistics and drafts."""

        event = container.event_service.get_event(event_id)
        drafts = _load_drafts(event_id)
        _save_drafts(drafts)

        members = container.member_service.list_members()
        rows = container.attendance_service.sheet(event_id, members)
        absences = container.stats_service.absences_with_drafts(event_id, drafts.texts())
        for row in rows:
            row["draft"] = drafts.get(row["member_id"])
            row["absences"] = absences[row["member_id"]].to_dict()

        return ok(
            {
                "event": event.to_dict(),
                "rows": rows,
                "stats": container.stats_service.event_stats(event_id),
            }
        )

    @app.route(
        "/api/events/<event_id>/attendance/<member_id>/toggle",
        methods=["POST"],
        endpoint="toggle_attendance",
    )
    def toggle_attendance(event_id: str, member_id: str):
        drafts = _load_drafts(event_id)
        state = container.attendance_service.toggle(event_id, member_id, drafts=drafts)
        _save_drafts(drafts)
        return ok({"member_id": member_id, "state": state.value, "draft": drafts.get(member_id)})

    @app.route("/api/events/<event_id>/attendance/<member_id>", methods=["PUT"], endpoint="mark_attendance")
    def mark_attendance(event_id: str, member_id: str):
        data = json_body()
        is_present = data.get("is_present")
        if not isinstance(is_present, bool):
            raise ValidationError("Presença inválida")
        state = container.attendance_service.mark(
            event_id,
            member_id,
            is_present=is_present,
            justification=data.get("justification"),
        )

        # The draft is either saved now or meaningless (member present).
        drafts = _load_drafts(event_id)
        drafts.clear(member_id)
        _save_drafts(drafts)
        return ok({"member_id": member_id, "state": state.value})

    @app.route("/api/events/<event_id>/drafts/<member_id>", methods=["PUT"], endpoint="set_draft")
    def set_draft(event_id: str, member_id: str):
        data = json_body()
        container.event_service.get_event(event_id)
        validate_justification(data.get("text"))
        drafts = _load_drafts(event_id)
        drafts.set(member_id, data.get("text"))
        _save_drafts(drafts)
        return ok({"member_id": member_id, "draft": drafts.get(member_id)})
