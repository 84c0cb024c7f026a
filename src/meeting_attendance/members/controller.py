from __future__ import annotations

from flask import Flask

from ..common.http import json_body, ok
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/members", methods=["GET"], endpoint="list_members")
    def list_members():
        return ok([m.to_dict() for m in container.member_service.list_members()])

    @app.route("/api/members", methods=["POST"], endpoint="add_member")
    def add_member():
        data = json_body()
        member = container.member_service.add_member(data.get("name"))
        return ok(member.to_dict(), 201)

    @app.route("/api/members/<member_id>", methods=["DELETE"], endpoint="remove_member")
    def remove_member(member_id: str):
        container.member_service.remove_member(member_id)
        return ok()

    @app.route("/api/members/<member_id>/absence-status", methods=["GET"], endpoint="member_absence_status")
    def member_absence_status(member_id: str):
        return ok(container.stats_service.absence_status(member_id).to_dict())
