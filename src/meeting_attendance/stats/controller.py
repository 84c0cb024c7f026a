from __future__ import annotations

from flask import Flask

from ..common.datetime_utils import today_local
from ..common.http import ok
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/summary/members", methods=["GET"], endpoint="member_summary")
    def member_summary():
        return ok(container.stats_service.member_summary())

    @app.route("/api/summary/events", methods=["GET"], endpoint="event_summary")
    def event_summary():
        return ok(container.stats_service.event_summary())

    @app.route("/api/dashboard", methods=["GET"], endpoint="dashboard")
    def dashboard():
        return ok(container.stats_service.dashboard(today=today_local()))
