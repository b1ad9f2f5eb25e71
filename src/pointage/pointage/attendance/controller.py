from __future__ import annotations

from flask import Flask, request, session

from ..common.web import login_required, outcome_response
from ..container import Container
from .model import record_to_dict


def register(app: Flask, container: Container) -> None:
    @app.route("/api/punch", methods=["POST"], endpoint="punch")
    @login_required
    def punch():
        # The punch time always comes from the server clock, never from the payload.
        data = request.get_json(silent=True) or {}
        outcome = container.attendance_service.submit_punch(int(session["employee_id"]), data.get("type", ""))
        return outcome_response(outcome, record_to_dict)

    @app.route("/api/punch/today", methods=["GET"], endpoint="punch_today")
    @login_required
    def punch_today():
        outcome = container.attendance_service.get_today_record(int(session["employee_id"]))
        return outcome_response(outcome, lambda r: record_to_dict(r) if r else None)

    @app.route("/api/presence/<int:employee_id>", methods=["GET"], endpoint="presence")
    @login_required
    def presence(employee_id: int):
        outcome = container.attendance_service.get_presence(
            employee_id,
            viewer_id=int(session["employee_id"]),
            current_role=session.get("role"),
        )
        return outcome_response(outcome, lambda p: p)

    @app.route("/api/records/<int:record_id>/correct", methods=["POST"], endpoint="correct_record")
    @login_required
    def correct_record(record_id: int):
        data = request.get_json(silent=True) or {}
        outcome = container.attendance_service.correct_record(
            current_role=session.get("role"),
            record_id=record_id,
            changes=data,
        )
        return outcome_response(outcome, record_to_dict)
