from __future__ import annotations

from flask import Flask, request, session

from ..attendance.model import record_to_dict
from ..common.web import login_required, outcome_response
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/justifications", methods=["POST"], endpoint="submit_justification")
    @login_required
    def submit_justification():
        data = request.get_json(silent=True) or {}
        outcome = container.justification_service.submit(
            employee_id=int(session["employee_id"]),
            record_id=data.get("record_id"),
            kind=data.get("type", ""),
            text=data.get("justification", ""),
        )
        return outcome_response(outcome, record_to_dict, status=201)

    @app.route("/api/justifications", methods=["GET"], endpoint="list_justifications")
    @login_required
    def list_justifications():
        outcome = container.justification_service.list_justifications(
            current_role=session.get("role"),
            state=request.args.get("state", "pending"),
            kind=request.args.get("type") or None,
        )
        return outcome_response(outcome, lambda entries: [e.to_dict() for e in entries])

    @app.route("/api/justifications/<int:record_id>/decide", methods=["POST"], endpoint="decide_justification")
    @login_required
    def decide_justification(record_id: int):
        data = request.get_json(silent=True) or {}
        outcome = container.justification_service.decide(
            current_role=session.get("role"),
            record_id=record_id,
            kind=data.get("type", ""),
            decision=data.get("decision", ""),
        )
        return outcome_response(outcome, record_to_dict)
