from __future__ import annotations

from functools import wraps
from typing import Any, Callable

from flask import jsonify, session

from ..core.enums import ErrorKind
from ..core.result import Outcome

HTTP_STATUS = {
    ErrorKind.NOT_AUTHORIZED: 403,
    ErrorKind.NOT_FOUND: 404,
    ErrorKind.STORE_UNAVAILABLE: 503,
}


def login_required(view):
    @wraps(view)
    def wrapper(*args, **kwargs):
        if "employee_id" not in session:
            return jsonify({"error": "NotAuthenticated", "message": "Please log in to continue"}), 401
        return view(*args, **kwargs)

    return wrapper


def outcome_response(outcome: Outcome, serialize: Callable[[Any], Any], *, status: int = 200):
    """Render an Outcome; error messages are shown to the user verbatim."""
    if not outcome.ok:
        return jsonify({"success": False, **outcome.error.to_dict()}), HTTP_STATUS.get(outcome.error.kind, 400)
    return jsonify({"success": True, "data": serialize(outcome.value)}), status
