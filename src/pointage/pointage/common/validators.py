from __future__ import annotations

from ..core.enums import Role
from ..core.exceptions import AuthorizationError, ValidationError


def require_non_empty(value: str, field_name: str) -> str:
    if not value or not value.strip():
        raise ValidationError(f"{field_name} must not be empty")
    return value.strip()


def require_choice(value, choices, field_name: str):
    """Coerce ``value`` into one of ``choices`` (an Enum class or a subset of it)."""
    options = list(choices)
    for option in options:
        if value == option or value == option.value:
            return option
    allowed = ", ".join(o.value for o in options)
    raise ValidationError(f"{field_name} must be one of: {allowed}")


def require_supervisor(current_role, action: str) -> Role:
    """Resolve the caller's role; only admin and HR pass."""
    try:
        role = Role(current_role)
    except ValueError:
        role = None
    if role is None or not role.is_supervisor:
        raise AuthorizationError(f"Only admin or HR may {action}")
    return role


def require_int(value, field_name: str) -> int:
    """Coerce an identifier coming from a request into an int."""
    if isinstance(value, bool):
        raise ValidationError(f"{field_name} must be a whole number")
    try:
        return int(value)
    except (TypeError, ValueError):
        raise ValidationError(f"{field_name} must be a whole number")
