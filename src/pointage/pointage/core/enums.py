from __future__ import annotations

from enum import Enum


class Role(str, Enum):
    """Caller roles resolved by the session layer."""

    ADMIN = "admin"
    HR = "hr"
    EMPLOYEE = "employee"

    @property
    def is_supervisor(self) -> bool:
        return self in (Role.ADMIN, Role.HR)


class PunchType(str, Enum):
    """The four punches of a working day, in their required order."""

    ARRIVAL = "arrival"
    BREAK_OUT = "break_out"
    BREAK_IN = "break_in"
    DEPARTURE = "departure"


class DayStatus(str, Enum):
    PRESENT = "present"
    ABSENT = "absent"
    HOLIDAY = "holiday"
    WEEKEND = "weekend"


class JustificationType(str, Enum):
    LATENESS = "lateness"
    ABSENCE = "absence"


class JustificationStatus(str, Enum):
    """none -> pending -> approved | rejected."""

    NONE = "none"
    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"


class PresenceStatus(str, Enum):
    NOT_ARRIVED = "not_arrived"
    WORKING = "working"
    ON_BREAK = "on_break"
    DEPARTED = "departed"


class ErrorKind(str, Enum):
    ALREADY_PUNCHED = "AlreadyPunched"
    TOO_EARLY = "TooEarly"
    MISSING_PRIOR_PUNCH = "MissingPriorPunch"
    SEQUENCE_VIOLATION = "SequenceViolation"
    NOT_ELIGIBLE = "NotEligible"
    ALREADY_SUBMITTED = "AlreadySubmitted"
    NOT_PENDING = "NotPending"
    NOT_FOUND = "NotFound"
    STORE_UNAVAILABLE = "StoreUnavailable"
    NOT_AUTHORIZED = "NotAuthorized"
    INVALID_INPUT = "InvalidInput"
