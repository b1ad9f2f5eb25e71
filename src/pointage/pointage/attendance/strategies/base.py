from __future__ import annotations

from abc import ABC, abstractmethod
from typing import ClassVar, Iterator, Optional

from ...core.enums import ErrorKind, PunchType
from ...core.exceptions import ValidationError
from ..model import DailyAttendanceRecord

LABELS = {
    PunchType.ARRIVAL: "Arrival",
    PunchType.BREAK_OUT: "Break",
    PunchType.BREAK_IN: "Return from break",
    PunchType.DEPARTURE: "Departure",
}


def already_punched(punch_type: PunchType) -> ValidationError:
    return ValidationError(f"{LABELS[punch_type]} already punched today", ErrorKind.ALREADY_PUNCHED)


def missing_prior(prior: PunchType) -> ValidationError:
    return ValidationError(f"{LABELS[prior]} must be punched first", ErrorKind.MISSING_PRIOR_PUNCH)


def too_early(punch_type: PunchType, opens_at: str) -> ValidationError:
    return ValidationError(f"{LABELS[punch_type]} is accepted from {opens_at[:5]}", ErrorKind.TOO_EARLY)


class PunchStrategy(ABC):
    """Strategy Pattern: the ordered admission rules of one punch type."""

    punch_type: ClassVar[PunchType]

    @abstractmethod
    def violations(self, record: DailyAttendanceRecord, clock: str) -> Iterator[ValidationError]:
        """Yield rule failures in evaluation order."""
        raise NotImplementedError

    def first_violation(self, record: DailyAttendanceRecord, clock: str) -> Optional[ValidationError]:
        return next(iter(self.violations(record, clock)), None)
