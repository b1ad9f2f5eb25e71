from __future__ import annotations

from typing import Iterator

from ...core.constants import BREAK_OUT_OPENS_AT
from ...core.enums import ErrorKind, PunchType
from ...core.exceptions import ValidationError
from ..model import DailyAttendanceRecord
from .base import PunchStrategy, already_punched, missing_prior, too_early


class BreakOutStrategy(PunchStrategy):
    """Leaving for the lunch break."""

    punch_type = PunchType.BREAK_OUT

    def violations(self, record: DailyAttendanceRecord, clock: str) -> Iterator[ValidationError]:
        if not record.arrival:
            yield missing_prior(PunchType.ARRIVAL)
        if record.departure:
            yield ValidationError("Departure already punched, break is no longer possible", ErrorKind.SEQUENCE_VIOLATION)
        if record.break_out:
            yield already_punched(PunchType.BREAK_OUT)
        if clock < BREAK_OUT_OPENS_AT:
            yield too_early(PunchType.BREAK_OUT, BREAK_OUT_OPENS_AT)
