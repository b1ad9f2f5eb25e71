from __future__ import annotations

from typing import Iterator

from ...core.enums import PunchType
from ...core.exceptions import ValidationError
from ..model import DailyAttendanceRecord
from .base import PunchStrategy, already_punched, missing_prior


class BreakInStrategy(PunchStrategy):
    """Back from the lunch break. No admission window."""

    punch_type = PunchType.BREAK_IN

    def violations(self, record: DailyAttendanceRecord, clock: str) -> Iterator[ValidationError]:
        if not record.break_out:
            yield missing_prior(PunchType.BREAK_OUT)
        if record.break_in:
            yield already_punched(PunchType.BREAK_IN)
