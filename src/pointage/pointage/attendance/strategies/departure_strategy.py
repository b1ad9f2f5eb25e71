from __future__ import annotations

from typing import Iterator

from ...core.constants import DEPARTURE_OPENS_AT
from ...core.enums import PunchType
from ...core.exceptions import ValidationError
from ..model import DailyAttendanceRecord
from .base import PunchStrategy, already_punched, missing_prior, too_early


class DepartureStrategy(PunchStrategy):
    punch_type = PunchType.DEPARTURE

    def violations(self, record: DailyAttendanceRecord, clock: str) -> Iterator[ValidationError]:
        if not record.arrival:
            yield missing_prior(PunchType.ARRIVAL)
        if record.departure:
            yield already_punched(PunchType.DEPARTURE)
        if clock < DEPARTURE_OPENS_AT:
            yield too_early(PunchType.DEPARTURE, DEPARTURE_OPENS_AT)
