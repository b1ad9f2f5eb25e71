from __future__ import annotations

from typing import Iterator

from ...core.constants import ARRIVAL_OPENS_AT
from ...core.enums import PunchType
from ...core.exceptions import ValidationError
from ..model import DailyAttendanceRecord
from .base import PunchStrategy, already_punched, too_early


class ArrivalStrategy(PunchStrategy):
    punch_type = PunchType.ARRIVAL

    def violations(self, record: DailyAttendanceRecord, clock: str) -> Iterator[ValidationError]:
        if record.arrival:
            yield already_punched(PunchType.ARRIVAL)
        if clock < ARRIVAL_OPENS_AT:
            yield too_early(PunchType.ARRIVAL, ARRIVAL_OPENS_AT)
