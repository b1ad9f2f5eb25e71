from __future__ import annotations

from .base import WorkedTimeCalculator
from ...attendance.model import DailyAttendanceRecord
from ...common.datetime_utils import clock_to_seconds
from ...core.constants import UNLOGGED_BREAK_SECONDS


class StandardWorkedTimeCalculator(WorkedTimeCalculator):
    """Standard rule: (departure - arrival) - break, not below 0.

    The break is the logged break_out/break_in span when both are punched,
    otherwise a flat hour for the unlogged lunch.
    """

    def worked_seconds(self, record: DailyAttendanceRecord) -> int:
        if not record.arrival or not record.departure:
            return 0

        seconds = clock_to_seconds(record.departure) - clock_to_seconds(record.arrival)
        if record.break_out and record.break_in:
            seconds -= clock_to_seconds(record.break_in) - clock_to_seconds(record.break_out)
        else:
            seconds -= UNLOGGED_BREAK_SECONDS
        return max(seconds, 0)


def worked_hours(record: DailyAttendanceRecord) -> float:
    return StandardWorkedTimeCalculator().worked_hours(record)
