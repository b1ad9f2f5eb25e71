from __future__ import annotations

from typing import Optional

from ..core.enums import PresenceStatus, PunchType
from .model import DailyAttendanceRecord


def presence_status(record: Optional[DailyAttendanceRecord]) -> PresenceStatus:
    if record is None:
        return PresenceStatus.NOT_ARRIVED
    if record.departure:
        return PresenceStatus.DEPARTED
    if record.break_out and not record.break_in:
        return PresenceStatus.ON_BREAK
    if record.arrival:
        return PresenceStatus.WORKING
    return PresenceStatus.NOT_ARRIVED


def last_punch(record: Optional[DailyAttendanceRecord]) -> Optional[tuple[PunchType, str]]:
    """Most recent punch of the day, latest type first."""
    if record is None:
        return None
    for punch_type in reversed(list(PunchType)):
        value = record.punch(punch_type)
        if value:
            return punch_type, value
    return None
