from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import date
from typing import Optional

from ..core.constants import SIGNIFICANT_LATENESS_MINUTES
from ..core.enums import DayStatus, JustificationStatus, JustificationType, PunchType


@dataclass(frozen=True)
class DailyAttendanceRecord:
    """Domain entity: one employee's attendance for one calendar day.

    Punch values are zero-padded ``HH:MM:SS`` strings or None when not punched.
    ``late_minutes`` is computed upstream and only read here.
    """

    record_id: Optional[int]
    employee_id: int
    work_date: date
    arrival: Optional[str] = None
    break_out: Optional[str] = None
    break_in: Optional[str] = None
    departure: Optional[str] = None
    late_minutes: int = 0
    status: DayStatus = DayStatus.PRESENT
    late_justification: Optional[str] = None
    late_justification_status: JustificationStatus = JustificationStatus.NONE
    absence_justification: Optional[str] = None
    absence_justification_status: JustificationStatus = JustificationStatus.NONE

    @classmethod
    def blank(cls, employee_id: int, work_date: date) -> "DailyAttendanceRecord":
        return cls(record_id=None, employee_id=employee_id, work_date=work_date)

    def punch(self, punch_type: PunchType) -> Optional[str]:
        return getattr(self, punch_type.value)

    def with_punch(self, punch_type: PunchType, clock: str) -> "DailyAttendanceRecord":
        return replace(self, **{punch_type.value: clock})

    @property
    def is_working_day(self) -> bool:
        return self.status not in (DayStatus.HOLIDAY, DayStatus.WEEKEND)

    @property
    def is_significantly_late(self) -> bool:
        return self.late_minutes > SIGNIFICANT_LATENESS_MINUTES

    def justification(self, kind: JustificationType) -> tuple[Optional[str], JustificationStatus]:
        if kind == JustificationType.LATENESS:
            return self.late_justification, self.late_justification_status
        return self.absence_justification, self.absence_justification_status

    def with_justification(
        self,
        kind: JustificationType,
        *,
        status: JustificationStatus,
        text: Optional[str] = None,
    ) -> "DailyAttendanceRecord":
        if kind == JustificationType.LATENESS:
            return replace(self, late_justification=text or self.late_justification, late_justification_status=status)
        return replace(self, absence_justification=text or self.absence_justification, absence_justification_status=status)


@dataclass(frozen=True)
class AttendanceReportRow:
    """Read-model for report/export rows (one per day)."""

    work_date: str
    arrival: str
    break_out: str
    break_in: str
    departure: str
    worked_hours: str
    late_minutes: int
    status: str
    late_justification_status: str
    absence_justification_status: str


def record_to_dict(r: DailyAttendanceRecord) -> dict:
    return {
        "record_id": r.record_id,
        "employee_id": r.employee_id,
        "work_date": r.work_date.strftime("%Y-%m-%d"),
        "arrival": r.arrival,
        "break_out": r.break_out,
        "break_in": r.break_in,
        "departure": r.departure,
        "late_minutes": r.late_minutes,
        "status": r.status.value,
        "late_justification": r.late_justification,
        "late_justification_status": r.late_justification_status.value,
        "absence_justification": r.absence_justification,
        "absence_justification_status": r.absence_justification_status.value,
    }
