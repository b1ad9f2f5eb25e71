from __future__ import annotations

from typing import Iterable, Optional

from ..attendance.model import DailyAttendanceRecord
from ..core.constants import LATENESS_CREDIT_MINUTES, STANDARD_DAY_HOURS
from ..core.enums import DayStatus, JustificationStatus
from .calculator.base import WorkedTimeCalculator
from .calculator.standard_calculator import StandardWorkedTimeCalculator
from .formatting import format_hours, format_minutes
from .model import MonthlyStats


def aggregate_month(
    records: Iterable[DailyAttendanceRecord],
    *,
    calculator: Optional[WorkedTimeCalculator] = None,
) -> MonthlyStats:
    """Fold one employee's daily records into monthly figures.

    Pure and order-independent: worked time is summed in whole seconds.
    """
    calculator = calculator or StandardWorkedTimeCalculator()

    days_present = 0
    worked_seconds = 0
    days_absent = 0
    justified_absences = 0
    total_late_minutes = 0
    significant = 0
    justified_late = 0

    for r in records:
        if r.status == DayStatus.PRESENT:
            days_present += 1
            worked_seconds += calculator.worked_seconds(r)
        elif r.status == DayStatus.ABSENT:
            days_absent += 1
            if r.absence_justification_status == JustificationStatus.APPROVED:
                justified_absences += 1

        total_late_minutes += r.late_minutes
        if r.is_significantly_late:
            significant += 1
            if r.late_justification_status == JustificationStatus.APPROVED:
                justified_late += 1

    return MonthlyStats(
        days_present=days_present,
        total_hours=format_hours(worked_seconds / 3600),
        days_absent=days_absent,
        justified_absences=justified_absences,
        total_late_minutes=total_late_minutes,
        total_lateness=format_minutes(total_late_minutes),
        significant_lateness_count=significant,
        justified_lateness_count=justified_late,
        payable_hours=format_hours((days_present + justified_absences) * STANDARD_DAY_HOURS),
        unjustified_absence_hours=format_hours((days_absent - justified_absences) * STANDARD_DAY_HOURS),
        justified_lateness_hours=format_minutes(justified_late * LATENESS_CREDIT_MINUTES),
        unjustified_lateness_hours=format_minutes((significant - justified_late) * LATENESS_CREDIT_MINUTES),
    )
