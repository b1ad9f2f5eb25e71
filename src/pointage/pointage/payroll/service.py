from __future__ import annotations

import logging
from typing import Optional

from ..attendance.model import AttendanceReportRow, DailyAttendanceRecord
from ..attendance.repository import AttendanceRepository
from ..common.datetime_utils import month_bounds, parse_year_month
from ..common.validators import require_int
from ..core.exceptions import DomainError, ValidationError
from ..core.result import Outcome
from .aggregator import aggregate_month
from .calculator.base import WorkedTimeCalculator
from .calculator.standard_calculator import StandardWorkedTimeCalculator
from .formatting import format_hours
from .model import MonthlyReport, MonthlyStats

logger = logging.getLogger(__name__)


class PayrollReportService:
    def __init__(
        self,
        attendance: AttendanceRepository,
        *,
        calculator: Optional[WorkedTimeCalculator] = None,
    ):
        self._attendance = attendance
        self._calculator = calculator or StandardWorkedTimeCalculator()

    def compute_monthly(self, employee_id: int, year_month: str) -> Outcome[MonthlyStats]:
        outcome = self.build_monthly_report(employee_id, year_month, include_rows=False)
        if not outcome.ok:
            return Outcome.failure(outcome.error)
        return Outcome.success(outcome.value.stats)

    def build_monthly_report(self, employee_id: int, year_month: str, *, include_rows: bool = True) -> Outcome[MonthlyReport]:
        try:
            employee_id = require_int(employee_id, "Employee id")
            try:
                year, month = parse_year_month(year_month)
            except (TypeError, ValueError):
                raise ValidationError("Month must be formatted as YYYY-MM")

            start, end = month_bounds(year, month)
            # One read per call; the fold below never goes back to the store.
            records = list(
                self._attendance.list_for_employee(employee_id=employee_id, start_date=start, end_date=end)
            )
        except DomainError as e:
            logger.warning("Monthly report for employee %s (%s) failed: %s", employee_id, year_month, e.kind.value)
            return Outcome.failure(e)

        stats = aggregate_month(records, calculator=self._calculator)
        rows = [self._to_row(r) for r in sorted(records, key=lambda r: r.work_date)] if include_rows else []
        return Outcome.success(
            MonthlyReport(
                employee_id=employee_id,
                year_month=f"{year:04d}-{month:02d}",
                start=start,
                end=end,
                stats=stats,
                rows=rows,
            )
        )

    def _to_row(self, r: DailyAttendanceRecord) -> AttendanceReportRow:
        return AttendanceReportRow(
            work_date=r.work_date.strftime("%Y-%m-%d"),
            arrival=r.arrival or "-",
            break_out=r.break_out or "-",
            break_in=r.break_in or "-",
            departure=r.departure or "-",
            worked_hours=format_hours(self._calculator.worked_hours(r)),
            late_minutes=r.late_minutes,
            status=r.status.value,
            late_justification_status=r.late_justification_status.value,
            absence_justification_status=r.absence_justification_status.value,
        )
