from __future__ import annotations

from datetime import date
from typing import Mapping, Optional, Protocol, Sequence

from ..core.enums import PunchType
from .model import DailyAttendanceRecord


class AttendanceRepository(Protocol):
    def get_by_id(self, record_id: int) -> Optional[DailyAttendanceRecord]:
        raise NotImplementedError

    def get_for_employee_and_date(self, employee_id: int, work_date: date) -> Optional[DailyAttendanceRecord]:
        raise NotImplementedError

    def create_with_punch(
        self,
        *,
        employee_id: int,
        work_date: date,
        punch_type: PunchType,
        clock: str,
    ) -> Optional[DailyAttendanceRecord]:
        """Insert the day's record carrying its first punch.

        Returns None when a record for (employee_id, work_date) already exists,
        e.g. created by a concurrent request.
        """

        raise NotImplementedError

    def set_punch_if_unset(self, *, record_id: int, punch_type: PunchType, clock: str) -> bool:
        """Write one punch only while the column is still NULL.

        Returns False when the precondition no longer holds.
        """

        raise NotImplementedError

    def list_for_employee(self, *, employee_id: int, start_date: date, end_date: date) -> Sequence[DailyAttendanceRecord]:
        raise NotImplementedError

    def admin_update_punches(self, *, record_id: int, punches: Mapping[PunchType, Optional[str]]) -> bool:
        """Admin-only override of punch columns (correction path).

        Returns False when no row changed.
        """

        raise NotImplementedError
