from __future__ import annotations

from abc import ABC, abstractmethod

from ...attendance.model import DailyAttendanceRecord


class WorkedTimeCalculator(ABC):
    """Calculator interface (Strategy Pattern for payroll)."""

    @abstractmethod
    def worked_seconds(self, record: DailyAttendanceRecord) -> int:
        raise NotImplementedError

    def worked_hours(self, record: DailyAttendanceRecord) -> float:
        return self.worked_seconds(record) / 3600
