from __future__ import annotations

import logging
from typing import Mapping, Optional

from ..clock.model import ServerTime
from ..clock.source import SystemTimeSource, TimeSource
from ..common.datetime_utils import parse_clock
from ..common.validators import require_choice, require_int, require_supervisor
from ..core.enums import ErrorKind, PunchType, Role
from ..core.exceptions import DomainError, NotFoundError, StoreUnavailableError, ValidationError
from ..core.result import Outcome
from .factory import PunchStrategyFactory
from .model import DailyAttendanceRecord
from .presence import last_punch, presence_status
from .repository import AttendanceRepository
from .strategies.base import PunchStrategy, already_punched

logger = logging.getLogger(__name__)


class AttendanceService:
    """Punch gate: validates one punch against the day's record and stores it."""

    def __init__(
        self,
        attendance: AttendanceRepository,
        *,
        time_source: TimeSource | None = None,
        strategy_factory: PunchStrategyFactory | None = None,
    ):
        self._attendance = attendance
        self._clock = time_source or SystemTimeSource()
        self._factory = strategy_factory or PunchStrategyFactory()

    def submit_punch(self, employee_id: int, punch_type: PunchType | str, *, now: ServerTime | None = None) -> Outcome[DailyAttendanceRecord]:
        try:
            kind = require_choice(punch_type, PunchType, "Punch type")
            now = now or self._clock.now()
            record = self._punch(require_int(employee_id, "Employee id"), kind, now)
        except DomainError as e:
            logger.info("Punch %s refused for employee %s: %s", punch_type, employee_id, e.kind.value)
            return Outcome.failure(e)

        logger.info("Punch %s accepted for employee %s at %s %s", kind.value, employee_id, now.work_date, now.clock)
        return Outcome.success(record)

    def _punch(self, employee_id: int, punch_type: PunchType, now: ServerTime) -> DailyAttendanceRecord:
        strategy = self._factory.for_punch(punch_type)

        record = self._attendance.get_for_employee_and_date(employee_id, now.work_date)
        if record is None:
            self._admit(strategy, DailyAttendanceRecord.blank(employee_id, now.work_date), now)
            created = self._attendance.create_with_punch(
                employee_id=employee_id,
                work_date=now.work_date,
                punch_type=punch_type,
                clock=now.clock,
            )
            if created is not None:
                return created

            # Lost the insert race: validate against the row that won.
            record = self._attendance.get_for_employee_and_date(employee_id, now.work_date)
            if record is None:
                raise StoreUnavailableError("Attendance record could not be created")

        self._admit(strategy, record, now)
        if not self._attendance.set_punch_if_unset(record_id=record.record_id, punch_type=punch_type, clock=now.clock):
            raise already_punched(punch_type)
        return record.with_punch(punch_type, now.clock)

    @staticmethod
    def _admit(strategy: PunchStrategy, record: DailyAttendanceRecord, now: ServerTime) -> None:
        error = strategy.first_violation(record, now.clock)
        if error is not None:
            raise error

    def get_today_record(self, employee_id: int, *, now: ServerTime | None = None) -> Outcome[Optional[DailyAttendanceRecord]]:
        """Today's record, or None when nothing was punched yet."""
        try:
            now = now or self._clock.now()
            record = self._attendance.get_for_employee_and_date(require_int(employee_id, "Employee id"), now.work_date)
        except DomainError as e:
            return Outcome.failure(e)
        return Outcome.success(record)

    def get_presence(
        self,
        employee_id: int,
        *,
        viewer_id: int | None = None,
        current_role: Role | str | None = None,
        now: ServerTime | None = None,
    ) -> Outcome[dict]:
        """Live status of one employee.

        A viewer may always see their own status; anyone else's needs admin or HR.
        """
        try:
            employee_id = require_int(employee_id, "Employee id")
            if viewer_id is not None and require_int(viewer_id, "Viewer id") != employee_id:
                require_supervisor(current_role, "view another employee's presence")
        except DomainError as e:
            return Outcome.failure(e)

        outcome = self.get_today_record(employee_id, now=now)
        if not outcome.ok:
            return Outcome.failure(outcome.error)

        latest = last_punch(outcome.value)
        return Outcome.success(
            {
                "employee_id": employee_id,
                "status": presence_status(outcome.value).value,
                "last_punch": latest[0].value if latest else None,
                "last_punch_at": latest[1] if latest else None,
            }
        )

    def correct_record(
        self,
        *,
        current_role: Role,
        record_id: int,
        changes: Mapping[str, Optional[str]],
    ) -> Outcome[DailyAttendanceRecord]:
        """Administrative override of punch values; blank values clear a punch."""
        try:
            role = require_supervisor(current_role, "correct attendance records")
            record = self._correct(require_int(record_id, "Record id"), changes)
        except DomainError as e:
            logger.info("Correction of record %s refused: %s", record_id, e.kind.value)
            return Outcome.failure(e)

        logger.info("Record %s corrected by %s: %s", record_id, role.value, sorted(changes))
        return Outcome.success(record)

    def _correct(self, record_id: int, changes: Mapping[str, Optional[str]]) -> DailyAttendanceRecord:
        punches: dict[PunchType, Optional[str]] = {}
        for key, raw in changes.items():
            punch_type = require_choice(key, PunchType, "Field")
            value = (raw or "").strip()
            try:
                punches[punch_type] = parse_clock(value) if value else None
            except ValueError:
                raise ValidationError(f"Invalid time for {punch_type.value} (HH:MM or HH:MM:SS)")

        if not punches:
            raise ValidationError("Nothing to update")

        record = self._attendance.get_by_id(record_id)
        if record is None:
            raise NotFoundError("Attendance record not found")

        corrected = record
        for punch_type, value in punches.items():
            corrected = corrected.with_punch(punch_type, value)

        ordered = [corrected.punch(p) for p in PunchType if corrected.punch(p)]
        if ordered != sorted(ordered):
            raise ValidationError(
                "Punches must stay in order: arrival, break, return, departure",
                ErrorKind.SEQUENCE_VIOLATION,
            )

        if not self._attendance.admin_update_punches(record_id=record_id, punches=punches):
            logger.debug("Correction of record %s changed nothing", record_id)
        return corrected
