from __future__ import annotations

import logging
from typing import Optional

from ..attendance.model import DailyAttendanceRecord
from ..common.validators import require_choice, require_int, require_non_empty, require_supervisor
from ..core.constants import DEFAULT_QUEUE_LIMIT, SIGNIFICANT_LATENESS_MINUTES
from ..core.enums import DayStatus, ErrorKind, JustificationStatus, JustificationType, Role
from ..core.exceptions import DomainError, NotFoundError, ValidationError
from ..core.result import Outcome
from .model import JustificationEntry
from .repository import JustificationRepository

logger = logging.getLogger(__name__)

DECISIONS = (JustificationStatus.APPROVED, JustificationStatus.REJECTED)

QUEUE_STATES = {
    "pending": (JustificationStatus.PENDING,),
    "processed": DECISIONS,
    "all": (JustificationStatus.PENDING,) + DECISIONS,
}


class JustificationService:
    """Employee submits, supervisor decides: none -> pending -> approved | rejected."""

    def __init__(self, justifications: JustificationRepository):
        self._justifications = justifications

    def submit(
        self,
        *,
        employee_id: int,
        record_id: int,
        kind: JustificationType | str,
        text: str,
    ) -> Outcome[DailyAttendanceRecord]:
        try:
            record = self._submit(
                require_int(employee_id, "Employee id"),
                require_int(record_id, "Record id"),
                kind,
                text,
            )
        except DomainError as e:
            logger.info("Justification %s for record %s refused: %s", kind, record_id, e.kind.value)
            return Outcome.failure(e)

        logger.info("Justification %s submitted for record %s", kind, record_id)
        return Outcome.success(record)

    def _submit(self, employee_id: int, record_id: int, kind, text: str) -> DailyAttendanceRecord:
        kind = require_choice(kind, JustificationType, "Justification type")

        record = self._justifications.get_record(record_id=record_id)
        if not record or record.employee_id != employee_id:
            raise NotFoundError("Attendance record not found")

        if kind == JustificationType.ABSENCE and record.status != DayStatus.ABSENT:
            raise ValidationError("Only an absence can be justified as such", ErrorKind.NOT_ELIGIBLE)
        if kind == JustificationType.LATENESS and not (record.is_working_day and record.is_significantly_late):
            raise ValidationError(
                f"Only a lateness above {SIGNIFICANT_LATENESS_MINUTES} minutes needs a justification",
                ErrorKind.NOT_ELIGIBLE,
            )

        existing_text, status = record.justification(kind)
        if existing_text or status != JustificationStatus.NONE:
            raise ValidationError("A justification was already submitted", ErrorKind.ALREADY_SUBMITTED)

        text = require_non_empty(text, "Justification")
        if not self._justifications.submit_if_unset(record_id=record_id, kind=kind, text=text):
            raise ValidationError("A justification was already submitted", ErrorKind.ALREADY_SUBMITTED)

        return record.with_justification(kind, status=JustificationStatus.PENDING, text=text)

    def decide(
        self,
        *,
        current_role: Role | str | None,
        record_id: int,
        kind: JustificationType | str,
        decision: JustificationStatus | str,
    ) -> Outcome[DailyAttendanceRecord]:
        try:
            record, decided = self._decide(current_role, require_int(record_id, "Record id"), kind, decision)
        except DomainError as e:
            logger.info("Decision on record %s refused: %s", record_id, e.kind.value)
            return Outcome.failure(e)

        logger.info("Justification %s of record %s %s", kind, record_id, decided.value)
        return Outcome.success(record)

    def _decide(self, current_role, record_id: int, kind, decision):
        require_supervisor(current_role, "review justifications")
        kind = require_choice(kind, JustificationType, "Justification type")
        decision = require_choice(decision, DECISIONS, "Decision")

        record = self._justifications.get_record(record_id=record_id)
        if not record:
            raise NotFoundError("Attendance record not found")

        _, status = record.justification(kind)
        if status != JustificationStatus.PENDING:
            raise ValidationError("Justification is not awaiting a decision", ErrorKind.NOT_PENDING)

        if not self._justifications.decide_if_pending(record_id=record_id, kind=kind, decision=decision):
            raise ValidationError("Justification is not awaiting a decision", ErrorKind.NOT_PENDING)

        return record.with_justification(kind, status=decision), decision

    def list_justifications(
        self,
        *,
        current_role: Role | str | None,
        state: str = "pending",
        kind: Optional[JustificationType | str] = None,
        limit: int = DEFAULT_QUEUE_LIMIT,
    ) -> Outcome[list[JustificationEntry]]:
        try:
            require_supervisor(current_role, "review justifications")
            statuses = QUEUE_STATES.get((state or "").lower())
            if statuses is None:
                raise ValidationError("State must be one of: pending, processed, all")
            kind = require_choice(kind, JustificationType, "Justification type") if kind else None
            entries = self._justifications.list_entries(statuses=statuses, kind=kind, limit=require_int(limit, "Limit"))
        except DomainError as e:
            return Outcome.failure(e)
        return Outcome.success(list(entries))

