from __future__ import annotations

from datetime import date

from src.pointage.pointage.attendance.model import DailyAttendanceRecord
from src.pointage.pointage.core.enums import DayStatus, ErrorKind, JustificationStatus, JustificationType, Role
from src.pointage.pointage.justifications.model import JustificationEntry
from src.pointage.pointage.justifications.service import JustificationService


class FakeJustificationsRepo:
    def __init__(self, records):
        self._records = {r.record_id: r for r in records}
        self.last_query = None

    def get_record(self, *, record_id):
        return self._records.get(int(record_id))

    def submit_if_unset(self, *, record_id, kind, text):
        record = self._records[record_id]
        _, status = record.justification(kind)
        if status != JustificationStatus.NONE:
            return False
        self._records[record_id] = record.with_justification(kind, status=JustificationStatus.PENDING, text=text)
        return True

    def decide_if_pending(self, *, record_id, kind, decision):
        record = self._records[record_id]
        _, status = record.justification(kind)
        if status != JustificationStatus.PENDING:
            return False
        self._records[record_id] = record.with_justification(kind, status=decision)
        return True

    def list_entries(self, *, statuses, kind=None, limit=500):
        self.last_query = {"statuses": tuple(statuses), "kind": kind, "limit": limit}
        entries = []
        for r in self._records.values():
            for k in JustificationType:
                text, status = r.justification(k)
                if status in statuses and (kind is None or k == kind):
                    entries.append(
                        JustificationEntry(
                            record_id=r.record_id,
                            employee_id=r.employee_id,
                            work_date=r.work_date,
                            kind=k,
                            text=text,
                            status=status,
                            late_minutes=r.late_minutes,
                        )
                    )
        return sorted(entries, key=lambda e: e.work_date, reverse=True)[:limit]


class RacingJustificationsRepo(FakeJustificationsRepo):
    """Another request decided between our read and our write."""

    def decide_if_pending(self, *, record_id, kind, decision):
        return False


def _late(record_id=1, employee_id=7, late_minutes=25, **kwargs):
    return DailyAttendanceRecord(
        record_id=record_id,
        employee_id=employee_id,
        work_date=date(2026, 3, record_id),
        arrival="09:25:00",
        late_minutes=late_minutes,
        **kwargs,
    )


def _absent(record_id=2, employee_id=7, **kwargs):
    return DailyAttendanceRecord(
        record_id=record_id,
        employee_id=employee_id,
        work_date=date(2026, 3, record_id),
        status=DayStatus.ABSENT,
        **kwargs,
    )


def test_submit_lateness_sets_pending():
    repo = FakeJustificationsRepo([_late()])
    svc = JustificationService(repo)

    outcome = svc.submit(employee_id=7, record_id=1, kind="lateness", text="  Train delayed  ")

    assert outcome.ok
    assert outcome.value.late_justification == "Train delayed"
    assert repo.get_record(record_id=1).late_justification_status == JustificationStatus.PENDING


def test_submit_absence_on_absent_day():
    repo = FakeJustificationsRepo([_absent()])
    svc = JustificationService(repo)

    outcome = svc.submit(employee_id=7, record_id=2, kind=JustificationType.ABSENCE, text="Sick leave")

    assert outcome.ok
    assert repo.get_record(record_id=2).absence_justification_status == JustificationStatus.PENDING


def test_small_lateness_is_not_eligible():
    svc = JustificationService(FakeJustificationsRepo([_late(late_minutes=15)]))

    outcome = svc.submit(employee_id=7, record_id=1, kind="lateness", text="Traffic")

    assert outcome.error.kind == ErrorKind.NOT_ELIGIBLE


def test_lateness_on_holiday_is_not_eligible():
    svc = JustificationService(FakeJustificationsRepo([_late(status=DayStatus.HOLIDAY)]))

    outcome = svc.submit(employee_id=7, record_id=1, kind="lateness", text="Traffic")

    assert outcome.error.kind == ErrorKind.NOT_ELIGIBLE


def test_absence_on_present_day_is_not_eligible():
    svc = JustificationService(FakeJustificationsRepo([_late()]))

    outcome = svc.submit(employee_id=7, record_id=1, kind="absence", text="Sick")

    assert outcome.error.kind == ErrorKind.NOT_ELIGIBLE


def test_second_submission_is_already_submitted():
    repo = FakeJustificationsRepo([_late()])
    svc = JustificationService(repo)
    svc.submit(employee_id=7, record_id=1, kind="lateness", text="First")

    outcome = svc.submit(employee_id=7, record_id=1, kind="lateness", text="Second")

    assert outcome.error.kind == ErrorKind.ALREADY_SUBMITTED
    assert repo.get_record(record_id=1).late_justification == "First"


def test_blank_text_is_invalid_input():
    svc = JustificationService(FakeJustificationsRepo([_late()]))

    outcome = svc.submit(employee_id=7, record_id=1, kind="lateness", text="   ")

    assert outcome.error.kind == ErrorKind.INVALID_INPUT


def test_other_employees_record_is_not_found():
    svc = JustificationService(FakeJustificationsRepo([_late(employee_id=8)]))

    outcome = svc.submit(employee_id=7, record_id=1, kind="lateness", text="Traffic")

    assert outcome.error.kind == ErrorKind.NOT_FOUND


def test_employee_cannot_decide():
    repo = FakeJustificationsRepo([_late(late_justification_status=JustificationStatus.PENDING)])
    svc = JustificationService(repo)

    outcome = svc.decide(current_role=Role.EMPLOYEE, record_id=1, kind="lateness", decision="approved")

    assert outcome.error.kind == ErrorKind.NOT_AUTHORIZED
    assert repo.get_record(record_id=1).late_justification_status == JustificationStatus.PENDING


def test_missing_role_cannot_decide():
    svc = JustificationService(FakeJustificationsRepo([]))

    outcome = svc.decide(current_role=None, record_id=1, kind="lateness", decision="approved")

    assert outcome.error.kind == ErrorKind.NOT_AUTHORIZED


def test_hr_approves_pending_justification():
    repo = FakeJustificationsRepo([_absent(absence_justification="Sick", absence_justification_status=JustificationStatus.PENDING)])
    svc = JustificationService(repo)

    outcome = svc.decide(current_role="hr", record_id=2, kind="absence", decision="approved")

    assert outcome.ok
    assert outcome.value.absence_justification_status == JustificationStatus.APPROVED
    assert repo.get_record(record_id=2).absence_justification_status == JustificationStatus.APPROVED


def test_decision_must_be_approved_or_rejected():
    repo = FakeJustificationsRepo([_late(late_justification_status=JustificationStatus.PENDING)])
    svc = JustificationService(repo)

    outcome = svc.decide(current_role=Role.ADMIN, record_id=1, kind="lateness", decision="pending")

    assert outcome.error.kind == ErrorKind.INVALID_INPUT


def test_decide_on_non_pending_is_not_pending():
    repo = FakeJustificationsRepo([_late(late_justification_status=JustificationStatus.REJECTED)])
    svc = JustificationService(repo)

    outcome = svc.decide(current_role=Role.ADMIN, record_id=1, kind="lateness", decision="approved")

    assert outcome.error.kind == ErrorKind.NOT_PENDING
    assert repo.get_record(record_id=1).late_justification_status == JustificationStatus.REJECTED


def test_decide_unknown_record_is_not_found():
    svc = JustificationService(FakeJustificationsRepo([]))

    outcome = svc.decide(current_role=Role.ADMIN, record_id=9, kind="lateness", decision="approved")

    assert outcome.error.kind == ErrorKind.NOT_FOUND


def test_concurrent_decision_is_not_pending():
    repo = RacingJustificationsRepo([_late(late_justification_status=JustificationStatus.PENDING)])
    svc = JustificationService(repo)

    outcome = svc.decide(current_role=Role.ADMIN, record_id=1, kind="lateness", decision="rejected")

    assert outcome.error.kind == ErrorKind.NOT_PENDING


def test_review_queue_by_state_and_type():
    repo = FakeJustificationsRepo(
        [
            _late(record_id=1, late_justification="Bus", late_justification_status=JustificationStatus.PENDING),
            _absent(record_id=2, absence_justification="Sick", absence_justification_status=JustificationStatus.APPROVED),
            _late(record_id=3, late_justification="Rain", late_justification_status=JustificationStatus.REJECTED),
        ]
    )
    svc = JustificationService(repo)

    pending = svc.list_justifications(current_role=Role.HR).value
    processed = svc.list_justifications(current_role=Role.HR, state="processed").value
    late_only = svc.list_justifications(current_role=Role.HR, state="all", kind="lateness").value

    assert [e.record_id for e in pending] == [1]
    assert [e.record_id for e in processed] == [3, 2]
    assert [e.record_id for e in late_only] == [3, 1]
    assert late_only[0].to_dict()["type"] == "lateness"


def test_review_queue_rejects_unknown_state():
    svc = JustificationService(FakeJustificationsRepo([]))

    outcome = svc.list_justifications(current_role=Role.ADMIN, state="archived")

    assert outcome.error.kind == ErrorKind.INVALID_INPUT


def test_review_queue_is_supervisor_only():
    svc = JustificationService(FakeJustificationsRepo([]))

    outcome = svc.list_justifications(current_role="employee")

    assert outcome.error.kind == ErrorKind.NOT_AUTHORIZED


def test_non_numeric_record_id_is_invalid_input():
    svc = JustificationService(FakeJustificationsRepo([_late()]))

    submitted = svc.submit(employee_id=7, record_id="abc", kind="lateness", text="Traffic")
    decided = svc.decide(current_role=Role.ADMIN, record_id=None, kind="lateness", decision="approved")

    assert submitted.error.kind == ErrorKind.INVALID_INPUT
    assert decided.error.kind == ErrorKind.INVALID_INPUT
