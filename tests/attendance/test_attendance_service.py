from __future__ import annotations

from dataclasses import replace
from datetime import date

from src.pointage.pointage.attendance.model import DailyAttendanceRecord
from src.pointage.pointage.attendance.service import AttendanceService
from src.pointage.pointage.clock.model import ServerTime
from src.pointage.pointage.core.enums import ErrorKind, PresenceStatus, PunchType, Role
from src.pointage.pointage.core.exceptions import StoreUnavailableError

TODAY = date(2026, 3, 2)


class FakeAttendanceRepo:
    def __init__(self, records=None):
        self._next_id = 1
        self._records: dict[int, DailyAttendanceRecord] = {}
        self.writes = 0
        for r in records or []:
            self._store(r)

    def _store(self, record):
        if record.record_id is None:
            record = replace(record, record_id=self._next_id)
        self._next_id = max(self._next_id, record.record_id) + 1
        self._records[record.record_id] = record
        return record

    def get_by_id(self, record_id):
        return self._records.get(int(record_id))

    def get_for_employee_and_date(self, employee_id, work_date):
        for r in self._records.values():
            if r.employee_id == employee_id and r.work_date == work_date:
                return r
        return None

    def create_with_punch(self, *, employee_id, work_date, punch_type, clock):
        if self.get_for_employee_and_date(employee_id, work_date):
            return None
        self.writes += 1
        return self._store(DailyAttendanceRecord.blank(employee_id, work_date).with_punch(punch_type, clock))

    def set_punch_if_unset(self, *, record_id, punch_type, clock):
        record = self._records[record_id]
        if record.punch(punch_type):
            return False
        self.writes += 1
        self._records[record_id] = record.with_punch(punch_type, clock)
        return True

    def list_for_employee(self, *, employee_id, start_date, end_date):
        return [
            r for r in self._records.values() if r.employee_id == employee_id and start_date <= r.work_date <= end_date
        ]

    def admin_update_punches(self, *, record_id, punches):
        record = self._records[record_id]
        for punch_type, value in punches.items():
            record = record.with_punch(punch_type, value)
        self._records[record_id] = record
        return True


class RacingAttendanceRepo(FakeAttendanceRepo):
    """A concurrent request inserts the day's record between our read and our insert."""

    def __init__(self, winner):
        super().__init__()
        self._winner = winner

    def create_with_punch(self, *, employee_id, work_date, punch_type, clock):
        self._store(self._winner)
        return None


class StaleAttendanceRepo(FakeAttendanceRepo):
    """The conditional write finds the column already filled."""

    def set_punch_if_unset(self, *, record_id, punch_type, clock):
        return False


class FailingAttendanceRepo(FakeAttendanceRepo):
    def get_for_employee_and_date(self, employee_id, work_date):
        raise StoreUnavailableError("Attendance store is unavailable")


class FixedTimeSource:
    def __init__(self, clock, work_date=TODAY):
        self.reading = ServerTime(work_date=work_date, clock=clock)

    def now(self):
        return self.reading


def _at(clock):
    return ServerTime(work_date=TODAY, clock=clock)


def test_first_arrival_creates_present_record():
    repo = FakeAttendanceRepo()
    svc = AttendanceService(repo)

    outcome = svc.submit_punch(7, "arrival", now=_at("08:05:00"))

    assert outcome.ok
    stored = repo.get_for_employee_and_date(7, TODAY)
    assert stored.arrival == "08:05:00"
    assert stored.late_minutes == 0
    assert stored.status.value == "present"


def test_punch_time_comes_from_time_source():
    repo = FakeAttendanceRepo()
    svc = AttendanceService(repo, time_source=FixedTimeSource("07:45:12"))

    outcome = svc.submit_punch(7, PunchType.ARRIVAL)

    assert outcome.ok
    assert outcome.value.arrival == "07:45:12"


def test_arrival_too_early_persists_nothing():
    repo = FakeAttendanceRepo()
    svc = AttendanceService(repo)

    outcome = svc.submit_punch(7, "arrival", now=_at("05:59:59"))

    assert not outcome.ok
    assert outcome.error.kind == ErrorKind.TOO_EARLY
    assert repo.get_for_employee_and_date(7, TODAY) is None
    assert repo.writes == 0


def test_second_arrival_keeps_first_value():
    repo = FakeAttendanceRepo()
    svc = AttendanceService(repo)
    svc.submit_punch(7, "arrival", now=_at("08:00:00"))

    outcome = svc.submit_punch(7, "arrival", now=_at("09:00:00"))

    assert outcome.error.kind == ErrorKind.ALREADY_PUNCHED
    assert repo.get_for_employee_and_date(7, TODAY).arrival == "08:00:00"


def test_full_day_sequence():
    repo = FakeAttendanceRepo()
    svc = AttendanceService(repo)

    for punch_type, clock in [
        ("arrival", "09:00:00"),
        ("break_out", "12:30:00"),
        ("break_in", "13:30:00"),
        ("departure", "18:00:00"),
    ]:
        assert svc.submit_punch(7, punch_type, now=_at(clock)).ok

    stored = repo.get_for_employee_and_date(7, TODAY)
    assert (stored.arrival, stored.break_out, stored.break_in, stored.departure) == (
        "09:00:00",
        "12:30:00",
        "13:30:00",
        "18:00:00",
    )


def test_break_out_without_record_is_missing_prior_punch():
    repo = FakeAttendanceRepo()
    svc = AttendanceService(repo)

    outcome = svc.submit_punch(7, "break_out", now=_at("13:00:00"))

    assert outcome.error.kind == ErrorKind.MISSING_PRIOR_PUNCH
    assert repo.writes == 0


def test_unknown_punch_type_is_invalid_input():
    svc = AttendanceService(FakeAttendanceRepo())

    outcome = svc.submit_punch(7, "lunch", now=_at("13:00:00"))

    assert outcome.error.kind == ErrorKind.INVALID_INPUT


def test_lost_creation_race_revalidates_against_winner():
    winner = DailyAttendanceRecord(record_id=40, employee_id=7, work_date=TODAY, arrival="08:00:00")
    svc = AttendanceService(RacingAttendanceRepo(winner))

    outcome = svc.submit_punch(7, "arrival", now=_at("08:00:01"))

    assert outcome.error.kind == ErrorKind.ALREADY_PUNCHED


def test_conditional_write_miss_reports_already_punched():
    record = DailyAttendanceRecord(record_id=3, employee_id=7, work_date=TODAY, arrival="08:00:00")
    svc = AttendanceService(StaleAttendanceRepo([record]))

    outcome = svc.submit_punch(7, "departure", now=_at("18:00:00"))

    assert outcome.error.kind == ErrorKind.ALREADY_PUNCHED


def test_store_failure_is_returned_as_outcome():
    svc = AttendanceService(FailingAttendanceRepo())

    outcome = svc.submit_punch(7, "arrival", now=_at("08:00:00"))

    assert outcome.error.kind == ErrorKind.STORE_UNAVAILABLE


def test_presence_follows_punches():
    repo = FakeAttendanceRepo()
    svc = AttendanceService(repo, time_source=FixedTimeSource("12:40:00"))

    assert svc.get_presence(7).value["status"] == PresenceStatus.NOT_ARRIVED.value

    svc.submit_punch(7, "arrival", now=_at("08:00:00"))
    assert svc.get_presence(7).value["status"] == PresenceStatus.WORKING.value

    svc.submit_punch(7, "break_out", now=_at("12:35:00"))
    presence = svc.get_presence(7).value
    assert presence["status"] == PresenceStatus.ON_BREAK.value
    assert presence["last_punch"] == "break_out"
    assert presence["last_punch_at"] == "12:35:00"


def test_non_numeric_employee_id_is_invalid_input():
    svc = AttendanceService(FakeAttendanceRepo())

    outcome = svc.submit_punch("abc", "arrival", now=_at("08:00:00"))

    assert outcome.error.kind == ErrorKind.INVALID_INPUT


def test_presence_of_another_employee_needs_supervisor():
    repo = FakeAttendanceRepo()
    svc = AttendanceService(repo, time_source=FixedTimeSource("10:00:00"))
    svc.submit_punch(8, "arrival", now=_at("08:00:00"))

    refused = svc.get_presence(8, viewer_id=7, current_role="employee")
    own = svc.get_presence(7, viewer_id=7, current_role="employee")
    as_hr = svc.get_presence(8, viewer_id=1, current_role=Role.HR)

    assert refused.error.kind == ErrorKind.NOT_AUTHORIZED
    assert own.value["status"] == PresenceStatus.NOT_ARRIVED.value
    assert as_hr.value["status"] == PresenceStatus.WORKING.value


def test_correct_record_requires_supervisor():
    record = DailyAttendanceRecord(record_id=3, employee_id=7, work_date=TODAY, arrival="08:00:00")
    svc = AttendanceService(FakeAttendanceRepo([record]))

    outcome = svc.correct_record(current_role=Role.EMPLOYEE, record_id=3, changes={"arrival": "07:00"})

    assert outcome.error.kind == ErrorKind.NOT_AUTHORIZED


def test_correct_record_sets_and_clears_punches():
    record = DailyAttendanceRecord(
        record_id=3, employee_id=7, work_date=TODAY, arrival="08:00:00", break_out="12:40:00"
    )
    repo = FakeAttendanceRepo([record])
    svc = AttendanceService(repo)

    outcome = svc.correct_record(
        current_role="hr",
        record_id=3,
        changes={"arrival": "07:55", "break_out": "", "departure": "17:45:00"},
    )

    assert outcome.ok
    stored = repo.get_by_id(3)
    assert stored.arrival == "07:55:00"
    assert stored.break_out is None
    assert stored.departure == "17:45:00"


def test_correct_record_keeps_punch_order():
    record = DailyAttendanceRecord(record_id=3, employee_id=7, work_date=TODAY, arrival="08:00:00")
    repo = FakeAttendanceRepo([record])
    svc = AttendanceService(repo)

    outcome = svc.correct_record(current_role=Role.ADMIN, record_id=3, changes={"departure": "07:00"})

    assert outcome.error.kind == ErrorKind.SEQUENCE_VIOLATION
    assert repo.get_by_id(3).departure is None


def test_correct_record_rejects_bad_clock():
    record = DailyAttendanceRecord(record_id=3, employee_id=7, work_date=TODAY, arrival="08:00:00")
    svc = AttendanceService(FakeAttendanceRepo([record]))

    outcome = svc.correct_record(current_role=Role.ADMIN, record_id=3, changes={"arrival": "8h"})

    assert outcome.error.kind == ErrorKind.INVALID_INPUT
