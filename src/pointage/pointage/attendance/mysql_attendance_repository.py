from __future__ import annotations

from datetime import date
from typing import Any, Dict, Mapping, Optional, Sequence

import mysql.connector

from ..common.datetime_utils import normalize_clock
from ..core.enums import DayStatus, JustificationStatus, PunchType
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import DailyAttendanceRecord
from .repository import AttendanceRepository

RECORD_COLUMNS = """
    record_id, employee_id, work_date,
    arrival, break_out, break_in, departure,
    late_minutes, status,
    late_justification, late_justification_status,
    absence_justification, absence_justification_status
"""

# Column names are interpolated into SQL; only these are ever allowed.
PUNCH_COLUMNS = {p: p.value for p in PunchType}


def record_from_row(r: Dict[str, Any]) -> DailyAttendanceRecord:
    return DailyAttendanceRecord(
        record_id=int(r["record_id"]),
        employee_id=int(r["employee_id"]),
        work_date=r["work_date"],
        arrival=normalize_clock(r.get("arrival")),
        break_out=normalize_clock(r.get("break_out")),
        break_in=normalize_clock(r.get("break_in")),
        departure=normalize_clock(r.get("departure")),
        late_minutes=max(int(r.get("late_minutes") or 0), 0),
        status=DayStatus(r["status"]),
        late_justification=r.get("late_justification"),
        late_justification_status=JustificationStatus(r.get("late_justification_status") or "none"),
        absence_justification=r.get("absence_justification"),
        absence_justification_status=JustificationStatus(r.get("absence_justification_status") or "none"),
    )


class MySQLAttendanceRepository(AttendanceRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_id(self, record_id: int) -> Optional[DailyAttendanceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"SELECT {RECORD_COLUMNS} FROM attendance_records WHERE record_id=%s",
                (int(record_id),),
            )
            r = fetchone(cur)
            return record_from_row(r) if r else None

    def get_for_employee_and_date(self, employee_id: int, work_date: date) -> Optional[DailyAttendanceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {RECORD_COLUMNS}
                FROM attendance_records
                WHERE employee_id=%s AND work_date=%s
                """,
                (int(employee_id), work_date),
            )
            r = fetchone(cur)
            return record_from_row(r) if r else None

    def create_with_punch(
        self,
        *,
        employee_id: int,
        work_date: date,
        punch_type: PunchType,
        clock: str,
    ) -> Optional[DailyAttendanceRecord]:
        column = PUNCH_COLUMNS[punch_type]
        try:
            with db_cursor(self._conn_factory) as (_, cur):
                cur.execute(
                    f"""
                    INSERT INTO attendance_records(employee_id, work_date, {column}, status)
                    VALUES(%s,%s,%s,%s)
                    """,
                    (int(employee_id), work_date, clock, DayStatus.PRESENT.value),
                )
                # Read back inside the same transaction as the insert.
                cur.execute(
                    f"SELECT {RECORD_COLUMNS} FROM attendance_records WHERE record_id=%s",
                    (int(cur.lastrowid),),
                )
                r = fetchone(cur)
        except mysql.connector.IntegrityError:
            # uq_attendance_employee_day: another request created the row first.
            return None
        return record_from_row(r)

    def set_punch_if_unset(self, *, record_id: int, punch_type: PunchType, clock: str) -> bool:
        column = PUNCH_COLUMNS[punch_type]
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                UPDATE attendance_records
                SET {column}=%s
                WHERE record_id=%s AND {column} IS NULL
                """,
                (clock, int(record_id)),
            )
            return cur.rowcount > 0

    def list_for_employee(self, *, employee_id: int, start_date: date, end_date: date) -> Sequence[DailyAttendanceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {RECORD_COLUMNS}
                FROM attendance_records
                WHERE employee_id=%s AND work_date BETWEEN %s AND %s
                ORDER BY work_date ASC
                """,
                (int(employee_id), start_date, end_date),
            )
            return [record_from_row(r) for r in fetchall(cur)]

    def admin_update_punches(self, *, record_id: int, punches: Mapping[PunchType, Optional[str]]) -> bool:
        if not punches:
            return False

        assignments = ", ".join(f"{PUNCH_COLUMNS[p]}=%s" for p in punches)
        params: list[object] = [punches[p] for p in punches]
        params.append(int(record_id))

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"UPDATE attendance_records SET {assignments} WHERE record_id=%s",
                tuple(params),
            )
            return cur.rowcount > 0
