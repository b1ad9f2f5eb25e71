from __future__ import annotations

from typing import Optional, Sequence

from ..attendance.model import DailyAttendanceRecord
from ..attendance.mysql_attendance_repository import RECORD_COLUMNS, record_from_row
from ..core.enums import JustificationStatus, JustificationType
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import JustificationEntry
from .repository import JustificationRepository

# (text column, status column) per kind; interpolated into SQL, never user input.
COLUMNS = {
    JustificationType.LATENESS: ("late_justification", "late_justification_status"),
    JustificationType.ABSENCE: ("absence_justification", "absence_justification_status"),
}


class MySQLJustificationRepository(JustificationRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_record(self, *, record_id: int) -> Optional[DailyAttendanceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"SELECT {RECORD_COLUMNS} FROM attendance_records WHERE record_id=%s",
                (int(record_id),),
            )
            r = fetchone(cur)
            return record_from_row(r) if r else None

    def submit_if_unset(self, *, record_id: int, kind: JustificationType, text: str) -> bool:
        text_col, status_col = COLUMNS[kind]
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                UPDATE attendance_records
                SET {text_col}=%s, {status_col}=%s
                WHERE record_id=%s AND {status_col}=%s AND {text_col} IS NULL
                """,
                (
                    text,
                    JustificationStatus.PENDING.value,
                    int(record_id),
                    JustificationStatus.NONE.value,
                ),
            )
            return cur.rowcount > 0

    def decide_if_pending(self, *, record_id: int, kind: JustificationType, decision: JustificationStatus) -> bool:
        _, status_col = COLUMNS[kind]
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                UPDATE attendance_records
                SET {status_col}=%s
                WHERE record_id=%s AND {status_col}=%s
                """,
                (decision.value, int(record_id), JustificationStatus.PENDING.value),
            )
            return cur.rowcount > 0

    def list_entries(
        self,
        *,
        statuses: Sequence[JustificationStatus],
        kind: Optional[JustificationType] = None,
        limit: int = 500,
    ) -> Sequence[JustificationEntry]:
        if not statuses:
            return []

        kinds = [kind] if kind else list(JustificationType)
        placeholders = ",".join(["%s"] * len(statuses))
        out: list[JustificationEntry] = []

        with db_cursor(self._conn_factory) as (_, cur):
            for k in kinds:
                text_col, status_col = COLUMNS[k]
                cur.execute(
                    f"""
                    SELECT record_id, employee_id, work_date, late_minutes,
                           {text_col} AS text, {status_col} AS status
                    FROM attendance_records
                    WHERE {text_col} IS NOT NULL AND {status_col} IN ({placeholders})
                    ORDER BY work_date DESC
                    LIMIT %s
                    """,
                    tuple([s.value for s in statuses] + [int(limit)]),
                )
                for r in fetchall(cur):
                    out.append(
                        JustificationEntry(
                            record_id=int(r["record_id"]),
                            employee_id=int(r["employee_id"]),
                            work_date=r["work_date"],
                            kind=k,
                            text=r.get("text"),
                            status=JustificationStatus(r["status"]),
                            late_minutes=int(r.get("late_minutes") or 0),
                        )
                    )

        out.sort(key=lambda e: (e.work_date, e.record_id), reverse=True)
        return out[: int(limit)]
