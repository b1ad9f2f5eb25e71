from __future__ import annotations

from dataclasses import dataclass

from .attendance.factory import PunchStrategyFactory
from .attendance.mysql_attendance_repository import MySQLAttendanceRepository
from .attendance.service import AttendanceService
from .clock.mysql_time_source import MySQLTimeSource
from .clock.source import SystemTimeSource, TimeSource
from .database.connection import DBConfig, DatabaseConnection
from .justifications.mysql_justification_repository import MySQLJustificationRepository
from .justifications.service import JustificationService
from .payroll.service import PayrollReportService


@dataclass(frozen=True)
class Container:
    conn: DatabaseConnection
    time_source: TimeSource

    attendance_repo: MySQLAttendanceRepository
    justifications_repo: MySQLJustificationRepository

    attendance_service: AttendanceService
    justification_service: JustificationService
    payroll_report_service: PayrollReportService


def build_time_source(kind: str, conn: DatabaseConnection) -> TimeSource:
    if kind == "database":
        return MySQLTimeSource(conn)
    if kind == "system":
        return SystemTimeSource()
    raise ValueError(f"Unknown TIME_SOURCE: {kind!r} (expected 'system' or 'database')")


def build_container(*, db_config: dict, time_source: str = "system") -> Container:
    conn = DatabaseConnection.get_instance(DBConfig.from_dict(db_config))
    clock = build_time_source(time_source, conn)

    attendance_repo = MySQLAttendanceRepository(conn)
    justifications_repo = MySQLJustificationRepository(conn)

    attendance_service = AttendanceService(
        attendance_repo,
        time_source=clock,
        strategy_factory=PunchStrategyFactory(),
    )
    justification_service = JustificationService(justifications_repo)
    payroll_report_service = PayrollReportService(attendance_repo)

    return Container(
        conn=conn,
        time_source=clock,
        attendance_repo=attendance_repo,
        justifications_repo=justifications_repo,
        attendance_service=attendance_service,
        justification_service=justification_service,
        payroll_report_service=payroll_report_service,
    )
