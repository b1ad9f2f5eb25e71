from __future__ import annotations

from dataclasses import asdict
from flask import Flask, request, session

from ..common.web import login_required, outcome_response
from ..container import Container
from ..core.enums import Role


def register(app: Flask, container: Container) -> None:
    @app.route("/api/reports/monthly", methods=["GET"], endpoint="monthly_report")
    @login_required
    def monthly_report():
        """Monthly stats + daily rows.

        Employees only see their own report; admin/HR may pass ``employee_id``.
        """
        own_id = int(session["employee_id"])
        employee_id = own_id
        if session.get("role") in {Role.ADMIN.value, Role.HR.value}:
            employee_id = request.args.get("employee_id", type=int) or own_id

        month = request.args.get("month") or container.time_source.now().work_date.strftime("%Y-%m")
        outcome = container.payroll_report_service.build_monthly_report(employee_id, month)
        return outcome_response(
            outcome,
            lambda report: {
                "employee_id": report.employee_id,
                "month": report.year_month,
                "stats": report.stats.to_dict(),
                "rows": [asdict(r) for r in report.rows],
            },
        )
