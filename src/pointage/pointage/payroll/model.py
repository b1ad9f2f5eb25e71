from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date

from ..attendance.model import AttendanceReportRow


@dataclass(frozen=True)
class MonthlyStats:
    """Monthly attendance figures feeding payroll.

    Hour-like values are already formatted as ``{H}h{MM}``.
    """

    days_present: int
    total_hours: str
    days_absent: int
    justified_absences: int
    total_late_minutes: int
    total_lateness: str
    significant_lateness_count: int
    justified_lateness_count: int
    payable_hours: str
    unjustified_absence_hours: str
    justified_lateness_hours: str
    unjustified_lateness_hours: str

    def to_dict(self) -> dict:
        """Keys consumed by the report screens and export formatters."""
        return {
            "joursPresent": self.days_present,
            "totalHeures": self.total_hours,
            "joursAbsent": self.days_absent,
            "absencesJustifiees": self.justified_absences,
            "totalRetardMinutes": self.total_late_minutes,
            "totalRetard": self.total_lateness,
            "retardsSignificatifs": self.significant_lateness_count,
            "retardsJustifies": self.justified_lateness_count,
            "heuresTheoriques": self.payable_hours,
            "heuresPayables": self.payable_hours,
            "heuresAbsencesNonJustifiees": self.unjustified_absence_hours,
            "retardsJustifiesHeures": self.justified_lateness_hours,
            "retardsNonJustifiesHeures": self.unjustified_lateness_hours,
        }


@dataclass(frozen=True)
class MonthlyReport:
    employee_id: int
    year_month: str
    start: date
    end: date
    stats: MonthlyStats
    rows: list[AttendanceReportRow] = field(default_factory=list)
