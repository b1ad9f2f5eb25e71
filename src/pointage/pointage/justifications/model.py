from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional

from ..core.enums import JustificationStatus, JustificationType


@dataclass(frozen=True)
class JustificationEntry:
    """Review-queue item: one justification of one attendance record."""

    record_id: int
    employee_id: int
    work_date: date
    kind: JustificationType
    text: Optional[str]
    status: JustificationStatus
    late_minutes: int = 0

    def to_dict(self) -> dict:
        return {
            "record_id": self.record_id,
            "employee_id": self.employee_id,
            "work_date": self.work_date.strftime("%Y-%m-%d"),
            "type": self.kind.value,
            "text": self.text or "",
            "status": self.status.value,
            "late_minutes": self.late_minutes,
        }
