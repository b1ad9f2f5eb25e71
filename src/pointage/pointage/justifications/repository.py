from __future__ import annotations

from typing import Optional, Protocol, Sequence

from ..attendance.model import DailyAttendanceRecord
from ..core.enums import JustificationStatus, JustificationType
from .model import JustificationEntry


class JustificationRepository(Protocol):
    def get_record(self, *, record_id: int) -> Optional[DailyAttendanceRecord]:
        raise NotImplementedError

    def submit_if_unset(self, *, record_id: int, kind: JustificationType, text: str) -> bool:
        """Store text + pending only while no justification of that kind exists."""

        raise NotImplementedError

    def decide_if_pending(self, *, record_id: int, kind: JustificationType, decision: JustificationStatus) -> bool:
        raise NotImplementedError

    def list_entries(
        self,
        *,
        statuses: Sequence[JustificationStatus],
        kind: Optional[JustificationType] = None,
        limit: int = 500,
    ) -> Sequence[JustificationEntry]:
        """Return review-queue rows, newest day first."""

        raise NotImplementedError
