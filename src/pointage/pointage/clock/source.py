from __future__ import annotations

from typing import Protocol

from ..common.datetime_utils import format_clock, now_local
from .model import ServerTime


class TimeSource(Protocol):
    def now(self) -> ServerTime:
        raise NotImplementedError


class SystemTimeSource:
    """Reads the application server's local clock."""

    def now(self) -> ServerTime:
        current = now_local()
        return ServerTime(work_date=current.date(), clock=format_clock(current.time()))
