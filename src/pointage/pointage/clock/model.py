from __future__ import annotations

from dataclasses import dataclass
from datetime import date


@dataclass(frozen=True)
class ServerTime:
    """A trusted reading of the server clock: calendar day + HH:MM:SS."""

    work_date: date
    clock: str
