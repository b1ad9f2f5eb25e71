from __future__ import annotations

import calendar
from datetime import date, datetime, time, timedelta
from typing import Any, Optional

CLOCK_FORMAT = "%H:%M:%S"


def now_local() -> datetime:
    """Current local time.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now()


def format_clock(value: time) -> str:
    """Zero-padded HH:MM:SS, the form used for lexical admission checks."""
    return value.strftime(CLOCK_FORMAT)


def parse_clock(value: str) -> str:
    """Normalize HH:MM or HH:MM:SS into zero-padded HH:MM:SS.

    Raises ValueError on anything else.
    """
    v = (value or "").strip()
    for fmt in (CLOCK_FORMAT, "%H:%M"):
        try:
            return format_clock(datetime.strptime(v, fmt).time())
        except ValueError:
            continue
    raise ValueError(f"Invalid clock value: {value!r}")


def clock_to_seconds(value: str) -> int:
    hours, minutes, seconds = (int(p) for p in value.split(":"))
    return hours * 3600 + minutes * 60 + seconds


def normalize_clock(value: Any) -> Optional[str]:
    """Normalize a stored TIME value into HH:MM:SS.

    mysql-connector can return TIME as:
    - datetime.time
    - datetime.timedelta
    - string (e.g. '08:30:00')
    """

    if value is None:
        return None

    if isinstance(value, time):
        return format_clock(value)

    if isinstance(value, timedelta):
        total_seconds = int(value.total_seconds()) % 86400
        return f"{total_seconds // 3600:02d}:{(total_seconds % 3600) // 60:02d}:{total_seconds % 60:02d}"

    if isinstance(value, str):
        return parse_clock(value)

    raise TypeError(f"Unsupported TIME value type: {type(value)!r}")


def parse_year_month(value: str) -> tuple[int, int]:
    """Parse YYYY-MM into (year, month)."""
    parsed = datetime.strptime(value, "%Y-%m")
    return parsed.year, parsed.month


def month_bounds(year: int, month: int) -> tuple[date, date]:
    last_day = calendar.monthrange(year, month)[1]
    return date(year, month, 1), date(year, month, last_day)
