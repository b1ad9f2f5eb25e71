from __future__ import annotations

import math


def format_hours(hours: float) -> str:
    """Render fractional hours as ``{H}h{MM}``, rounded to the nearest minute."""
    total_minutes = max(math.floor(hours * 60 + 0.5), 0)
    return f"{total_minutes // 60}h{total_minutes % 60:02d}"


def format_minutes(minutes: int) -> str:
    return format_hours(minutes / 60)
