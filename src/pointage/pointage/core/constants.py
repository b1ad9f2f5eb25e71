"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

# Admission windows, compared lexically on zero-padded HH:MM:SS strings.
ARRIVAL_OPENS_AT = "06:00:00"
BREAK_OUT_OPENS_AT = "12:30:00"
DEPARTURE_OPENS_AT = "17:30:00"

SIGNIFICANT_LATENESS_MINUTES = 15
LATENESS_CREDIT_MINUTES = 15

STANDARD_DAY_HOURS = 8
UNLOGGED_BREAK_SECONDS = 3600

DEFAULT_QUEUE_LIMIT = 500
