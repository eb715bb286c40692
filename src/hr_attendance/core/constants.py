"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

# datetime.weekday(): Monday=0 ... Friday=4, Saturday=5
WEEKEND_DAYS = frozenset({4, 5})

DEFAULT_DAILY_HOURS = 7
RAMADAN_DAILY_HOURS = 5
FALLBACK_HOURS_PER_DAY = 7

MINUTES_PER_HOUR = 60
MINUTES_PER_DAY = 24 * 60

HOURS_PRECISION = 2
