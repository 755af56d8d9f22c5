"""Second-denominated unit constants for reltime.

These are the exact scales of the second-based units, plus the `standard`
approximations used when a month-based unit has to be expressed in seconds.
"""

# Exact units (all values in seconds)
SECOND = 1
MINUTE = 60
HOUR = 3600
DAY = 86400
WEEK = 604800

# Approximations of the month-based units (standard method: 30/365 days)
MONTH = 30 * DAY
YEAR = 365 * DAY

# Month-based scales (all values in months)
MONTHS_PER_YEAR = 12
