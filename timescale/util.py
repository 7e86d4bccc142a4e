"""Utility constants for timescale.

Duration constants represent nominal lengths in seconds.
Calendar units use the estimated (average Gregorian) lengths, so twelve
months add up to exactly one year.
"""

# Sub-second units (fractional seconds)
NANOSECOND = 1e-9
MICROSECOND = 1e-6
MILLISECOND = 1e-3

# Clock units (all values in seconds)
SECOND = 1
MINUTE = 60
HOUR = 3600
DAY = 86400
WEEK = 604800

# Calendar units: 365.2425 days per year
YEAR = 31556952
MONTH = YEAR // 12
QUARTER = 3 * MONTH
DECADE = 10 * YEAR
CENTURY = 100 * YEAR
