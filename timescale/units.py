from enum import Enum

from timescale import util


class TimeUnit(Enum):
    """Named units of time, from nanoseconds up to centuries.

    Each unit has a nominal length in seconds. Sub-second units are held as
    fractional seconds so callers never have to special-case them.
    """

    NANOSECOND = "nanosecond"
    MICROSECOND = "microsecond"
    MILLISECOND = "millisecond"
    SECOND = "second"
    MINUTE = "minute"
    HOUR = "hour"
    DAY = "day"
    WEEK = "week"
    MONTH = "month"
    QUARTER = "quarter"
    YEAR = "year"
    DECADE = "decade"
    CENTURY = "century"

    @property
    def seconds(self) -> int | float:
        """Nominal length of one unit, straight from the lookup table."""
        return _BASE_SECONDS[self]

    def total_duration(self) -> float:
        """Nominal length of one unit in seconds."""
        return float(_BASE_SECONDS[self])


_BASE_SECONDS: dict[TimeUnit, int | float] = {
    TimeUnit.NANOSECOND: util.NANOSECOND,
    TimeUnit.MICROSECOND: util.MICROSECOND,
    TimeUnit.MILLISECOND: util.MILLISECOND,
    TimeUnit.SECOND: util.SECOND,
    TimeUnit.MINUTE: util.MINUTE,
    TimeUnit.HOUR: util.HOUR,
    TimeUnit.DAY: util.DAY,
    TimeUnit.WEEK: util.WEEK,
    TimeUnit.MONTH: util.MONTH,
    TimeUnit.QUARTER: util.QUARTER,
    TimeUnit.YEAR: util.YEAR,
    TimeUnit.DECADE: util.DECADE,
    TimeUnit.CENTURY: util.CENTURY,
}
