"""Recurrence rules for time scales.

Maps a TimeScale onto the cadence of an RFC 5545 recurrence rule so a
time series can generate its observation timestamps with python-dateutil's
rrule.

Only the occurrences follow the calendar: dateutil steps a monthly rule by
real month lengths and a yearly rule across leap days. The time scale itself
stays nominal, so TimeScale(TimeUnit.MONTH, 1).total_duration() is always
2,629,746 seconds however far apart two monthly occurrences fall.
"""

from datetime import datetime
from typing import Any

from dateutil.rrule import (
    DAILY,
    HOURLY,
    MINUTELY,
    MONTHLY,
    SECONDLY,
    WEEKLY,
    YEARLY,
    rrule,
)

from timescale.scale import TimeScale
from timescale.units import TimeUnit

# Mapping from time units to (dateutil frequency, units per step)
_FREQ_MAP: dict[TimeUnit, tuple[int, int]] = {
    TimeUnit.SECOND: (SECONDLY, 1),
    TimeUnit.MINUTE: (MINUTELY, 1),
    TimeUnit.HOUR: (HOURLY, 1),
    TimeUnit.DAY: (DAILY, 1),
    TimeUnit.WEEK: (WEEKLY, 1),
    TimeUnit.MONTH: (MONTHLY, 1),
    TimeUnit.QUARTER: (MONTHLY, 3),
    TimeUnit.YEAR: (YEARLY, 1),
    TimeUnit.DECADE: (YEARLY, 10),
    TimeUnit.CENTURY: (YEARLY, 100),
}


def rrule_params(scale: TimeScale) -> dict[str, Any]:
    """Return the rrule ``freq`` and ``interval`` keywords for a time scale.

    Raises:
        ValueError: If the time scale is finer than one second
    """
    if scale.time_unit not in _FREQ_MAP:
        supported = ", ".join(unit.name for unit in _FREQ_MAP)
        raise ValueError(
            f"No recurrence frequency for {scale.time_unit.name}.\n"
            f"Recurrence rules step in whole seconds at the finest.\n"
            f"Supported units: {supported}"
        )
    freq, multiple = _FREQ_MAP[scale.time_unit]
    return {"freq": freq, "interval": multiple * scale.unit_length}


def recurrence_rule(
    scale: TimeScale,
    dtstart: datetime,
    *,
    count: int | None = None,
    until: datetime | None = None,
) -> rrule:
    """
    Build a recurrence rule stepping by `scale` from `dtstart`.

    Args:
        scale: Step between consecutive occurrences
        dtstart: First occurrence
        count: Stop after this many occurrences (default: unbounded)
        until: Stop after this datetime, inclusive (default: unbounded).
            Mutually exclusive with count

    Returns:
        A dateutil rrule yielding datetimes

    Raises:
        TypeError: If dtstart is not a datetime
        ValueError: If both count and until are given, or the scale is finer
            than one second

    Example:
        >>> from datetime import datetime
        >>> rule = recurrence_rule(
        ...     TimeScale(TimeUnit.QUARTER, 1), datetime(2025, 1, 1), count=4
        ... )
        >>> [dt.month for dt in rule]
        [1, 4, 7, 10]
    """
    if not isinstance(dtstart, datetime):
        raise TypeError(
            f"recurrence_rule() dtstart must be a datetime.\n"
            f"Got {type(dtstart).__name__!r}: {dtstart!r}\n"
            f"Example: recurrence_rule(scale, datetime(2025, 1, 1))"
        )
    if count is not None and until is not None:
        raise ValueError(
            f"recurrence_rule() takes count or until, not both.\n"
            f"Got count={count!r}, until={until!r}\n"
            f"Example: recurrence_rule(scale, datetime(2025, 1, 1), count=12)"
        )
    return rrule(dtstart=dtstart, count=count, until=until, **rrule_params(scale))
