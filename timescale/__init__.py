from importlib.resources import files

from .errors import DegenerateTimeScale, InvalidUnitLength
from .recurrence import recurrence_rule, rrule_params
from .scale import TimeScale
from .units import TimeUnit
from .util import (
    CENTURY,
    DAY,
    DECADE,
    HOUR,
    MICROSECOND,
    MILLISECOND,
    MINUTE,
    MONTH,
    NANOSECOND,
    QUARTER,
    SECOND,
    WEEK,
    YEAR,
)

# Load documentation files for programmatic access by agents and code-aware tools
_docs_path = files(__package__) / "docs"
docs = {
    "readme": (_docs_path / "README.md").read_text(),
}

__all__ = [
    "TimeUnit",
    "TimeScale",
    "InvalidUnitLength",
    "DegenerateTimeScale",
    "rrule_params",
    "recurrence_rule",
    "NANOSECOND",
    "MICROSECOND",
    "MILLISECOND",
    "SECOND",
    "MINUTE",
    "HOUR",
    "DAY",
    "WEEK",
    "MONTH",
    "QUARTER",
    "YEAR",
    "DECADE",
    "CENTURY",
    "docs",
]
