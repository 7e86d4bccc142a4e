from dataclasses import dataclass
from datetime import timedelta

from timescale.errors import DegenerateTimeScale, InvalidUnitLength
from timescale.units import TimeUnit


@dataclass(frozen=True)
class TimeScale:
    """A unit of time together with an integer unit length.

    Lets callers describe periods such as "2 weeks" or "6 months" that a
    TimeUnit alone cannot express. Instances are immutable and compare by
    value, so they are safe to share and to use as dict keys.

    Example:
        >>> quarter = TimeScale(TimeUnit.MONTH, 3)
        >>> quarter.frequency_per(TimeScale.one_year())
        4.0
    """

    time_unit: TimeUnit
    unit_length: int

    def __post_init__(self) -> None:
        if not isinstance(self.time_unit, TimeUnit):
            raise TypeError(
                f"TimeScale time_unit must be a TimeUnit.\n"
                f"Got {type(self.time_unit).__name__!r}: {self.time_unit!r}\n"
                f"Example: TimeScale(TimeUnit.WEEK, 2)"
            )
        # bool is an int subclass but never a meaningful length
        if isinstance(self.unit_length, bool) or not isinstance(self.unit_length, int):
            raise InvalidUnitLength(
                f"TimeScale unit_length must be an int, "
                f"got {type(self.unit_length).__name__!r}: {self.unit_length!r}"
            )
        if self.unit_length < 1:
            raise InvalidUnitLength(
                f"TimeScale unit_length must be >= 1, got {self.unit_length}.\n"
                f"Hint: express longer periods with a larger unit length, e.g.\n"
                f"  TimeScale(TimeUnit.MONTH, 6)  # half a year"
            )

    @classmethod
    def one_year(cls) -> "TimeScale":
        """Return a new TimeScale spanning exactly one year."""
        return cls(TimeUnit.YEAR, 1)

    def total_duration(self) -> float:
        """Total length of this time scale in seconds.

        Raises:
            OverflowError: If the length is too large to represent as a float
                (unit_length is an unbounded int)
        """
        return self.time_unit.total_duration() * self.unit_length

    def frequency_per(self, other: "TimeScale") -> float:
        """Return how many times this time scale occurs in `other`.

        A month occurs 12 times per year, so
        ``TimeScale(TimeUnit.MONTH, 1).frequency_per(TimeScale.one_year())``
        is 12.0. The result is not rounded; callers usually truncate it.

        Raises:
            TypeError: If `other` is not a TimeScale
            DegenerateTimeScale: If this time scale has zero length
        """
        if not isinstance(other, TimeScale):
            raise TypeError(
                f"frequency_per() expects a TimeScale, "
                f"got {type(other).__name__!r}: {other!r}"
            )
        duration = self.total_duration()
        if duration == 0:
            raise DegenerateTimeScale(
                f"Cannot compute frequency per {other!r}: {self!r} has zero duration"
            )
        return other.total_duration() / duration

    def to_timedelta(self) -> timedelta:
        """Nominal length as a timedelta (sub-microsecond values are rounded).

        Raises:
            OverflowError: If the length exceeds timedelta.max (about 2.7 million
                years)
        """
        seconds = self.total_duration()
        try:
            return timedelta(seconds=seconds)
        except OverflowError as exc:
            raise OverflowError(
                f"{self!r} lasts {seconds} seconds, longer than a timedelta can "
                f"hold ({timedelta.max}, about 2.7 million years).\n"
                f"Hint: use total_duration() for the length in seconds"
            ) from exc
