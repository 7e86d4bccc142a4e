"""Exceptions raised by timescale."""


class InvalidUnitLength(ValueError):
    """Raised when a TimeScale is built with a unit length that is not a positive int."""


class DegenerateTimeScale(ZeroDivisionError):
    """Raised when a frequency is requested against a zero-length TimeScale."""
