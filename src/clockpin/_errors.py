"""Exception hierarchy for clockpin.

Every error raised by the package derives from :class:`ClockError`, so
callers can catch the whole family in one place.  Invalid input to the
override operation is also a :class:`TypeError`, which keeps
``except TypeError`` handlers in consumer code working.

Errors are raised synchronously and never recovered internally: a
failed :meth:`~clockpin.Clock.override` leaves the clock untouched.
"""

from __future__ import annotations


class ClockError(Exception):
    """Base class for all clockpin errors."""


class InvalidArgumentError(ClockError, TypeError):
    """An argument has an unsupported type or value.

    Raised by ``override()`` for anything that is neither a number nor
    a :class:`~datetime.datetime`, for non-finite numbers, and by the
    date-time reads for unknown time zone names.
    """


def describe_type(value: object) -> str:
    """Return the name used in error messages for *value*'s type."""
    return type(value).__name__
