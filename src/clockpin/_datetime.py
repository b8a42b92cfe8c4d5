"""Structured date-time values built from UNIX timestamps.

Both read variants of :class:`~clockpin.Clock` go through
:func:`from_timestamp`: the immutable one returns the aware
:class:`~datetime.datetime` directly, the mutable one wraps it in a
:class:`MutableDateTime`.

Conversions are done against an aware epoch with
:class:`~datetime.timedelta` arithmetic rather than
``datetime.fromtimestamp`` so that negative timestamps behave the same
on every platform.  ``timedelta`` rounds float seconds to the nearest
microsecond.
"""

from __future__ import annotations

import functools
import math
from datetime import UTC, datetime, timedelta, tzinfo
from typing import Any

from clockpin._errors import InvalidArgumentError
from clockpin._timezone import TimezoneLike, load_timezone, timezone_name

EPOCH = datetime(1970, 1, 1, tzinfo=UTC)

DEFAULT_FORMAT = "%Y-%m-%d %H:%M:%S.%f"


def from_timestamp(timestamp: int | float, tz: tzinfo) -> datetime:
    """Build an aware datetime for *timestamp* expressed in *tz*."""
    return (EPOCH + timedelta(seconds=timestamp)).astimezone(tz)


def to_timestamp(value: datetime) -> float:
    """Return the UNIX timestamp of an aware datetime, microseconds included."""
    delta = value - EPOCH
    return (delta.days * 86400 + delta.seconds) + delta.microseconds / 1e6


# Kept one day inside the datetime range so that conversion to any UTC
# offset still fits.
MIN_TIMESTAMP = int(to_timestamp(datetime.min.replace(tzinfo=UTC))) + 86400
MAX_TIMESTAMP = math.floor(to_timestamp(datetime.max.replace(tzinfo=UTC))) - 86400


def check_timestamp(timestamp: int | float) -> None:
    """Reject timestamps that cannot be turned into a zoned datetime.

    NaN and infinities fail the range comparison as well.

    Raises:
        InvalidArgumentError: if *timestamp* is outside
            ``MIN_TIMESTAMP..MAX_TIMESTAMP``.
    """
    if not MIN_TIMESTAMP <= timestamp <= MAX_TIMESTAMP:
        raise InvalidArgumentError(
            f"Expected a finite timestamp between {MIN_TIMESTAMP} and "
            f"{MAX_TIMESTAMP}, but got {timestamp!r}"
        )


def format_datetime(value: datetime, fmt: str = DEFAULT_FORMAT) -> str:
    """Format *value* followed by its zone identifier.

    Example::

        >>> format_datetime(from_timestamp(1537126680, load_timezone("America/New_York")))
        '2018-09-16 15:38:00.000000 America/New_York'
    """
    if value.tzinfo is None:
        return value.strftime(fmt)
    return f"{value.strftime(fmt)} {timezone_name(value.tzinfo)}"


def _coerce_tz(timezone: TimezoneLike) -> tzinfo:
    if isinstance(timezone, str):
        return load_timezone(timezone)
    return timezone


@functools.total_ordering
class MutableDateTime:
    """A zoned date-time that can be changed in place.

    Python's :class:`~datetime.datetime` is immutable; this wrapper
    holds one and swaps it for a new value on every mutation.  Mutating
    methods return ``self`` so calls can be chained::

        dt = clock.date_time("UTC")
        dt.set_timezone("Asia/Tokyo").modify(days=1)

    Equality and ordering compare the instant, not the wall-clock
    fields, so two values in different zones can be equal.  Naive
    datetimes are not comparable: ``==`` is ``False`` and ordering
    raises :class:`TypeError`, as between aware and naive datetimes.
    Instances are unhashable because they are mutable.
    """

    __slots__ = ("_value",)
    __hash__ = None  # type: ignore[assignment]

    def __init__(self, value: datetime) -> None:
        if value.tzinfo is None or value.utcoffset() is None:
            raise InvalidArgumentError("MutableDateTime requires an aware datetime")
        self._value = value

    @classmethod
    def from_timestamp(cls, timestamp: int | float, tz: tzinfo) -> MutableDateTime:
        return cls(from_timestamp(timestamp, tz))

    # -- read access ---------------------------------------------------------

    @property
    def year(self) -> int:
        return self._value.year

    @property
    def month(self) -> int:
        return self._value.month

    @property
    def day(self) -> int:
        return self._value.day

    @property
    def hour(self) -> int:
        return self._value.hour

    @property
    def minute(self) -> int:
        return self._value.minute

    @property
    def second(self) -> int:
        return self._value.second

    @property
    def microsecond(self) -> int:
        return self._value.microsecond

    @property
    def tzinfo(self) -> tzinfo:
        return self._value.tzinfo  # type: ignore[return-value]

    @property
    def timezone_name(self) -> str:
        return timezone_name(self.tzinfo)

    def timestamp(self) -> int:
        """Whole seconds since the epoch, floored."""
        return math.floor(self.microtime())

    def microtime(self) -> float:
        return to_timestamp(self._value)

    def isoformat(self, sep: str = "T", timespec: str = "auto") -> str:
        return self._value.isoformat(sep, timespec)

    def strftime(self, fmt: str) -> str:
        return self._value.strftime(fmt)

    def format(self, fmt: str = DEFAULT_FORMAT) -> str:
        """Format like :func:`format_datetime`."""
        return format_datetime(self._value, fmt)

    def to_datetime(self) -> datetime:
        """Return the current value as an immutable aware datetime."""
        return self._value

    # -- mutation ------------------------------------------------------------

    def set_timezone(self, timezone: TimezoneLike) -> MutableDateTime:
        """Express the same instant in another zone."""
        self._value = self._value.astimezone(_coerce_tz(timezone))
        return self

    def modify(self, **delta: float) -> MutableDateTime:
        """Shift the wall-clock fields by a :class:`~datetime.timedelta`.

        Accepts the ``timedelta`` keyword arguments (``days``,
        ``hours``, ``seconds``, ...).
        """
        self._value = self._value + timedelta(**delta)
        return self

    def replace(self, **fields: Any) -> MutableDateTime:
        """Replace calendar fields, as :meth:`datetime.replace` does."""
        value = self._value.replace(**fields)
        if value.tzinfo is None:
            raise InvalidArgumentError("MutableDateTime requires an aware datetime")
        self._value = value
        return self

    # -- comparison ----------------------------------------------------------

    @staticmethod
    def _comparable(other: object) -> datetime | None:
        # Naive datetimes have no instant to compare against.
        if isinstance(other, MutableDateTime):
            return other._value
        if isinstance(other, datetime) and other.utcoffset() is not None:
            return other
        return None

    def __eq__(self, other: object) -> bool:
        value = self._comparable(other)
        if value is None:
            return NotImplemented
        return self._value == value

    def __lt__(self, other: object) -> bool:
        value = self._comparable(other)
        if value is None:
            return NotImplemented
        return self._value < value

    def __repr__(self) -> str:
        return f"MutableDateTime({self.format()!r})"

    def __str__(self) -> str:
        return self.format()
