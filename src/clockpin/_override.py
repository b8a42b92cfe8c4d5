"""Values accepted by :meth:`clockpin.Clock.override`.

An override is either a number or a structured date-time.  The two
shapes are modelled as a tagged union, and :func:`coerce_override` is
the only place that inspects the runtime type of caller input::

    override = coerce_override(1537126680)       # NumericOverride
    override = coerce_override(datetime.now(UTC))  # DateTimeOverride
    timestamp = override.to_timestamp(default_tz)

Both variants convert to the canonical stored form, a UNIX timestamp.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime, tzinfo

from clockpin._datetime import check_timestamp, to_timestamp
from clockpin._errors import InvalidArgumentError, describe_type


@dataclass(frozen=True, slots=True)
class NumericOverride:
    """A UNIX timestamp; the fractional part is sub-second precision."""

    value: int | float

    def __post_init__(self) -> None:
        check_timestamp(self.value)

    def to_timestamp(self, default_tz: Callable[[], tzinfo]) -> int | float:  # noqa: ARG002
        return self.value


@dataclass(frozen=True, slots=True)
class DateTimeOverride:
    """A :class:`~datetime.datetime`, aware or naive.

    A naive value is read as wall-clock time in the zone returned by
    *default_tz*, which is only called for naive values.  The zone
    of an aware value does not affect the stored timestamp.
    """

    value: datetime

    def to_timestamp(self, default_tz: Callable[[], tzinfo]) -> float:
        value = self.value
        if value.tzinfo is None or value.utcoffset() is None:
            value = value.replace(tzinfo=default_tz())
        timestamp = to_timestamp(value)
        check_timestamp(timestamp)
        return timestamp


Override = NumericOverride | DateTimeOverride


def coerce_override(value: object) -> Override:
    """Validate raw input and wrap it in the matching variant.

    ``bool`` is rejected even though it subclasses ``int``.

    Raises:
        InvalidArgumentError: for any other type, and for NaN,
            infinities or instants outside the datetime range.
    """
    if isinstance(value, NumericOverride | DateTimeOverride):
        return value
    if isinstance(value, datetime):
        return DateTimeOverride(value)
    if isinstance(value, int | float) and not isinstance(value, bool):
        return NumericOverride(value)
    raise InvalidArgumentError(
        f"Expected int, float or an instance of datetime, but got {describe_type(value)}"
    )
