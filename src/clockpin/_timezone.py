"""Time zone resolution helpers.

Zones are looked up in the IANA database through :mod:`zoneinfo`.  A
zone may be given as a :class:`~datetime.tzinfo` instance, which is
used as-is, or as an IANA name such as ``"America/New_York"``.
"""

from __future__ import annotations

from collections.abc import Callable
from datetime import tzinfo
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from clockpin._errors import InvalidArgumentError, describe_type

TimezoneLike = tzinfo | str


def load_timezone(name: str) -> ZoneInfo:
    """Return the IANA zone called *name*.

    Raises:
        InvalidArgumentError: if the database has no such zone or the
            key is malformed.
    """
    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError) as exc:
        raise InvalidArgumentError(f"Unknown time zone {name!r}") from exc


def resolve_timezone(
    timezone: TimezoneLike | None,
    default: Callable[[], tzinfo],
) -> tzinfo:
    """Turn an optional zone argument into a :class:`~datetime.tzinfo`.

    Args:
        timezone: Zone instance, IANA name, or ``None``.
        default: Called only when *timezone* is ``None``.
    """
    if timezone is None:
        return default()
    if isinstance(timezone, tzinfo):
        return timezone
    if isinstance(timezone, str):
        return load_timezone(timezone)
    raise InvalidArgumentError(
        f"Expected a tzinfo or a time zone name, but got {describe_type(timezone)}"
    )


def timezone_name(tz: tzinfo) -> str:
    """Return the identifier of *tz*.

    IANA zones report their key (``"Asia/Tokyo"``); other ``tzinfo``
    implementations fall back to ``tzname(None)`` and then ``str()``.
    """
    key = getattr(tz, "key", None)
    if key:
        return str(key)
    return tz.tzname(None) or str(tz)
