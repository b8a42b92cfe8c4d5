"""Process-wide default clock and its module-level shortcuts.

These functions act on one shared :class:`~clockpin.Clock` so that
code can call ``clockpin.time()`` without passing a clock around::

    import clockpin

    clockpin.override(1537126680)
    assert clockpin.time() == 1537126680
    clockpin.resume()

The shared clock is meant to be overridden in test setup and resumed
in teardown.  It has a single override slot; there is no stacking and
no per-thread state.
"""

from __future__ import annotations

from contextlib import AbstractContextManager
from datetime import datetime, tzinfo

from clockpin._datetime import MutableDateTime
from clockpin._facade import Clock
from clockpin._timezone import TimezoneLike

_default_clock = Clock()


def get_default_clock() -> Clock:
    """Return the clock behind the module-level functions."""
    return _default_clock


def override(now: int | float | datetime) -> None:
    """Freeze the default clock.  See :meth:`Clock.override`."""
    _default_clock.override(now)


def is_overridden() -> bool:
    return _default_clock.is_overridden()


def resume() -> None:
    _default_clock.resume()


def frozen(now: int | float | datetime) -> AbstractContextManager[Clock]:
    """Freeze the default clock inside a ``with`` block."""
    return _default_clock.frozen(now)


def time() -> int:
    return _default_clock.time()


def microtime() -> float:
    return _default_clock.microtime()


def date_time(timezone: TimezoneLike | None = None) -> MutableDateTime:
    return _default_clock.date_time(timezone)


def date_time_immutable(timezone: TimezoneLike | None = None) -> datetime:
    return _default_clock.date_time_immutable(timezone)


def default_timezone() -> tzinfo:
    return _default_clock.default_timezone()
