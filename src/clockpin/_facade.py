"""The :class:`Clock` facade: override/resume plus the time reads.

A clock is in one of two states:

* **Live** — reads come from the live source (``SystemClock`` unless
  another :class:`~clockpin.ClockPort` is injected).
* **Frozen** — reads come from a :class:`~clockpin.FixedClock` holding
  the value passed to :meth:`Clock.override`.

``override`` moves Live→Frozen or Frozen→Frozen (replacing the value),
``resume`` moves Frozen→Live or Live→Live (no-op).  A new clock starts
Live.

Each state change is one assignment of an immutable source object, and
each read takes a single reference to the active source, so a read
sees either the old or the new state and never a mix.  Concurrent
writers are not ordered against each other.  Code that needs isolation
between threads or tests should give each its own :class:`Clock`
instead of sharing the process-wide default.
"""

from __future__ import annotations

import contextlib
import logging
import math
from collections.abc import Iterator
from datetime import datetime, tzinfo

from clockpin._clock import ClockPort, FixedClock, SystemClock
from clockpin._datetime import MutableDateTime, from_timestamp
from clockpin._override import coerce_override
from clockpin._settings import TimezoneSettings
from clockpin._timezone import TimezoneLike, resolve_timezone

logger = logging.getLogger(__name__)


class Clock:
    """Current-time facade with a test-only override switch.

    Args:
        source: Live time source.  Defaults to :class:`SystemClock`.
        settings: Supplies the default time zone (a
            :class:`~clockpin.Settings` works too).  When ``None``,
            :class:`TimezoneSettings` is loaded from the environment on
            every default-zone lookup, so ``CLOCKPIN_TIMEZONE`` changes
            are picked up the way a process-wide default zone setting
            would be.  No ``.env`` file is read on that path.

    Example::

        clock = Clock()
        clock.override(1537126680)
        clock.time()                          # 1537126680
        clock.date_time("America/New_York")   # 2018-09-16 15:38:00 EDT
        clock.resume()
    """

    def __init__(
        self,
        source: ClockPort | None = None,
        *,
        settings: TimezoneSettings | None = None,
    ) -> None:
        self._live: ClockPort = source if source is not None else SystemClock()
        self._frozen: FixedClock | None = None
        self._settings = settings

    def __repr__(self) -> str:
        frozen_at = self.frozen_at
        state = "live" if frozen_at is None else f"frozen at {frozen_at!r}"
        return f"<Clock {state}>"

    # -- override / resume ---------------------------------------------------

    def override(self, now: int | float | datetime) -> None:
        """Freeze the clock at *now*.

        Only reads made through this clock are affected.  Intended for
        tests.

        Args:
            now: UNIX timestamp (``int`` or ``float``; the fractional
                part is kept) or a :class:`~datetime.datetime`.  A
                naive datetime is read in the default time zone.

        Raises:
            InvalidArgumentError: if *now* has another type, is not
                finite, or lies outside the range a datetime can
                represent.  The clock keeps its previous state.
        """
        value = coerce_override(now)
        timestamp = value.to_timestamp(self._default_timezone)
        self._frozen = FixedClock(timestamp)
        logger.debug("Clock overridden to %r", timestamp)

    def is_overridden(self) -> bool:
        return self._frozen is not None

    @property
    def frozen_at(self) -> int | float | None:
        """The override timestamp, or ``None`` while live."""
        frozen = self._frozen
        return None if frozen is None else frozen.timestamp

    def resume(self) -> None:
        """Return to the live source.  Does nothing when not overridden."""
        if self._frozen is None:
            return
        self._frozen = None
        logger.debug("Clock resumed")

    @contextlib.contextmanager
    def frozen(self, now: int | float | datetime) -> Iterator[Clock]:
        """Override for the duration of a ``with`` block.

        On exit the clock returns to whatever state it had on entry:
        the previous frozen value, or live time.
        """
        previous = self._frozen
        self.override(now)
        try:
            yield self
        finally:
            self._frozen = previous
            restored = "live" if previous is None else previous.timestamp
            logger.debug("Clock restored to %s", restored)

    # -- reads ---------------------------------------------------------------

    def time(self) -> int:
        """Current UNIX timestamp in whole seconds (floored)."""
        return math.floor(self._source().now())

    def microtime(self) -> float:
        """Current UNIX timestamp with sub-second precision."""
        return float(self._source().now())

    def date_time(self, timezone: TimezoneLike | None = None) -> MutableDateTime:
        """Current instant as a new :class:`MutableDateTime`.

        Args:
            timezone: Zone instance or IANA name.  ``None`` uses the
                default time zone.
        """
        return MutableDateTime(self._zoned_now(timezone))

    def date_time_immutable(self, timezone: TimezoneLike | None = None) -> datetime:
        """Current instant as a new aware :class:`~datetime.datetime`."""
        return self._zoned_now(timezone)

    def default_timezone(self) -> tzinfo:
        """The zone used when a read is given no ``timezone``."""
        return self._default_timezone()

    # -- internals -----------------------------------------------------------

    def _source(self) -> ClockPort:
        frozen = self._frozen
        return frozen if frozen is not None else self._live

    def _zoned_now(self, timezone: TimezoneLike | None) -> datetime:
        tz = resolve_timezone(timezone, self._default_timezone)
        return from_timestamp(self._source().now(), tz)

    def _default_timezone(self) -> tzinfo:
        settings = self._settings
        if settings is None:
            settings = TimezoneSettings()
        return settings.default_timezone()

