"""Wall-clock port and its two adapters.

Provides :class:`ClockPort` (Protocol), :class:`SystemClock` for the
real environment clock and :class:`FixedClock` for a frozen instant.

A :class:`~clockpin.Clock` reads from exactly one source at a time:
its live source while running normally, a :class:`FixedClock` while
overridden.  Both report a UNIX timestamp in seconds, with a
fractional part for sub-second precision.
"""

from __future__ import annotations

import time
from dataclasses import dataclass
from typing import Protocol, runtime_checkable


@runtime_checkable
class ClockPort(Protocol):
    """Source of the current UNIX timestamp.

    The default implementation wraps ``time.time()``.  Tests inject a
    deterministic fake (see :class:`clockpin.testing.FakeClock`).
    """

    def now(self) -> float:
        """Return seconds since 1970-01-01T00:00:00Z.

        Returns:
            A float (or int) timestamp; the fractional part carries
            sub-second precision.
        """
        ...


class SystemClock:
    """Production clock wrapping ``time.time()``.

    Satisfies :class:`ClockPort` via structural subtyping (PEP 544).
    """

    def now(self) -> float:
        """Return the real UNIX timestamp."""
        return time.time()


@dataclass(frozen=True, slots=True)
class FixedClock:
    """Clock frozen at ``timestamp``.

    Immutable so that swapping it in or out of a
    :class:`~clockpin.Clock` is a single reference assignment.
    """

    timestamp: int | float

    def now(self) -> int | float:
        """Return the frozen timestamp unchanged."""
        return self.timestamp
