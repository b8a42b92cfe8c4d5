"""clockpin.

Current-time access with a deterministic override switch for tests.
"""

from importlib.metadata import PackageNotFoundError, version

from clockpin._clock import ClockPort, FixedClock, SystemClock
from clockpin._datetime import MutableDateTime, format_datetime
from clockpin._default import (
    date_time,
    date_time_immutable,
    default_timezone,
    frozen,
    get_default_clock,
    is_overridden,
    microtime,
    override,
    resume,
    time,
)
from clockpin._errors import ClockError, InvalidArgumentError
from clockpin._facade import Clock
from clockpin._logging import ClockStateFilter, JsonFormatter, configure_logging
from clockpin._override import (
    DateTimeOverride,
    NumericOverride,
    Override,
    coerce_override,
)
from clockpin._settings import LoggingSettings, Settings, TimezoneSettings

try:
    __version__ = version("clockpin")
except PackageNotFoundError:
    # Last resort fallback for source checkouts without metadata
    __version__ = "0.0.0+unknown"

__all__ = [
    # Version
    "__version__",
    # Clock
    "Clock",
    "ClockPort",
    "FixedClock",
    "SystemClock",
    # Default clock
    "date_time",
    "date_time_immutable",
    "default_timezone",
    "frozen",
    "get_default_clock",
    "is_overridden",
    "microtime",
    "override",
    "resume",
    "time",
    # Values
    "DateTimeOverride",
    "MutableDateTime",
    "NumericOverride",
    "Override",
    "coerce_override",
    "format_datetime",
    # Errors
    "ClockError",
    "InvalidArgumentError",
    # Logging
    "ClockStateFilter",
    "JsonFormatter",
    "configure_logging",
    # Settings
    "LoggingSettings",
    "Settings",
    "TimezoneSettings",
]
