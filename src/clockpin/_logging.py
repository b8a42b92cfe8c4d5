"""Log output that shows whether time is frozen.

While a test has a clock overridden, log lines from the code under test
carry real timestamps but describe work done at a fake instant.
:class:`ClockStateFilter` stamps every record that reaches a handler
with the state of a clock (the process-wide default unless another is
given), and both formats installed by :func:`configure_logging` print
it::

    2026-10-18 12:00:00,123 [INFO] billing [frozen@1537126680]: invoice due
    {"timestamp": "...", "level": "INFO", ..., "clock": {"overridden": true,
     "frozen_at": 1537126680}}

The ``timestamp`` / ``asctime`` of a record is always ``record.created``,
i.e. real time, so log ordering stays meaningful across overrides.
"""

from __future__ import annotations

import json
import logging
import sys
from datetime import UTC, datetime
from logging.handlers import RotatingFileHandler
from typing import TYPE_CHECKING, Any

from clockpin._default import get_default_clock
from clockpin._settings import LoggingSettings

if TYPE_CHECKING:
    from clockpin._facade import Clock

_ROTATE_AT_BYTES = 10 * 1024 * 1024

_TEXT_FORMAT = "%(asctime)s [%(levelname)s] %(name)s [%(clock_state)s]: %(message)s"


class ClockStateFilter(logging.Filter):
    """Attach the clock state to each record; never drops records.

    Sets three record attributes:

    - ``clock_overridden`` — ``True`` while the clock is frozen
    - ``frozen_at`` — the frozen UNIX timestamp, or ``None``
    - ``clock_state`` — ``"live"`` or ``"frozen@<timestamp>"``

    Args:
        clock: Clock to report on.  ``None`` looks up the default clock
            at emit time.
    """

    def __init__(self, clock: Clock | None = None) -> None:
        super().__init__()
        self._clock = clock

    def filter(self, record: logging.LogRecord) -> bool:
        clock = self._clock if self._clock is not None else get_default_clock()
        frozen_at = clock.frozen_at
        record.clock_overridden = frozen_at is not None
        record.frozen_at = frozen_at
        record.clock_state = "live" if frozen_at is None else f"frozen@{frozen_at!r}"
        return True


class JsonFormatter(logging.Formatter):
    """One JSON object per record (NDJSON).

    Fields: ``timestamp`` (UTC ISO 8601, real time), ``level``,
    ``logger``, ``message``, ``service``; ``version`` when set;
    ``clock`` (``{"overridden": ..., "frozen_at": ...}``) when the
    record went through a :class:`ClockStateFilter`; ``exception``
    when a traceback is attached.
    """

    def __init__(self, *, service: str = "clockpin", version: str = "") -> None:
        super().__init__()
        self._service = service
        self._version = version

    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, tz=UTC).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "service": self._service,
        }
        if self._version:
            payload["version"] = self._version
        if hasattr(record, "clock_overridden"):
            payload["clock"] = {
                "overridden": record.clock_overridden,
                "frozen_at": getattr(record, "frozen_at", None),
            }
        if record.exc_info and record.exc_info[0] is not None:
            payload["exception"] = self.formatException(record.exc_info)
        return json.dumps(payload, default=str)


def configure_logging(
    settings: LoggingSettings,
    *,
    clock: Clock | None = None,
    service: str = "clockpin",
    version: str = "",
) -> None:
    """Replace the root logger's handlers according to *settings*.

    Installs a ``stderr`` handler and, when ``settings.file`` is set, a
    size-rotated file handler.  Every handler gets a
    :class:`ClockStateFilter` for *clock*, so records propagated from
    any logger carry the clock state.

    Args:
        settings: Level, format and optional file sink.
        clock: Clock whose state is logged.  ``None`` follows the
            process-wide default clock.
        service: Value of the JSON ``service`` field.
        version: Value of the JSON ``version`` field; omitted if empty.
    """
    if settings.format == "json":
        formatter: logging.Formatter = JsonFormatter(service=service, version=version)
    else:
        formatter = logging.Formatter(_TEXT_FORMAT, defaults={"clock_state": "-"})

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    if settings.file is not None:
        handlers.append(
            RotatingFileHandler(
                settings.file,
                maxBytes=_ROTATE_AT_BYTES,
                backupCount=settings.backup_count,
            )
        )

    state_filter = ClockStateFilter(clock)
    root = logging.getLogger()
    for old in root.handlers[:]:
        root.removeHandler(old)
    for handler in handlers:
        handler.setFormatter(formatter)
        handler.addFilter(state_filter)
        root.addHandler(handler)
    root.setLevel(settings.level)
