"""Configuration via pydantic-settings.

Configuration is loaded from environment variables and/or a ``.env``
file.  Variables use the ``CLOCKPIN_`` prefix and ``__`` as the nested
delimiter, e.g. ``CLOCKPIN_LOGGING__LEVEL=DEBUG``.

The schema covers:

* **Default time zone** — the zone used by date-time reads when the
  caller passes none.  :class:`TimezoneSettings` carries it alone and
  is what clocks load at read time.
* **Logging** — level, format, optional file sink, rotation.
"""

from __future__ import annotations

import os
from datetime import tzinfo
from typing import Annotated, Literal

from pydantic import BaseModel, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from clockpin._errors import InvalidArgumentError
from clockpin._timezone import load_timezone

FALLBACK_TIMEZONE = "UTC"


class LoggingSettings(BaseModel):
    """Logging configuration.

    When ``file`` is set, logs are also written to a rotating file
    (size-based rotation, ``backup_count`` generations kept).  When
    ``None``, logs go to stderr only.

    The ``format`` field selects the output format:

    - ``"json"`` (default) — structured JSON lines.
    - ``"text"`` — human-readable timestamped lines.
    """

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO",
        description="Root log level.",
    )
    format: Literal["json", "text"] = Field(
        default="json",
        description="Log output format, 'json' or 'text'.",
    )
    file: str | None = Field(
        default=None,
        description="Optional log file path. ``None`` means stderr only.",
    )
    backup_count: Annotated[int, Field(ge=0)] = Field(
        default=3,
        description="Number of rotated log files to keep.",
    )


class TimezoneSettings(BaseSettings):
    """Default time zone only, read from ``CLOCKPIN_TIMEZONE``.

    This is what a :class:`~clockpin.Clock` without explicit settings
    loads on each default-zone lookup.  It reads no ``.env`` file and
    has no other fields, so a read never touches the filesystem and
    never fails on unrelated configuration.
    """

    model_config = SettingsConfigDict(
        env_prefix="CLOCKPIN_",
        env_file=None,
        extra="ignore",
    )

    timezone: str | None = Field(
        default=None,
        description=(
            "IANA name of the default time zone. When unset, the TZ "
            "environment variable is used if it names an IANA zone, "
            "otherwise UTC."
        ),
    )

    @field_validator("timezone")
    @classmethod
    def _check_timezone(cls, value: str | None) -> str | None:
        if value is None:
            return None
        try:
            load_timezone(value)
        except InvalidArgumentError as exc:
            raise ValueError(str(exc)) from exc
        return value

    def default_timezone(self) -> tzinfo:
        """Resolve the configured default zone.

        Falls back to ``$TZ`` (leading ``:`` stripped, as POSIX
        allows) and then to UTC.  A ``TZ`` value that is not an IANA
        name, such as ``EST5EDT,M3.2.0,M11.1.0``, is ignored.
        """
        if self.timezone is not None:
            return load_timezone(self.timezone)
        env_tz = os.environ.get("TZ", "").lstrip(":")
        if env_tz:
            try:
                return load_timezone(env_tz)
            except InvalidArgumentError:
                pass
        return load_timezone(FALLBACK_TIMEZONE)


class Settings(TimezoneSettings):
    """Root settings for clockpin: default zone plus logging.

    Example ``.env``::

        CLOCKPIN_TIMEZONE=America/New_York
        CLOCKPIN_LOGGING__LEVEL=DEBUG
        CLOCKPIN_LOGGING__FORMAT=text
    """

    model_config = SettingsConfigDict(
        env_prefix="CLOCKPIN_",
        env_nested_delimiter="__",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    logging: LoggingSettings = Field(
        default_factory=LoggingSettings,
        description="Logging configuration.",
    )
