"""Public test-support utilities for clockpin.

Provided symbols:

- :class:`FakeClock` — controllable live source for a ``Clock``.
- :func:`make_settings` — factory for ``Settings`` without ``.env``
  files or environment variables.

The ``fake_clock``, ``clock`` and ``frozen_clock`` fixtures come from
the pytest plugin in :mod:`clockpin.testing._plugin`.
"""

from clockpin.testing._clock import FakeClock
from clockpin.testing._settings import make_settings

__all__ = [
    "FakeClock",
    "make_settings",
]
