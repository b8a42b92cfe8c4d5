"""Pytest configuration and shared fixtures."""

import pytest

# The clockpin plugin is registered via a ``pytest11`` entry point for
# external consumers.  Our own suite disables it (``-p no:clockpin``)
# and loads it here instead, after ``pytest-cov`` has started tracing.
pytest_plugins = ["clockpin.testing._plugin"]


def pytest_configure(config: pytest.Config) -> None:
    """Configure pytest markers."""
    config.addinivalue_line(
        "markers", "unit: Unit tests (fast, no external dependencies)"
    )


@pytest.fixture
def default_tz_new_york(monkeypatch: pytest.MonkeyPatch) -> str:
    """Make America/New_York the default zone for ``Settings()``."""
    monkeypatch.setenv("CLOCKPIN_TIMEZONE", "America/New_York")
    return "America/New_York"
