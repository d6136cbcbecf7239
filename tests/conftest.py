# topmark:header:start
#
#   project      : NiceError
#   file         : conftest.py
#   file_relpath : tests/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Pytest configuration for the NiceError test suite.

Sets up TRACE logging for the whole run and keeps developer environment
variables from leaking into tests.
"""

from __future__ import annotations

import pytest

from nicerror.config import logging

# Five physical lines: the trailing line feed yields an empty sixth line.
FAKE_FILE = """\
some = fake, syntax
next := some(1, 2, 3)
def foo(bar) {
  -- what language is this?
}
"""


@pytest.fixture(autouse=True)
def clean_nicerror_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Ensure settings and log level are not forced via the environment during tests.

    Args:
        monkeypatch (pytest.MonkeyPatch): Fixture used to manipulate environment variables.
    """
    monkeypatch.delenv("NICERROR_LOG_LEVEL", raising=False)
    monkeypatch.delenv("NICERROR_CONTEXT_SIZE", raising=False)


@pytest.fixture
def fake_file() -> str:
    """Return the five-line sample source used across report tests."""
    return FAKE_FILE


@pytest.hookimpl(tryfirst=True)
def pytest_configure(config: pytest.Config) -> None:  # pylint: disable=unused-argument
    """Set the logging level to TRACE so that every log call is exercised.

    Args:
        config (pytest.Config): The pytest configuration object.
    """
    logging.setup_logging(level=logging.TRACE_LEVEL)
