"""Shared test fixtures."""

import pytest
import structlog


@pytest.fixture(autouse=True)
def _reset_structlog():
    """Undo global structlog configuration between tests.

    ``configure_logging`` binds structlog to the current ``sys.stderr``, which
    under pytest is a per-test capture stream that is closed afterwards.
    """
    yield
    structlog.reset_defaults()
