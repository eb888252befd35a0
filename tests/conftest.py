"""Shared fixtures."""

from collections.abc import Iterator
from typing import Any

import pytest
import structlog
from structlog.testing import capture_logs


@pytest.fixture(autouse=True)
def log_events() -> Iterator[list[dict[str, Any]]]:
    """Capture structlog events so they never reach captured stdout."""
    with capture_logs() as events:
        yield events
    structlog.reset_defaults()
