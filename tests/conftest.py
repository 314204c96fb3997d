"""Pytest configuration and fixtures for Horae tests."""

from __future__ import annotations

import os
import sys
import time
from pathlib import Path

import pytest

# Add the parent directory to sys.path so horae can be imported
# without needing to install the package
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

# Local-time results are asserted against Central European Time
# (UTC+1, UTC+2 from the last Sunday of March to the last Sunday of October)
os.environ["TZ"] = "CET-1CEST,M3.5.0,M10.5.0/3"
time.tzset()

from horae import FixedClock, Instant, reset_default_clock, reset_formatter_caches  # noqa: E402


@pytest.fixture(autouse=True)
def _isolate_process_state():
    """Start every test with empty formatter caches and the system clock."""
    reset_formatter_caches()
    reset_default_clock()
    yield
    reset_formatter_caches()
    reset_default_clock()


@pytest.fixture
def now() -> Instant:
    """Thursday 2025-12-04 12:00 local time."""
    return Instant.from_local(2025, 12, 4, 12, 0)


@pytest.fixture
def clock(now: Instant) -> FixedClock:
    """A clock frozen at the now fixture."""
    return FixedClock(now)
