"""Pytest configuration and fixtures for civiltime tests."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

# Add the parent directory to sys.path so civiltime can be imported
# without needing to install the package
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from civiltime.clock import FixedClock  # noqa: E402
from civiltime.units.offset import Offset  # noqa: E402

# 2024-06-17T12:59:51Z
REFERENCE_NANOS = 1_718_629_191 * 1_000_000_000


@pytest.fixture
def utc_clock() -> FixedClock:
    """A clock stopped at 2024-06-17T12:59:51Z on a UTC host."""
    return FixedClock(REFERENCE_NANOS, Offset.utc())


@pytest.fixture
def eastern_clock() -> FixedClock:
    """A clock stopped at 2024-06-17T12:59:51Z on a -04:00 host."""
    return FixedClock(REFERENCE_NANOS, Offset(-240))


@pytest.fixture
def tokyo_clock() -> FixedClock:
    """A clock stopped at 2024-06-17T12:59:51Z on a +09:00 host."""
    return FixedClock(REFERENCE_NANOS, Offset(540))
