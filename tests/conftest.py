"""Shared pytest fixtures and configuration for the days-between test suite.

Guidelines
----------
* Core tests must be pure — "today" comes from a fixed clock.
* Only the facade integration tests read the real wall clock.
* Tests must not depend on the host timezone.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from unittest.mock import MagicMock

import pytest
import structlog

from days_between.core.models import CalendarDate
from days_between.utils.logging import PACKAGE_LOGGER


class FixedClock:
    """Clock that always reports the same day and counts its reads."""

    def __init__(self, today: CalendarDate) -> None:
        self._today = today
        self.calls = 0

    def today(self) -> CalendarDate:
        self.calls += 1
        return self._today


@pytest.fixture
def fixed_clock() -> FixedClock:
    return FixedClock(CalendarDate(2020, 1, 1))


@pytest.fixture
def make_clock() -> Callable[[CalendarDate], FixedClock]:
    return FixedClock


@pytest.fixture
def exploding_clock() -> MagicMock:
    """A clock that must never be consulted."""
    clock = MagicMock()
    clock.today.side_effect = AssertionError("clock should not be read")
    return clock


@pytest.fixture(autouse=True)
def _restore_logging() -> object:
    """Undo handler, level and structlog changes made by ``configure_logging``."""
    package_logger = logging.getLogger(PACKAGE_LOGGER)
    saved = (list(package_logger.handlers), package_logger.level, package_logger.propagate)
    structlog_config = structlog.get_config()
    yield
    package_logger.handlers[:] = saved[0]
    package_logger.setLevel(saved[1])
    package_logger.propagate = saved[2]
    structlog.configure(**structlog_config)
