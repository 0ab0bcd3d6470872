"""Signed whole-day difference between two dates."""

from __future__ import annotations

from datetime import timedelta

from days_between.core.models import GREGORIAN_CYCLE, DateRange
from days_between.utils.logging import get_logger

logger = get_logger(__name__)

ONE_DAY: timedelta = timedelta(days=1)


def count_days(date_range: DateRange) -> int:
    """Return ``end - start`` in days.

    Both endpoints are UTC-midnight instants, so the division is exact.
    A remainder means a date carrying a time of day slipped in upstream;
    that is a programming error and raises ``ValueError`` rather than
    being rounded away.

    Year-0 endpoints are anchored a whole Gregorian cycle later; the
    cycle is subtracted back out so the count stays exact.
    """
    end, end_cycles = date_range.end.utc_anchor()
    start, start_cycles = date_range.start.utc_anchor()
    elapsed = (end - start) - GREGORIAN_CYCLE * (end_cycles - start_cycles)
    days, remainder = divmod(elapsed, ONE_DAY)
    if remainder:
        raise ValueError(
            f"non-integral day difference {elapsed!r} between "
            f"{date_range.start!r} and {date_range.end!r}",
        )

    logger.debug("days_counted", start=date_range.start, end=date_range.end, days=days)
    return days
