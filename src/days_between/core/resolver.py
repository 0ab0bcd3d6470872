"""Decide which input is the start and which is the end of a range."""

from __future__ import annotations

from days_between.core.models import DateRange
from days_between.core.parser import parse_date
from days_between.core.protocols import Clock
from days_between.utils.logging import get_logger

logger = get_logger(__name__)


def resolve_range(
    primary: str,
    secondary: str | None = None,
    *,
    clock: Clock,
) -> DateRange:
    """Build the :class:`DateRange` for one or two input strings.

    * One argument — start is ``clock.today()``, end is *primary*.
    * Two arguments — start is *primary*, end is *secondary*.

    The range is never reordered.  *primary* is parsed first and any
    :class:`~days_between.exceptions.DateParseError` propagates as-is.
    """
    if secondary is None:
        end = parse_date(primary)
        start = clock.today()
    else:
        start = parse_date(primary)
        end = parse_date(secondary)

    date_range = DateRange(start=start, end=end)
    logger.debug(
        "range_resolved",
        start=start,
        end=end,
        implicit_start=secondary is None,
    )
    return date_range
