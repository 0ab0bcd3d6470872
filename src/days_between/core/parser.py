"""Strict ``yyyy-mm-dd`` parsing.

Validation happens in two mandatory stages:

1. **Format** — the whole string must match ``DDDD-[01]D-[0-3]D`` using
   ASCII digits only.  No whitespace, no time or timezone suffix, no
   alternative separators.
2. **Calendar** — the captured numbers are handed to
   :class:`datetime.date`, and the constructed date is compared back
   against them component by component.  The constructor refuses
   impossible days (``2019-02-29``, month ``13``, day ``00``) instead of
   rolling them over, so the comparison is a guard that the platform
   primitive did not normalise anything.  Year 0000 is checked one
   400-year Gregorian cycle later, where the calendar repeats exactly.
"""

from __future__ import annotations

import re
from datetime import date

from days_between.core.models import CalendarDate, cycle_shift
from days_between.exceptions import DateParseError
from days_between.utils.logging import get_logger

logger = get_logger(__name__)

ISO_DATE_PATTERN: re.Pattern[str] = re.compile(
    r"(?P<year>[0-9]{4})-(?P<month>[0-1][0-9])-(?P<day>[0-3][0-9])",
)
"""Full-match pattern for the only accepted input shape."""


def parse_date(value: str) -> CalendarDate:
    """Parse *value* into a :class:`CalendarDate`.

    Raises
    ------
    DateParseError
        ``Invalid date format:`` when *value* is not shaped like
        ``yyyy-mm-dd``; ``Invalid date:`` when it is, but names a day
        that does not exist.
    TypeError
        If *value* is not a ``str``.
    """
    if not isinstance(value, str):
        raise TypeError(f"expected str, got {type(value).__name__}")

    match = ISO_DATE_PATTERN.fullmatch(value)
    if match is None:
        raise DateParseError.malformed(value)

    year = int(match["year"])
    month = int(match["month"])
    day = int(match["day"])

    shift = cycle_shift(year)
    try:
        candidate = date(year + shift, month, day)
    except ValueError as exc:
        raise DateParseError.nonexistent(value) from exc

    if (candidate.year - shift, candidate.month, candidate.day) != (year, month, day):
        raise DateParseError.nonexistent(value)

    parsed = CalendarDate(year, month, day)
    logger.debug("date_parsed", value=value, date=parsed)
    return parsed
