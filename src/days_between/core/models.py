"""Domain models for days-between.

All models are **frozen** dataclasses — immutable value objects with no
behaviour beyond data access and lossless conversion to the standard
library's date types.  A :class:`CalendarDate` has no time-of-day
component at all, so it is always exactly midnight UTC.

Year 0 (1 BC in the proleptic Gregorian calendar) lies below
:data:`datetime.MINYEAR`.  Such dates are handled one 400-year Gregorian
cycle later, where month lengths and leap days repeat exactly.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import MAXYEAR, MINYEAR, date, datetime, timedelta, timezone

GREGORIAN_CYCLE_YEARS: int = 400

GREGORIAN_CYCLE: timedelta = timedelta(days=146_097)
"""Exact length of :data:`GREGORIAN_CYCLE_YEARS` Gregorian years."""


def cycle_shift(year: int) -> int:
    """Years to add to *year* so :class:`datetime.date` can represent it."""
    return GREGORIAN_CYCLE_YEARS if year < MINYEAR else 0


# ---------------------------------------------------------------------------
# Calendar date
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class CalendarDate:
    """A proleptic Gregorian date anchored at midnight UTC.

    Construction validates the components through :class:`datetime.date`;
    an impossible combination raises ``ValueError``.  User input must go
    through :func:`~days_between.core.parser.parse_date` instead, which
    reports problems as :class:`~days_between.exceptions.DateParseError`.
    """

    year: int
    """Four-digit year, 0 through 9999."""

    month: int
    """Month of the year, 1 through 12."""

    day: int
    """Day of the month, 1 through 31."""

    def __post_init__(self) -> None:
        if not 0 <= self.year <= MAXYEAR:
            raise ValueError(f"year {self.year} is out of range")
        date(self.year + cycle_shift(self.year), self.month, self.day)

    @classmethod
    def from_date(cls, value: date) -> CalendarDate:
        """Keep only the year, month and day of *value*."""
        return cls(value.year, value.month, value.day)

    def to_date(self) -> date:
        """Return the equivalent :class:`datetime.date`.

        Raises ``ValueError`` for year 0, which ``date`` cannot hold.
        """
        return date(self.year, self.month, self.day)

    def as_utc_datetime(self) -> datetime:
        """Return the aware instant at 00:00:00 UTC on this date.

        Raises ``ValueError`` for year 0; use :meth:`utc_anchor` instead.
        """
        return datetime(self.year, self.month, self.day, tzinfo=timezone.utc)

    def utc_anchor(self) -> tuple[datetime, int]:
        """Return a representable UTC-midnight instant and its cycle shift.

        The instant lies ``cycles`` Gregorian cycles after this date, where
        ``cycles`` is the second element (0 for years 1 through 9999).
        """
        shift = cycle_shift(self.year)
        instant = datetime(self.year + shift, self.month, self.day, tzinfo=timezone.utc)
        return instant, shift // GREGORIAN_CYCLE_YEARS


# ---------------------------------------------------------------------------
# Range
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class DateRange:
    """An ordered pair of dates.

    The pair is *not* required to be chronological: when ``start`` is
    later than ``end`` the resulting day count is negative.
    """

    start: CalendarDate
    end: CalendarDate


# ---------------------------------------------------------------------------
# Result
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class DaysBetweenResult:
    """The value handed back across the core/CLI boundary."""

    days: int
    """Signed whole-day difference ``end - start``."""

    start_label: str
    """Canonical ``yyyy-mm-dd`` form of the start date actually used."""

    end_label: str
    """Canonical ``yyyy-mm-dd`` form of the end date."""
