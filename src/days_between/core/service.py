"""Core day-count service — the pipeline behind the public facade.

It depends on a :class:`~days_between.core.protocols.Clock` injected at
construction time (dependency inversion), keeping the core free of any
ambient wall-clock reads.

Guarantees
----------
* Pure orchestration — no I/O, no ``print()``.
* Only :class:`~days_between.exceptions.DateParseError` escapes as a
  recoverable error; everything else is a defect and propagates.
* The clock is sampled at most once per :meth:`DaysBetweenService.calculate`.
"""

from __future__ import annotations

from days_between.core.counter import count_days
from days_between.core.formatter import format_date
from days_between.core.models import DaysBetweenResult
from days_between.core.protocols import Clock
from days_between.core.resolver import resolve_range


class DaysBetweenService:
    """Stateless service computing signed day counts.

    Parameters
    ----------
    clock:
        Any object satisfying the :class:`Clock` protocol.  Only
        consulted when a single date is supplied.
    """

    def __init__(self, clock: Clock) -> None:
        self._clock: Clock = clock

    def calculate(
        self,
        primary: str,
        secondary: str | None = None,
    ) -> DaysBetweenResult:
        """Count the days from start to end.

        With one argument the range runs from today to *primary*; with
        two it runs from *primary* to *secondary*.

        Raises
        ------
        DateParseError
            If either argument is malformed or names a nonexistent day.
        """
        date_range = resolve_range(primary, secondary, clock=self._clock)
        return DaysBetweenResult(
            days=count_days(date_range),
            start_label=format_date(date_range.start),
            end_label=format_date(date_range.end),
        )
