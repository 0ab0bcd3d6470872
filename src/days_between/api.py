"""Public entry point: wires the real clock into the core service."""

from __future__ import annotations

from days_between.core.models import DaysBetweenResult
from days_between.core.protocols import Clock
from days_between.core.service import DaysBetweenService
from days_between.infra.local_clock import LocalClock


def days_between_dates(
    primary: str,
    secondary: str | None = None,
    *,
    clock: Clock | None = None,
) -> DaysBetweenResult:
    """Return the signed number of days between two dates.

    ``days_between_dates("2020-01-01", "2020-01-02").days == 1``.  With a
    single argument the start is today's local date, read once from
    *clock* (a fresh :class:`LocalClock` when omitted).

    Raises
    ------
    DateParseError
        If an argument is not a valid ``yyyy-mm-dd`` date.
    """
    service = DaysBetweenService(clock if clock is not None else LocalClock())
    return service.calculate(primary, secondary)
