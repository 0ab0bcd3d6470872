"""Wall-clock adapter satisfying :class:`~days_between.core.protocols.Clock`.

The local date is read and its year/month/day are reinterpreted as a
UTC-midnight date.  No instant conversion happens: 1 January in the
caller's timezone becomes 1 January UTC, whatever the offset.
"""

from __future__ import annotations

from collections.abc import Callable
from datetime import datetime

from days_between.core.models import CalendarDate


class LocalClock:
    """Clock backed by the host's local time.

    Parameters
    ----------
    now:
        Zero-argument callable returning the current *local* datetime.
        Defaults to :meth:`datetime.now`; tests pass a fixed value.
    """

    def __init__(self, now: Callable[[], datetime] = datetime.now) -> None:
        self._now: Callable[[], datetime] = now

    def today(self) -> CalendarDate:
        current = self._now()
        return CalendarDate(current.year, current.month, current.day)
