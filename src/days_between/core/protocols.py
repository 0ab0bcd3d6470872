"""Protocols (interfaces) consumed by the core layer.

Core code depends ONLY on these protocols — never on concrete
implementations — so the ambient "today" can be swapped for a fixed
date in tests.
"""

from __future__ import annotations

from typing import Protocol

from days_between.core.models import CalendarDate


class Clock(Protocol):
    """Contract for sources of the current calendar date.

    Any object that implements :meth:`today` with the correct signature
    satisfies this protocol structurally (no explicit inheritance
    required).
    """

    def today(self) -> CalendarDate:
        """Return the current date as a UTC-midnight :class:`CalendarDate`.

        Implementations read ambient state; callers must sample it at
        most once per calculation so that a call made near midnight
        never observes two different days.
        """
        ...  # pragma: no cover
