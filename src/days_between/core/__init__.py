"""Core / service layer — pure parsing and date arithmetic.

Rules
-----
* No ``print()`` calls.
* No wall-clock reads; "today" arrives through the ``Clock`` protocol.
* No imports from ``cli`` or ``infra``.
* All functions must be fully typed and deterministic.
"""

from days_between.core.counter import count_days
from days_between.core.formatter import format_date
from days_between.core.models import CalendarDate, DateRange, DaysBetweenResult
from days_between.core.parser import parse_date
from days_between.core.protocols import Clock
from days_between.core.resolver import resolve_range
from days_between.core.service import DaysBetweenService

__all__: list[str] = [
    "CalendarDate",
    "Clock",
    "DateRange",
    "DaysBetweenResult",
    "DaysBetweenService",
    "count_days",
    "format_date",
    "parse_date",
    "resolve_range",
]
