"""Canonical rendering of :class:`CalendarDate` values."""

from __future__ import annotations

from days_between.core.models import CalendarDate


def format_date(value: CalendarDate) -> str:
    """Return the zero-padded ``yyyy-mm-dd`` form of *value*.

    Built from the stored components, so the local timezone never
    influences the label.
    """
    return f"{value.year:04d}-{value.month:02d}-{value.day:02d}"
