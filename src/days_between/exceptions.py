"""Custom exception hierarchy for days-between.

Every recoverable error raised by the package inherits from
:class:`DaysBetweenError`.  Anything else that escapes the core (a
``TypeError`` from misuse, a broken invariant) is a defect and is left
to propagate untouched.

Hierarchy
---------
DaysBetweenError
└── DateParseError
"""

from __future__ import annotations

EXPECTED_FORMAT: str = "yyyy-mm-dd"
"""Human-readable description of the only accepted input format."""


class DaysBetweenError(Exception):
    """Base exception for all days-between errors.

    The CLI error boundary catches this type, renders the message, and
    exits with :data:`~days_between.cli.exit_codes.GENERAL_ERROR`.
    """

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""

    @property
    def message(self) -> str:
        """The error message exactly as it was raised."""
        return str(self.args[0]) if self.args else ""


class DateParseError(DaysBetweenError):
    """Raised when an input string is not a valid ``yyyy-mm-dd`` date.

    Two message shapes exist and callers match on their prefixes:

    * ``Invalid date format: "<input>". ...`` — the string is malformed.
    * ``Invalid date: "<input>"`` — well-formed, but no such calendar day.
    """

    @classmethod
    def malformed(cls, value: str) -> DateParseError:
        """Build the error for a string that fails the format check."""
        return cls(
            f'Invalid date format: "{value}". '
            f'Please specify as "{EXPECTED_FORMAT}"',
            hint=f"Use {EXPECTED_FORMAT} with no spaces or time, e.g. 2020-01-31.",
        )

    @classmethod
    def nonexistent(cls, value: str) -> DateParseError:
        """Build the error for a well-formed string naming no real day."""
        return cls(
            f'Invalid date: "{value}"',
            hint=(
                f"Use a real day in {EXPECTED_FORMAT} form: "
                "month 01-12 and a day that exists in that month."
            ),
        )
