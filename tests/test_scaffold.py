"""Smoke tests — verify package wiring.

These tests prove that:
* The CLI entry point is importable and callable.
* The exception hierarchy is correctly structured.
* Version is accessible.
* Exit codes are defined.
"""

from __future__ import annotations

import pytest

from days_between import __version__
from days_between.cli import exit_codes
from days_between.cli.app import main
from days_between.exceptions import EXPECTED_FORMAT, DateParseError, DaysBetweenError


# ---------------------------------------------------------------------------
# Version
# ---------------------------------------------------------------------------

class TestVersion:
    def test_version_is_string(self) -> None:
        assert isinstance(__version__, str)

    def test_version_is_semver_like(self) -> None:
        parts = __version__.split(".")
        assert len(parts) == 3
        assert all(part.isdigit() for part in parts)


# ---------------------------------------------------------------------------
# Exception hierarchy
# ---------------------------------------------------------------------------

class TestExceptions:
    def test_parse_error_inherits_from_base(self) -> None:
        assert issubclass(DateParseError, DaysBetweenError)

    def test_base_inherits_from_exception(self) -> None:
        assert issubclass(DaysBetweenError, Exception)

    def test_hint_is_stored(self) -> None:
        err = DaysBetweenError("boom", hint="try this")
        assert str(err) == "boom"
        assert err.message == "boom"
        assert err.hint == "try this"

    def test_hint_defaults_to_none(self) -> None:
        err = DaysBetweenError("boom")
        assert err.hint is None

    def test_malformed_template(self) -> None:
        err = DateParseError.malformed("x")
        assert err.message == 'Invalid date format: "x". Please specify as "yyyy-mm-dd"'

    def test_nonexistent_template(self) -> None:
        err = DateParseError.nonexistent("2020-02-30")
        assert err.message == 'Invalid date: "2020-02-30"'

    @pytest.mark.parametrize(
        "err",
        [DateParseError.malformed("1/1/2020"), DateParseError.nonexistent("2019-02-29")],
    )
    def test_hint_names_expected_format(self, err: DateParseError) -> None:
        assert err.hint is not None
        assert EXPECTED_FORMAT in err.hint


# ---------------------------------------------------------------------------
# Exit codes
# ---------------------------------------------------------------------------

class TestExitCodes:
    def test_success_is_zero(self) -> None:
        assert exit_codes.SUCCESS == 0

    def test_general_error_is_one(self) -> None:
        assert exit_codes.GENERAL_ERROR == 1

    def test_keyboard_interrupt_is_130(self) -> None:
        assert exit_codes.KEYBOARD_INTERRUPT == 130


# ---------------------------------------------------------------------------
# CLI wiring
# ---------------------------------------------------------------------------

class TestCLIWiring:
    def test_version_flag(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["--version"])
        assert exc_info.value.code == 0

    def test_module_entry_point_importable(self) -> None:
        import days_between.__main__ as entry

        assert callable(entry.cli)
