"""CLI console helpers built on Rich.

Consoles are created per call rather than at import time so that the
current ``sys.stdout``/``sys.stderr`` are always the targets (pytest's
``capsys`` swaps them per test).
"""

from __future__ import annotations

from rich.console import Console


def get_rich_console(*, stderr: bool = False) -> Console:
    """Create a Rich console targeting stdout, or stderr when asked."""
    return Console(stderr=stderr, highlight=False, emoji=False, soft_wrap=True)


class _ConsoleProxy:
    """Minimal ``print``-compatible proxy over a fresh Rich console."""

    def __init__(self, *, stderr: bool) -> None:
        self._stderr = stderr

    def print(self, *objects: object) -> None:
        get_rich_console(stderr=self._stderr).print(*objects)


console = _ConsoleProxy(stderr=False)
"""Results go to stdout."""

err_console = _ConsoleProxy(stderr=True)
"""Errors and diagnostics go to stderr."""

__all__: list[str] = ["console", "err_console", "get_rich_console"]
