"""Allow ``python -m days_between`` invocation.

This module simply delegates to the CLI error-boundary entry point so
that ``python -m days_between`` behaves identically to the
``days-between`` console script.
"""

from __future__ import annotations

from days_between.cli.app import cli

if __name__ == "__main__":
    cli()
