"""Infrastructure layer — adapters over ambient host state.

Adapters here satisfy the protocols declared in
:mod:`days_between.core.protocols`.
"""

from days_between.infra.local_clock import LocalClock

__all__: list[str] = ["LocalClock"]
