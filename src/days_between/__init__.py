"""days-between — signed day counts between ISO calendar dates.

Strict ``yyyy-mm-dd`` parsing over a small layered core, exposed through
a command-line interface.
"""

from days_between.api import days_between_dates
from days_between.exceptions import DateParseError
from days_between.version import __version__

__all__: list[str] = ["DateParseError", "__version__", "days_between_dates"]
