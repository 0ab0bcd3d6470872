"""structlog configuration for days-between.

Two output modes:
- Human (default): colored console output to stderr
- JSON (--log-json): Structured JSON lines to stderr

Importing the package never touches structlog's global configuration.
Package loggers from :func:`get_logger` carry their own processor chain
and route through the stdlib ``logging`` tree, so library use of the core
stays silent until :func:`configure_logging` installs a handler.  Only
the CLI calls :func:`configure_logging`.
"""

from __future__ import annotations

import logging
import sys

import structlog

PACKAGE_LOGGER: str = "days_between"

_HANDLER_NAME: str = "days_between.stderr"

_SHARED_PROCESSORS: list[structlog.types.Processor] = [
    structlog.contextvars.merge_contextvars,
    structlog.stdlib.add_log_level,
    structlog.stdlib.add_logger_name,
    structlog.processors.TimeStamper(fmt="iso"),
    structlog.processors.StackInfoRenderer(),
    structlog.processors.UnicodeDecoder(),
]

_STDLIB_CHAIN: list[structlog.types.Processor] = [
    structlog.stdlib.filter_by_level,
    *_SHARED_PROCESSORS,
    structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
]


def configure_logging(
    *,
    verbose: bool = False,
    log_json: bool = False,
) -> None:
    """Configure structlog processors and output routing.

    Args:
        verbose: Enable DEBUG-level output. When False, only WARNING+.
        log_json: Use JSON renderer instead of console renderer.

    Calling this again replaces the handler installed by the previous
    call; handlers added by anything else are left alone.
    """
    level = logging.DEBUG if verbose else logging.WARNING

    if log_json:
        renderer: structlog.types.Processor = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())

    structlog.configure(
        processors=_STDLIB_CHAIN,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=_SHARED_PROCESSORS,
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            renderer,
        ],
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.set_name(_HANDLER_NAME)
    handler.setFormatter(formatter)

    package_logger = logging.getLogger(PACKAGE_LOGGER)
    for existing in list(package_logger.handlers):
        if existing.get_name() == _HANDLER_NAME:
            package_logger.removeHandler(existing)
    package_logger.addHandler(handler)
    package_logger.setLevel(level)
    package_logger.propagate = False


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Return a structlog logger routed through stdlib logger *name*.

    The processor chain is bound to the logger itself, so the host
    application's ``structlog.configure`` is neither needed nor consulted.
    """
    return structlog.wrap_logger(
        logging.getLogger(name),
        processors=_STDLIB_CHAIN,
        wrapper_class=structlog.stdlib.BoundLogger,
    )
