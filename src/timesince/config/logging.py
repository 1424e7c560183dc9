"""structlog wiring for the timesince CLI.

Everything goes to stderr so stdout stays clean for piped values.  Log
lines render either through structlog's console renderer or, with
``--log-json``, as one JSON object per line.  Package modules log through
stdlib ``logging`` and pass their fields via ``extra=``, so a library
caller that never configures logging gets no debug output.  The calculator logs debug
events ("elapsed_computed", "invalid_reference") that only show up with
``--verbose``; locale fallbacks are warnings and always show.
"""

from __future__ import annotations

import logging
import sys

import structlog

APP_LOGGER = "timesince"
QUIET_LOGGERS = ("babel",)

_SHARED_PROCESSORS: list[structlog.types.Processor] = [
    structlog.contextvars.merge_contextvars,
    structlog.stdlib.add_log_level,
    structlog.stdlib.add_logger_name,
    structlog.processors.TimeStamper(fmt="iso"),
    structlog.processors.StackInfoRenderer(),
    structlog.processors.UnicodeDecoder(),
]


def _renderer(log_json: bool) -> structlog.types.Processor:
    if log_json:
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())


def _stderr_handler(log_json: bool) -> logging.Handler:
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=[*_SHARED_PROCESSORS, structlog.stdlib.ExtraAdder()],
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                _renderer(log_json),
            ],
        )
    )
    return handler


def configure_logging(*, verbose: bool = False, log_json: bool = False) -> None:
    """Route structlog through stdlib logging to a single stderr handler.

    Safe to call repeatedly: the root handler is replaced, never stacked.

    Args:
        verbose: Lower the ``timesince`` logger to DEBUG.
        log_json: Render JSON lines instead of console output.
    """
    structlog.configure(
        processors=[
            *_SHARED_PROCESSORS,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(_stderr_handler(log_json))
    root.setLevel(logging.WARNING)

    logging.getLogger(APP_LOGGER).setLevel(logging.DEBUG if verbose else logging.WARNING)
    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
