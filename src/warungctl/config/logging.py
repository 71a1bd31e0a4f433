"""structlog setup for warungctl.

Diagnostics always go to stderr so stdout stays clean for results and
``--json`` payloads.  Records from stdlib ``logging`` (services and the
render binding log that way) pass through the same structlog processors,
so ``--log-json`` yields one JSON object per line for everything.

The workspace a command acts on is bound into the log context, which
makes it visible on every line once a command runs from a subdirectory.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path

import structlog

APP_LOGGER = "warungctl"


def _app_level(*, verbose: bool, quiet: bool) -> int:
    if verbose:
        return logging.DEBUG
    if quiet:
        return logging.ERROR
    return logging.WARNING


def configure_logging(
    *,
    verbose: bool = False,
    quiet: bool = False,
    log_json: bool = False,
) -> None:
    """Route warungctl and third-party logging through structlog.

    Args:
        verbose: DEBUG for warungctl loggers.  Wins over *quiet*.
        quiet: Only errors from warungctl loggers.
        log_json: JSON lines instead of the console renderer.
    """
    shared_processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]

    if log_json:
        renderer: structlog.types.Processor = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())

    structlog.configure(
        processors=[
            *shared_processors,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=shared_processors,
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                renderer,
            ],
        )
    )

    # Repeated calls (one per CLI invocation in tests) replace the handler.
    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(logging.WARNING)

    logging.getLogger(APP_LOGGER).setLevel(_app_level(verbose=verbose, quiet=quiet))


def bind_workspace(root: Path) -> None:
    """Tag every following log line with the workspace root."""
    structlog.contextvars.clear_contextvars()
    structlog.contextvars.bind_contextvars(workspace=str(root))
