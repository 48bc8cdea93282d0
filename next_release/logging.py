"""structlog setup for next-release.

Log events go to stderr, so stdout only ever carries the computed version
or the releases document. ``--json-log`` switches the console renderer for
one JSON object per line.
"""

from __future__ import annotations

import logging
import sys

import structlog


def configure_logging(
    *,
    verbose: bool = False,
    quiet: bool = False,
    json_log: bool = False,
) -> None:
    """Route structlog events through a stderr handler.

    Args:
        verbose: Also show debug events such as the selected bump.
        quiet: Only show warnings and errors.
        json_log: Render events as JSON lines.
    """
    level = logging.WARNING if quiet else logging.DEBUG if verbose else logging.INFO

    if json_log:
        renderer: structlog.types.Processor = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                renderer,
            ],
        )
    )
    logging.basicConfig(handlers=[handler], level=level, force=True)

    structlog.configure(
        processors=[
            structlog.stdlib.add_log_level,
            structlog.stdlib.add_logger_name,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
    )


def get_logger(name: str = "next_release") -> structlog.stdlib.BoundLogger:
    return structlog.get_logger(name)
