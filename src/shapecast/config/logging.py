"""structlog wiring for the shapecast CLI.

Only the ``shapecast`` logger tree gets a handler; the root logger of a host
application is left untouched. Records pick up whatever the running command
bound through ``structlog.contextvars`` (``repair`` binds the validator
reference and the input source), whether they come from structlog loggers
or from the stdlib loggers used inside the library.
"""

from __future__ import annotations

import logging
import sys

import structlog

LOGGER_NAME = "shapecast"


def _renderer(log_json: bool) -> structlog.types.Processor:
    if log_json:
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())


def configure_logging(*, verbose: bool = False, log_json: bool = False) -> logging.Logger:
    """Route ``shapecast`` records to stderr and return the package logger.

    Safe to call repeatedly: the previous handler is replaced, not stacked.

    Args:
        verbose: Emit DEBUG records (schema assembly, loading, repair).
            Otherwise only WARNING and above.
        log_json: One JSON object per line instead of console output.
    """
    pre_chain: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
    ]
    structlog.configure(
        processors=[*pre_chain, structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=pre_chain,
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                _renderer(log_json),
            ],
        )
    )

    logger = logging.getLogger(LOGGER_NAME)
    logger.handlers.clear()
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    logger.propagate = False
    return logger
