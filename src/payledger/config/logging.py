"""structlog configuration for payledger.

The menu owns stdout, so every log line goes to stderr.  The handler hangs
off the ``payledger`` logger rather than the root logger: an interactive
session never reconfigures logging that belongs to anything else.

Human mode drops timestamps (the user is watching the same terminal);
``--log-json`` keeps them in UTC for anyone piping the session to a file.
"""

from __future__ import annotations

import logging
import sys

import structlog

LOGGER_NAME = "payledger"


def configure_logging(
    *,
    verbose: bool = False,
    log_json: bool = False,
) -> None:
    """Route payledger's structlog and stdlib records to stderr.

    Args:
        verbose: Emit DEBUG records (rejected inputs, commits, reports).
        log_json: One JSON object per line instead of console rendering.
    """
    pre_chain: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
    ]
    renderer: structlog.types.Processor
    if log_json:
        pre_chain.append(structlog.processors.TimeStamper(fmt="iso", utc=True))
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())

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
            processors=[structlog.stdlib.ProcessorFormatter.remove_processors_meta, renderer],
        )
    )

    logger = logging.getLogger(LOGGER_NAME)
    logger.handlers.clear()
    logger.addHandler(handler)
    logger.propagate = False
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
