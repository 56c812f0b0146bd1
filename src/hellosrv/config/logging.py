"""structlog configuration for hellosrv.

Two output modes, both on stderr so stdout stays empty:
- Human (default): console renderer, colored only on a TTY
- JSON (--log-json): one JSON object per line

Requests are never logged; only lifecycle events (bind, failure, stop).
"""

from __future__ import annotations

import logging
import sys

import structlog

PACKAGE_LOGGER = "hellosrv"


def _pre_chain() -> list[structlog.types.Processor]:
    """Processors applied to both structlog and plain ``logging`` records."""
    return [
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


def configure_logging(*, verbose: bool = False, log_json: bool = False) -> None:
    """Route all log output through one structlog-formatted stderr handler.

    Safe to call repeatedly; each call replaces the previous handler.

    Args:
        verbose: Let ``hellosrv.*`` loggers emit DEBUG and INFO records.
            Otherwise only WARNING and above get through.
        log_json: Render JSON lines instead of console text.
    """
    pre_chain = _pre_chain()

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

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(logging.WARNING)

    logging.getLogger(PACKAGE_LOGGER).setLevel(logging.DEBUG if verbose else logging.WARNING)
