"""
Structured Logging

Every service logs through structlog with the stdlib integration, so
events end up in the standard logging tree and can be captured by any
handler (including pytest's caplog).

The calculator and validators are pure and never log. Only the
services that persist or reject submissions do.
"""

import logging
import sys
from typing import Optional

import structlog

from freelance_ledger.config import get_settings

_configured = False


def configure_logging(
    level: Optional[str] = None,
    json_output: Optional[bool] = None,
) -> None:
    """
    Configure structlog and the stdlib root handler.

    Args:
        level: Log level name. Defaults to the configured log_level.
        json_output: Render JSON lines instead of console output.
                     Defaults to the configured log_json.
    """
    global _configured

    app_settings = get_settings().app
    level = (level or app_settings.log_level).upper()
    if json_output is None:
        json_output = app_settings.log_json

    renderer = (
        structlog.processors.JSONRenderer()
        if json_output
        else structlog.dev.ConsoleRenderer(colors=False)
    )

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stderr,
        level=getattr(logging, level),
    )
    logging.getLogger("freelance_ledger").setLevel(getattr(logging, level))

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            renderer,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )
    _configured = True


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Return a bound logger, configuring logging on first use."""
    if not _configured:
        configure_logging()
    return structlog.get_logger(name)
