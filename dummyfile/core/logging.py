"""Structured logging for generation runs.

Events go through structlog to stdlib logging on stderr, so stdout only
carries the per-file report. The CLI binds a short ``run_id`` with
``structlog.contextvars`` for the duration of a run; ``merge_contextvars``
adds it to every event logged in between.
"""

import logging
import sys
from uuid import uuid4

import structlog

from dummyfile.config import Settings, get_settings

# Third-party loggers that are noisy below WARNING
QUIET_LOGGERS = ("PIL",)


def _renderers(settings: Settings) -> list[structlog.typing.Processor]:
    if settings.is_development:
        return [structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())]
    return [
        structlog.processors.format_exc_info,
        structlog.processors.JSONRenderer(),
    ]


def configure_logging(settings: Settings | None = None) -> None:
    """Configure structlog for the generator.

    Args:
        settings: Settings providing environment and log level
            (default: the cached application settings)
    """
    settings = settings or get_settings()
    level = logging.getLevelName(settings.log_level)
    if not isinstance(level, int):
        level = logging.INFO

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.add_log_level,
            structlog.stdlib.add_logger_name,
            structlog.processors.TimeStamper(fmt="iso"),
            *_renderers(settings),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logging.basicConfig(format="%(message)s", stream=sys.stderr, level=level)
    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """Get a structured logger, typically for ``__name__``."""
    return structlog.get_logger(name)


def generate_run_id() -> str:
    """Short correlation id for one generation run."""
    return uuid4().hex[:8]
