"""Structured logging — JSON in prod, console in dev, every event tagged with the service."""

from __future__ import annotations

import logging
import sys

import structlog

from config.settings import Settings, settings as default_settings

# Libraries that log request-level chatter at INFO.
_NOISY_LOGGERS = ("web3", "urllib3", "asyncio")


def _service_context(settings: Settings) -> structlog.types.Processor:
    """Stamp ``app`` and ``env`` on every event so intake logs can be filtered per deployment."""

    def add_service(logger: object, method_name: str, event_dict: dict) -> dict:
        event_dict.setdefault("app", settings.APP_NAME)
        event_dict.setdefault("env", settings.APP_ENV)
        return event_dict

    return add_service


def setup_logging(settings: Settings | None = None) -> None:
    """Configure structlog processors and stdlib integration."""
    settings = settings or default_settings
    level = logging.getLevelName(settings.LOG_LEVEL.upper())

    shared_processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        _service_context(settings),
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]

    if settings.APP_ENV == "dev":
        renderer: structlog.types.Processor = structlog.dev.ConsoleRenderer(
            colors=sys.stdout.isatty()
        )
    else:
        renderer = structlog.processors.JSONRenderer()

    structlog.configure(
        processors=[
            *shared_processors,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    formatter = structlog.stdlib.ProcessorFormatter(
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            renderer,
        ],
    )

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(formatter)

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(level)

    for name in _NOISY_LOGGERS:
        logging.getLogger(name).setLevel(max(level, logging.WARNING))
