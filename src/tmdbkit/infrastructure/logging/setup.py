from __future__ import annotations

import copy
import logging
import logging.config
from typing import Any

import structlog

from tmdbkit.infrastructure.config.schema import TmdbSettings


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Return a structlog logger that emits through the stdlib logger *name*.

    Level filtering is left to stdlib logging, so a host application that
    never configures logging only sees WARNING and above.
    """
    return structlog.wrap_logger(
        logging.getLogger(name), wrapper_class=structlog.stdlib.BoundLogger
    )


log = get_logger(__name__)

BASE_LOGGING_CONFIG: dict[str, Any] = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {},
    "handlers": {
        "default": {
            "class": "logging.StreamHandler",
            "stream": "ext://sys.stderr",
        },
    },
    "loggers": {
        "tmdbkit": {"handlers": ["default"], "level": "INFO", "propagate": False},
        "httpx": {"handlers": ["default"], "level": "WARNING", "propagate": False},
    },
}


def _build_renderer(settings: TmdbSettings) -> structlog.typing.Processor:
    if settings.log_format == "json":
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer()


def build_logging_config(settings: TmdbSettings) -> dict[str, Any]:
    """
    Build a dictConfig that renders stdlib and structlog records through
    structlog's ProcessorFormatter.
    """
    cfg = copy.deepcopy(BASE_LOGGING_CONFIG)

    cfg["formatters"]["structlog"] = {
        "()": structlog.stdlib.ProcessorFormatter,
        # foreign_pre_chain runs for plain logging records (httpx, httpcore)
        "foreign_pre_chain": [
            structlog.contextvars.merge_contextvars,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
        ],
        "processors": [
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            _build_renderer(settings),
        ],
    }
    cfg["handlers"]["default"]["formatter"] = "structlog"

    level = settings.log_level
    cfg["loggers"]["tmdbkit"]["level"] = "DEBUG" if settings.debug else level
    # httpx logs one INFO line per request; only surface it in debug mode.
    if settings.debug:
        cfg["loggers"]["httpx"]["level"] = "DEBUG"

    cfg["root"] = {"handlers": ["default"], "level": level}
    return cfg


def configure_logging(settings: TmdbSettings) -> dict[str, Any]:
    """
    Configure structlog + stdlib logging for an application using tmdbkit.

    The library never calls this itself; applications opt in.
    """
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.contextvars.merge_contextvars,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.format_exc_info,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    cfg = build_logging_config(settings)
    logging.config.dictConfig(cfg)
    log.info(
        "logging_configured",
        log_format=settings.log_format,
        log_level=settings.log_level,
    )
    return cfg
