# group_portal/shared/logging_config.py
"""
Structured logging.

Application code logs snake_case structlog events with keyword fields.
Records from libraries that use the standard `logging` module (uvicorn,
SQLAlchemy) go to the same stream.
"""
import sys
import logging
from typing import Optional

import structlog
from opentelemetry import trace

from group_portal.shared.config import Settings, settings as default_settings

# Chatty below WARNING unless DEBUG is on
NOISY_LOGGERS = ("sqlalchemy.engine", "uvicorn.access")

def add_open_telemetry_spans(_, __, event_dict):
    """Adds the active trace and span ids (None outside a recording span)."""
    span = trace.get_current_span()
    if not span.is_recording():
        event_dict["trace_id"] = None
        event_dict["span_id"] = None
        return event_dict

    ctx = span.get_span_context()
    event_dict["trace_id"] = format(ctx.trace_id, "032x")
    event_dict["span_id"] = format(ctx.span_id, "016x")
    return event_dict

def service_context(config: Settings):
    """Processor stamping each event with the service name and environment."""
    def add_service_context(_, __, event_dict):
        event_dict.setdefault("service", config.APP_NAME)
        event_dict.setdefault("env", config.APP_ENV.value)
        return event_dict
    return add_service_context

def build_processors(config: Settings) -> list:
    processors = [
        structlog.contextvars.merge_contextvars,
        service_context(config),
        add_open_telemetry_spans,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]
    if config.LOG_FORMAT == "json":
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer())
    return processors

def configure_logging(config: Optional[Settings] = None) -> None:
    """
    Configures structlog from `config` (the process settings by default):
    JSON lines when LOG_FORMAT is "json", colored console output otherwise.
    """
    config = config or default_settings
    level = logging.getLevelName(config.LOG_LEVEL.upper())

    structlog.configure(
        processors=build_processors(config),
        wrapper_class=structlog.make_filtering_bound_logger(level),
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logging.basicConfig(format="%(message)s", stream=sys.stdout, level=level)
    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.DEBUG if config.DEBUG else logging.WARNING)
