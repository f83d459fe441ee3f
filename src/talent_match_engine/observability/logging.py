"""Structured logging for talent-match.

Every entry carries the configured ``service`` name, and entries logged
while a request is bound also carry ``request_id`` and the bound keys
(the CLI binds ``command``). Stdlib records from SQLAlchemy and the
database drivers go through the same renderer.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING
from uuid import uuid4

import structlog
from structlog.contextvars import bind_contextvars, clear_contextvars, merge_contextvars

if TYPE_CHECKING:
    from structlog.types import EventDict, Processor, WrappedLogger

    from talent_match_core.config.settings import Settings


def configure_logging(settings: Settings) -> None:
    """Route structlog and stdlib logging through one console or JSON handler."""
    shared_processors: list[Processor] = [
        merge_contextvars,
        _service_stamper(settings.log_service_name),
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]

    renderer: Processor
    if settings.log_format == "json":
        shared_processors.append(structlog.processors.dict_tracebacks)
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer()

    level = _resolve_level(settings.log_level)

    structlog.configure(
        processors=[
            *shared_processors,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    handler = logging.StreamHandler()
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                renderer,
            ],
            foreign_pre_chain=shared_processors,
        )
    )
    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(level)

    for name in settings.log_quiet_loggers:
        logging.getLogger(name).setLevel(max(level, logging.WARNING))


def bind_request_context(command: str, request_id: str | None = None, **extra: object) -> str:
    """Start a new request context for ``command`` and return its request id.

    Keys bound by an earlier request are dropped first.
    """
    request_id = request_id or uuid4().hex[:12]
    clear_contextvars()
    bind_contextvars(request_id=request_id, command=command, **extra)
    return request_id


def clear_request_context() -> None:
    """Clear all bound context variables."""
    clear_contextvars()


def _service_stamper(service: str) -> Processor:
    def add_service(_logger: WrappedLogger, _method: str, event_dict: EventDict) -> EventDict:
        event_dict.setdefault("service", service)
        return event_dict

    return add_service


def _resolve_level(level_name: str) -> int:
    """Convert a level name to a logging level; unknown names map to INFO."""
    return logging.getLevelNamesMapping().get(level_name.upper(), logging.INFO)
