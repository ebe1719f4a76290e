"""Structured logging for the provisioning clients.

Log events carry the action, environment and caller correlation ID. Address
and caller fields are 911 registration data and are masked before rendering.

Usage:
    configure_logging(Settings())

    with correlation_scope("batch-2024-06-01"):
        client.query_911("2065551234")
"""

import logging
import sys
from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from typing import TYPE_CHECKING

import structlog

if TYPE_CHECKING:
    from voip_api.platform.settings import Settings

correlation_id_ctx: ContextVar[str | None] = ContextVar("correlation_id", default=None)

REDACTED = "[redacted]"

# Argument names that hold street addresses, caller names or contact emails
SENSITIVE_FIELDS = frozenset(
    {"address1", "address2", "city", "state", "zip", "plus_four", "caller_name", "email"}
)


@contextmanager
def correlation_scope(correlation_id: str) -> Iterator[str]:
    """Tag every log event emitted inside the block with a correlation ID."""
    token = correlation_id_ctx.set(correlation_id)
    try:
        yield correlation_id
    finally:
        correlation_id_ctx.reset(token)


def add_correlation_id(
    logger: structlog.types.WrappedLogger,
    method_name: str,
    event_dict: structlog.types.EventDict,
) -> structlog.types.EventDict:
    """Processor that adds the current correlation_id, if any."""
    correlation_id = correlation_id_ctx.get()
    if correlation_id:
        event_dict.setdefault("correlation_id", correlation_id)
    return event_dict


def redact_sensitive_fields(
    logger: structlog.types.WrappedLogger,
    method_name: str,
    event_dict: structlog.types.EventDict,
) -> structlog.types.EventDict:
    """Processor that masks address and caller fields."""
    for key in SENSITIVE_FIELDS.intersection(event_dict):
        event_dict[key] = REDACTED
    return event_dict


def _shared_processors() -> list[structlog.types.Processor]:
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        add_correlation_id,
        redact_sensitive_fields,
    ]


def configure_logging(settings: "Settings") -> None:
    """Route structlog and stdlib logging through one stdout handler.

    Args:
        settings: Application settings; the level comes from ``settings.logging``
            and the output format from ``settings.log_json_output``.
    """
    shared_processors = _shared_processors()

    if settings.log_json_output:
        renderer: structlog.types.Processor = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=sys.stdout.isatty())

    structlog.configure(
        processors=[*shared_processors, structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=shared_processors,
            processors=[structlog.stdlib.ProcessorFormatter.remove_processors_meta, renderer],
        )
    )

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(settings.logging.level)


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    return structlog.get_logger(name)
