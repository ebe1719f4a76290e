"""Observability infrastructure module.

Structured logging with correlation IDs and masking of 911 address data.
"""

from voip_api.platform.observability.logging import (
    add_correlation_id,
    configure_logging,
    correlation_id_ctx,
    correlation_scope,
    get_logger,
    redact_sensitive_fields,
)

__all__ = [
    "add_correlation_id",
    "configure_logging",
    "correlation_id_ctx",
    "correlation_scope",
    "get_logger",
    "redact_sensitive_fields",
]
