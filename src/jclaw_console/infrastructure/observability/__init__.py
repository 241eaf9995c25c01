"""
Observability infrastructure for the operator console.

This package provides:
- Structured logging (structlog) with secret masking
- Log context management
"""

from jclaw_console.infrastructure.observability.logging import (
    configure_logging,
    get_logger,
    mask_secrets_in_dict,
)
from jclaw_console.infrastructure.observability.context import (
    log_context,
    operation_context,
)

__all__ = [
    "configure_logging",
    "get_logger",
    "mask_secrets_in_dict",
    "log_context",
    "operation_context",
]
