"""
Log context management for adding contextual information to structured logs.

Usage:
    from jclaw_console.infrastructure.observability.context import log_context

    with log_context(tab="admin"):
        logger.info("tab initialized")  # Includes tab="admin"
"""
from typing import Any, Optional
from contextlib import contextmanager
import structlog


@contextmanager
def log_context(**kwargs: Any):
    """
    Context manager for adding context to logs.

    All key-value pairs passed to this context manager are included in every
    log entry made within the context and removed again on exit.

    Example:
        >>> with log_context(controller="sessions", agent_filter="support"):
        ...     logger.info("loading sessions")
    """
    structlog.contextvars.bind_contextvars(**kwargs)
    try:
        yield
    finally:
        structlog.contextvars.unbind_contextvars(*kwargs.keys())


@contextmanager
def operation_context(operation: str, resource_type: Optional[str] = None, **kwargs: Any):
    """
    Context manager for operator-initiated mutations.

    Adds `operation` and `resource_type` to every log entry of the block.

    Example:
        >>> with operation_context("archive", resource_type="session", session_id="s-1"):
        ...     logger.info("archiving session")
    """
    context = {"operation": operation}
    if resource_type is not None:
        context["resource_type"] = resource_type
    context.update(kwargs)

    with log_context(**context):
        yield


__all__ = [
    "log_context",
    "operation_context",
]
