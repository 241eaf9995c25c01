"""
Structured logging configuration.

Use `get_logger(__name__)` from this module, not print() or logging.getLogger().
"""
from typing import Optional, Any
import structlog
from jclaw_console.config.settings import get_settings


# Key fragments whose values never reach the log output (case-insensitive)
SENSITIVE_KEYS = frozenset({
    "password",
    "secret",
    "token",
    "xsrf",
    "csrf",
    "cookie",
    "authorization",
})


def mask_secret(value: str) -> str:
    """Mask a secret value for safe logging."""
    return "****" if value else ""


def mask_secrets_in_dict(data: dict) -> dict:
    """
    Mask sensitive values in a dictionary for safe logging.

    Header maps are masked too, so a logged `headers={"X-XSRF-TOKEN": ...}`
    never leaks the anti-forgery token.

    Args:
        data: Dictionary potentially containing secrets

    Returns:
        New dictionary with sensitive values masked
    """
    masked = {}
    for key, value in data.items():
        key_lower = str(key).lower()
        should_mask = any(sensitive in key_lower for sensitive in SENSITIVE_KEYS)

        if should_mask and isinstance(value, str):
            masked[key] = mask_secret(value)
        elif isinstance(value, dict):
            masked[key] = mask_secrets_in_dict(value)
        else:
            masked[key] = value

    return masked


def mask_secrets_processor(logger_obj: Any, method_name: str, event_dict: dict) -> dict:
    """
    Structlog processor that masks sensitive fields.

    Disabled when `log_mask_secrets` is off (local debugging only).
    """
    if get_settings().log_mask_secrets:
        return mask_secrets_in_dict(event_dict)
    return event_dict


def console_renderer_with_colors():
    """Create a console renderer with colors for development."""
    return structlog.dev.ConsoleRenderer(
        colors=True,
        pad_event=25,
        exception_formatter=structlog.dev.plain_traceback,
    )


def json_renderer():
    """Create a JSON renderer for production."""
    return structlog.processors.JSONRenderer()


def configure_logging() -> None:
    """
    Configure structured logging with secret masking and context.

    This sets up the logging system with:
    - Context variable merging (for log_context usage)
    - Log level and ISO timestamps
    - Automatic masking of tokens, cookies and passwords
    - JSON formatting for production or colored console for development
    """
    settings = get_settings()

    if settings.log_format == "json":
        renderer = json_renderer()
    else:
        renderer = console_renderer_with_colors()

    processors = [
        # 1. Merge context variables (allows log_context to work)
        structlog.contextvars.merge_contextvars,

        # 2. Add log level
        structlog.processors.add_log_level,

        # 3. Add timestamp
        structlog.processors.TimeStamper(fmt="iso"),

        # 4. Mask secrets (XSRF token, cookies, passwords)
        mask_secrets_processor,

        # 5. Add stack info if requested
        structlog.processors.StackInfoRenderer(),

        # 6. Format exceptions
        structlog.processors.format_exc_info,

        # 7. Final rendering (JSON or Console)
        renderer,
    ]

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(settings.log_level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: Optional[str] = None) -> structlog.BoundLogger:
    """
    Get a logger instance with structured logging support.

    Args:
        name: Logger name (typically __name__ of the module)

    Returns:
        BoundLogger instance with all configured processors

    Usage:
        >>> from jclaw_console.infrastructure.observability.logging import get_logger
        >>> logger = get_logger(__name__)
        >>> logger.info("agents loaded", count=3)
    """
    return structlog.get_logger(name)
