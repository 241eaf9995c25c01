"""HTML escaping and timestamp formatting shared by every view."""
import html
from datetime import datetime
from typing import Any

from jclaw_console.config.settings import get_settings


def escape_html(value: Any) -> str:
    """Escape a value for safe inclusion in markup. None and "" render as ""."""
    if value is None or value == "":
        return ""
    return html.escape(str(value), quote=True)


def format_timestamp(ts: datetime | str | None, fmt: str | None = None) -> str:
    """
    Format a server timestamp for display in local time.

    Missing timestamps render as "-". A string that cannot be parsed is
    returned unchanged rather than raising.
    """
    if ts is None or ts == "":
        return "-"

    if isinstance(ts, datetime):
        parsed = ts
    else:
        try:
            # fromisoformat rejects a trailing Z before Python 3.11
            parsed = datetime.fromisoformat(str(ts).replace("Z", "+00:00"))
        except ValueError:
            return str(ts)

    if parsed.tzinfo is not None:
        parsed = parsed.astimezone()
    return parsed.strftime(fmt or get_settings().timestamp_format)
