"""Operator console client for the jclaw agent platform."""

from jclaw_console.console import Console
from jclaw_console.gateway import GatewayClient

__version__ = "0.1.0"

__all__ = [
    "Console",
    "GatewayClient",
    "__version__",
]
