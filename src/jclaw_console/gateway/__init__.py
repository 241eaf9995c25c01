"""Authenticated request gateway for the admin API."""

from jclaw_console.gateway.client import GatewayClient
from jclaw_console.gateway.navigation import BrowserNavigator

__all__ = [
    "GatewayClient",
    "BrowserNavigator",
]
