"""Signed-in operator display."""
from jclaw_console.domain.exceptions import AppError
from jclaw_console.gateway.client import GatewayClient
from jclaw_console.infrastructure.observability.logging import get_logger
from jclaw_console.ui.page import ConsolePage

logger = get_logger(__name__)

DEFAULT_USERNAME = "admin"


class HeaderController:
    def __init__(self, gateway: GatewayClient, page: ConsolePage):
        self.gateway = gateway
        self.page = page

    async def load_user_info(self) -> None:
        """Show the operator's name. Non-critical: every failure is ignored."""
        try:
            info = await self.gateway.userinfo()
        except AppError as e:
            logger.debug("user info unavailable", error=e.message)
            return
        if info is not None:
            self.page.username.text = info.name or DEFAULT_USERNAME
