"""Pending identity mappings and their approval."""
from jclaw_console.controllers.base import ListController
from jclaw_console.domain.exceptions import RequestFailed
from jclaw_console.domain.models import IdentityMapping
from jclaw_console.gateway.client import GatewayClient
from jclaw_console.infrastructure.observability.context import operation_context
from jclaw_console.infrastructure.observability.logging import get_logger
from jclaw_console.interfaces import IOperatorPrompt
from jclaw_console.ui.page import ConsolePage
from jclaw_console.ui.views import render_mapping_cards
from jclaw_console.ui.widgets import TextField

logger = get_logger(__name__)


class IdentityMappingsController(ListController[list[IdentityMapping]]):
    """
    Lists mappings awaiting approval, one principal input per mapping.

    Approval reloads the list; the approved mapping drops out because it is
    no longer pending, not because it is spliced out locally.
    """

    name = "identity_mappings"
    subject = "mappings"
    empty_message = "No pending identity mappings."

    def __init__(self, gateway: GatewayClient, page: ConsolePage, prompt: IOperatorPrompt):
        super().__init__(page.mappings_list)
        self.gateway = gateway
        self.page = page
        self.prompt = prompt

    async def fetch(self) -> list[IdentityMapping]:
        return await self.gateway.list_pending_mappings()

    def render(self, mappings: list[IdentityMapping]) -> str:
        return render_mapping_cards(mappings)

    def on_loaded(self, mappings: list[IdentityMapping]) -> None:
        self.page.mapping_inputs = {
            m.id: TextField(value=m.jclaw_principal or "", placeholder="jclaw principal")
            for m in mappings
        }

    async def approve(self, mapping_id: str) -> None:
        field = self.page.mapping_inputs.get(mapping_id)
        principal = field.value.strip() if field else ""
        if not principal:
            self.prompt.alert("Please enter a jclaw principal.")
            return

        with operation_context("approve", resource_type="identity_mapping", mapping_id=mapping_id):
            try:
                await self.gateway.approve_mapping(mapping_id, principal)
            except RequestFailed as e:
                logger.warning("mapping approval failed", error=e.message)
                self.prompt.alert(f"Failed to approve mapping: {e.message}")
                return
            logger.info("mapping approved")

        await self.load()
