"""Agents grid, agent selectors and agent mutations."""
from typing import Awaitable, Callable, Optional

from jclaw_console.controllers.agent_form import AgentForm
from jclaw_console.controllers.base import ListController
from jclaw_console.domain.exceptions import RequestFailed, ValidationError
from jclaw_console.domain.models import Agent
from jclaw_console.gateway.client import GatewayClient
from jclaw_console.infrastructure.observability.context import operation_context
from jclaw_console.infrastructure.observability.logging import get_logger
from jclaw_console.interfaces import IOperatorPrompt
from jclaw_console.ui.page import ALL_AGENTS, DEFAULT_AGENT, ConsolePage
from jclaw_console.ui.views import render_agent_cards
from jclaw_console.ui.widgets import Option

logger = get_logger(__name__)


class AgentsController(ListController[list[Agent]]):
    """
    Owns the agents grid and feeds the session filter and chat agent selectors.

    Mutations never patch the grid in place: after a successful save or
    delete, `on_mutated` (the admin tab's full re-initialization) runs.
    """

    name = "agents"
    subject = "agents"
    empty_message = "No agents configured yet."

    def __init__(
        self,
        gateway: GatewayClient,
        page: ConsolePage,
        prompt: IOperatorPrompt,
        form: AgentForm | None = None,
        on_mutated: Optional[Callable[[], Awaitable[None]]] = None,
    ):
        super().__init__(page.agents_grid)
        self.gateway = gateway
        self.page = page
        self.prompt = prompt
        self.form = form or AgentForm(page.agent_form)
        self.on_mutated = on_mutated

    async def fetch(self) -> list[Agent]:
        return await self.gateway.list_agents()

    def render(self, agents: list[Agent]) -> str:
        return render_agent_cards(agents)

    def on_loaded(self, agents: list[Agent]) -> None:
        self.populate_selectors(agents)

    def populate_selectors(self, agents: list[Agent]) -> None:
        self.page.session_agent_filter.set_options(
            [ALL_AGENTS] + [Option(a.agent_id, a.agent_id) for a in agents],
        )
        # "default" is always offered first, exactly once
        self.page.chat_agent_select.set_options(
            [DEFAULT_AGENT] + [Option(a.agent_id, a.agent_id) for a in agents if a.agent_id != "default"],
        )

    def create(self) -> None:
        self.form.open_create()

    def close(self) -> None:
        self.form.close()

    async def edit(self, agent_id: str) -> None:
        try:
            agent = await self.gateway.get_agent(agent_id)
        except RequestFailed as e:
            self.prompt.alert(f"Failed to load agent: {e.message}")
            return
        if agent is None:
            return
        self.form.open_edit(agent)

    async def save(self) -> None:
        try:
            agent = self.form.build_agent()
        except ValidationError as e:
            self.prompt.alert(e.message)
            return

        with operation_context("upsert", resource_type="agent", agent_id=agent.agent_id):
            try:
                await self.gateway.upsert_agent(agent)
            except RequestFailed as e:
                logger.warning("agent save failed", error=e.message)
                self.prompt.alert(f"Failed to save agent: {e.message}")
                return
            logger.info("agent saved")

        self.form.close()
        await self._after_mutation()

    async def delete(self, agent_id: str) -> None:
        if not self.prompt.confirm(f'Delete agent "{agent_id}"? This cannot be undone.'):
            return

        with operation_context("delete", resource_type="agent", agent_id=agent_id):
            try:
                await self.gateway.delete_agent(agent_id)
            except RequestFailed as e:
                logger.warning("agent delete failed", error=e.message)
                self.prompt.alert(f"Failed to delete agent: {e.message}")
                return
            logger.info("agent deleted")

        await self._after_mutation()

    async def _after_mutation(self) -> None:
        if self.on_mutated is not None:
            await self.on_mutated()
        else:
            await self.load()
