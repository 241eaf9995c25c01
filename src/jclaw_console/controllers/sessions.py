"""Active sessions, optionally filtered by agent."""
from jclaw_console.controllers.base import ListController
from jclaw_console.domain.exceptions import RequestFailed
from jclaw_console.domain.models import Session
from jclaw_console.gateway.client import GatewayClient
from jclaw_console.infrastructure.observability.context import operation_context
from jclaw_console.infrastructure.observability.logging import get_logger
from jclaw_console.interfaces import IOperatorPrompt
from jclaw_console.ui.page import ConsolePage
from jclaw_console.ui.views import render_session_cards

logger = get_logger(__name__)


class SessionsController(ListController[list[Session]]):
    name = "sessions"
    subject = "sessions"
    empty_message = "No active sessions."

    def __init__(self, gateway: GatewayClient, page: ConsolePage, prompt: IOperatorPrompt):
        super().__init__(page.sessions_list)
        self.gateway = gateway
        self.page = page
        self.prompt = prompt

    @property
    def agent_filter(self) -> str | None:
        return self.page.session_agent_filter.value or None

    async def fetch(self) -> list[Session]:
        return await self.gateway.list_sessions(self.agent_filter)

    def render(self, sessions: list[Session]) -> str:
        return render_session_cards(sessions)

    async def load(self) -> None:
        await self._load(self.fetch, agent_filter=self.agent_filter)

    async def set_agent_filter(self, agent_id: str) -> None:
        self.page.session_agent_filter.select(agent_id)
        await self.load()

    async def archive(self, session_id: str) -> None:
        """Archive a session. There is no undo from the console."""
        if not self.prompt.confirm("Archive this session?"):
            return

        with operation_context("archive", resource_type="session", session_id=session_id):
            try:
                await self.gateway.archive_session(session_id)
            except RequestFailed as e:
                logger.warning("session archive failed", error=e.message)
                self.prompt.alert(f"Failed to archive session: {e.message}")
                return
            logger.info("session archived")

        await self.load()
