"""
Console composition root.

Wires one gateway, one page and every controller together and routes the
`data-action` names used by the rendered fragments to controller methods.

Example:
    >>> async with Console(cookies={"SESSION": session_cookie}) as console:
    ...     await console.start()
    ...     await console.dispatch("tabs.activate", "admin")
    ...     print(console.page.agents_grid.html)
"""
import inspect
from typing import Any, Callable

from jclaw_console.config.settings import Settings, get_settings
from jclaw_console.controllers import (
    AdminTabController,
    AgentForm,
    AgentsController,
    AuditLogController,
    ChatController,
    HeaderController,
    IdentityMappingsController,
    SessionsController,
    SkillsController,
    TabController,
)
from jclaw_console.domain.exceptions import AuthenticationRequired
from jclaw_console.gateway.client import GatewayClient
from jclaw_console.gateway.navigation import BrowserNavigator
from jclaw_console.infrastructure.observability.logging import configure_logging, get_logger
from jclaw_console.interfaces import INavigator, IOperatorPrompt
from jclaw_console.ui.page import ConsolePage
from jclaw_console.ui.prompt import RichPrompt

logger = get_logger(__name__)


class Console:
    def __init__(
        self,
        settings: Settings | None = None,
        gateway: GatewayClient | None = None,
        page: ConsolePage | None = None,
        prompt: IOperatorPrompt | None = None,
        navigator: INavigator | None = None,
        cookies: dict[str, str] | None = None,
    ):
        self.settings = settings or get_settings()
        configure_logging()
        self.page = page or ConsolePage()
        self.prompt = prompt or RichPrompt()
        self.navigator = navigator or BrowserNavigator()
        self._owns_gateway = gateway is None
        self.gateway = gateway or GatewayClient(self.settings, self.navigator, cookies=cookies)
        self.redirected = False

        self.header = HeaderController(self.gateway, self.page)
        self.chat = ChatController(self.gateway, self.page)
        self.skills = SkillsController(self.gateway, self.page)
        self.agents = AgentsController(
            self.gateway, self.page, self.prompt, form=AgentForm(self.page.agent_form, self.settings)
        )
        self.mappings = IdentityMappingsController(self.gateway, self.page, self.prompt)
        self.sessions = SessionsController(self.gateway, self.page, self.prompt)
        self.audit = AuditLogController(self.gateway, self.page, self.settings)
        self.admin = AdminTabController(self.agents, self.mappings, self.sessions, self.audit)
        self.tabs = TabController(
            self.page, {"chat": self.chat, "skills": self.skills, "admin": self.admin}
        )

        self._actions: dict[str, Callable[..., Any]] = {
            "tabs.activate": self.tabs.activate,
            "agents.create": self.agents.create,
            "agents.edit": self.agents.edit,
            "agents.save": self.agents.save,
            "agents.delete": self.agents.delete,
            "agents.close": self.agents.close,
            "mappings.approve": self.mappings.approve,
            "sessions.filter": self.sessions.set_agent_filter,
            "sessions.archive": self.sessions.archive,
            "audit.prev": self.audit.prev_page,
            "audit.next": self.audit.next_page,
            "audit.filter": self.audit.apply_filters,
            "chat.send": self.chat.send_message,
            "chat.clear": self.chat.clear_history,
        }

    async def __aenter__(self) -> "Console":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        if self._owns_gateway:
            await self.gateway.aclose()

    @property
    def actions(self) -> list[str]:
        return sorted(self._actions)

    async def start(self) -> None:
        """Show the operator's name and open the default tab."""
        await self.header.load_user_info()
        await self.activate(self.settings.default_tab)

    async def activate(self, tab: str) -> None:
        await self.dispatch("tabs.activate", tab)

    async def dispatch(self, action: str, *args: Any, **kwargs: Any) -> None:
        """
        Run a named console action.

        Once the session has expired and the operator was sent to SSO, the
        console is finished: further actions are ignored.

        Raises:
            KeyError: If the action name is unknown
        """
        handler = self._actions[action]
        if self.redirected:
            logger.debug("console redirected, ignoring action", action=action)
            return
        try:
            result = handler(*args, **kwargs)
            if inspect.isawaitable(result):
                await result
        except AuthenticationRequired as e:
            self.redirected = True
            logger.info("session expired, console stopped", action=action, redirect_to=e.redirect_to)
