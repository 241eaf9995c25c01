"""The admin tab: agents, identity mappings, sessions and the audit log."""
import asyncio

from jclaw_console.controllers.agents import AgentsController
from jclaw_console.controllers.audit_log import AuditLogController
from jclaw_console.controllers.base import Controller
from jclaw_console.controllers.identity_mappings import IdentityMappingsController
from jclaw_console.controllers.sessions import SessionsController


class AdminTabController(Controller):
    """
    Initializes the four admin lists together, once.

    A successful agent mutation calls `reinitialize()`, which clears the
    initialized flag and reloads every list from scratch.
    """

    name = "admin"

    def __init__(
        self,
        agents: AgentsController,
        mappings: IdentityMappingsController,
        sessions: SessionsController,
        audit: AuditLogController,
    ):
        super().__init__()
        self.agents = agents
        self.mappings = mappings
        self.sessions = sessions
        self.audit = audit
        self.agents.on_mutated = self.reinitialize

    async def _initialize(self) -> None:
        await asyncio.gather(
            self.agents.load(),
            self.mappings.load(),
            self.sessions.load(),
            self.audit.load(0),
        )

    async def reinitialize(self) -> None:
        self.reset()
        await self.init()
