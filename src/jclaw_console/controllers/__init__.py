"""Tab, list, form and chat controllers."""

from jclaw_console.controllers.base import Controller, ControllerState, ListController
from jclaw_console.controllers.agent_form import AgentForm, parse_limit, parse_tool_list
from jclaw_console.controllers.agents import AgentsController
from jclaw_console.controllers.identity_mappings import IdentityMappingsController
from jclaw_console.controllers.sessions import SessionsController
from jclaw_console.controllers.audit_log import AuditLogController, AuditState
from jclaw_console.controllers.skills import SkillsController
from jclaw_console.controllers.chat import ChatController
from jclaw_console.controllers.admin import AdminTabController
from jclaw_console.controllers.header import HeaderController
from jclaw_console.controllers.tabs import TabController

__all__ = [
    "Controller",
    "ControllerState",
    "ListController",
    "AgentForm",
    "parse_limit",
    "parse_tool_list",
    "AgentsController",
    "IdentityMappingsController",
    "SessionsController",
    "AuditLogController",
    "AuditState",
    "SkillsController",
    "ChatController",
    "AdminTabController",
    "HeaderController",
    "TabController",
]
