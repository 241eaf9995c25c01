"""The console page: every widget the controllers read or write."""
from __future__ import annotations

from dataclasses import dataclass, field

from jclaw_console.domain.models import AuditEventType, TrustLevel
from jclaw_console.ui.widgets import (
    Button,
    Label,
    Modal,
    Option,
    Region,
    Selector,
    Tab,
    TextField,
)

TAB_NAMES = ("chat", "skills", "admin")

ALL_AGENTS = Option("", "All Agents")
DEFAULT_AGENT = Option("default", "default")
AGENT_DEFAULT_MODEL = Option("", "(agent default)")


def _trust_level_selector() -> Selector:
    options = [Option(t.value, t.value) for t in TrustLevel if t is not TrustLevel.UNKNOWN]
    return Selector(options=options, value=TrustLevel.STANDARD.value)


def _event_type_selector() -> Selector:
    options = [Option("", "All Types")] + [
        Option(t.value, t.value) for t in AuditEventType if t is not AuditEventType.UNKNOWN
    ]
    return Selector(options=options, value="")


@dataclass
class AgentFormView:
    """The shared create/edit agent modal."""
    modal: Modal = field(default_factory=Modal)
    agent_id: TextField = field(default_factory=TextField)
    display_name: TextField = field(default_factory=TextField)
    model: TextField = field(default_factory=TextField)
    trust_level: Selector = field(default_factory=_trust_level_selector)
    system_prompt: TextField = field(default_factory=TextField)
    allowed_tools: TextField = field(default_factory=TextField)
    denied_tools: TextField = field(default_factory=TextField)
    max_tokens: TextField = field(default_factory=TextField)
    max_tool_calls: TextField = field(default_factory=TextField)


@dataclass
class ConsolePage:
    tabs: dict[str, Tab] = field(default_factory=lambda: {name: Tab(name) for name in TAB_NAMES})
    username: Label = field(default_factory=Label)

    # Skills tab
    skills_grid: Region = field(default_factory=Region)

    # Admin tab: agents
    agents_grid: Region = field(default_factory=Region)
    agent_form: AgentFormView = field(default_factory=AgentFormView)

    # Admin tab: identity mappings
    mappings_list: Region = field(default_factory=Region)
    mapping_inputs: dict[str, TextField] = field(default_factory=dict)

    # Admin tab: sessions
    sessions_list: Region = field(default_factory=Region)
    session_agent_filter: Selector = field(
        default_factory=lambda: Selector(options=[ALL_AGENTS], value="")
    )

    # Admin tab: audit log
    audit_log: Region = field(default_factory=Region)
    audit_pagination: Region = field(default_factory=Region)
    audit_principal: TextField = field(default_factory=TextField)
    audit_event_type: Selector = field(default_factory=_event_type_selector)

    # Chat tab
    chat_messages: Region = field(default_factory=Region)
    chat_input: TextField = field(default_factory=TextField)
    chat_agent_select: Selector = field(
        default_factory=lambda: Selector(options=[DEFAULT_AGENT], value="default")
    )
    chat_model_select: Selector = field(
        default_factory=lambda: Selector(options=[AGENT_DEFAULT_MODEL], value="")
    )
    available_models: list[str] = field(default_factory=list)
    chat_send_btn: Button = field(default_factory=lambda: Button("Send"))

    @property
    def active_tab(self) -> str | None:
        active = [t.name for t in self.tabs.values() if t.active]
        return active[0] if active else None
