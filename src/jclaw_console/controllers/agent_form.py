"""
Create/edit state machine for the shared agent modal.

    hidden --open_create()--> creating --close()/save--> hidden
    hidden --open_edit()----> editing  --close()/save--> hidden

While editing, the key field is disabled: an agent id is immutable once
created. That is a console affordance only; the server enforces it.
"""
import re

from jclaw_console.config.settings import Settings, get_settings
from jclaw_console.domain.exceptions import ValidationError
from jclaw_console.domain.models import Agent, TrustLevel
from jclaw_console.ui.page import AgentFormView

_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")


def parse_tool_list(text: str | None) -> list[str]:
    """
    Split comma-separated tool names, trimming and dropping empties.

    >>> parse_tool_list("a, b ,, c")
    ['a', 'b', 'c']
    """
    if not text:
        return []
    return [part.strip() for part in text.split(",") if part.strip()]


def parse_limit(text: str | None, default: int) -> int:
    """
    Read a positive integer limit from free text.

    The leading integer of the text is used ("12 tokens" -> 12); missing,
    non-numeric and non-positive input falls back to `default`.
    """
    match = _LEADING_INT.match(text or "")
    if not match:
        return default
    value = int(match.group(1))
    return value if value > 0 else default


class AgentForm:
    def __init__(self, view: AgentFormView, settings: Settings | None = None):
        self.view = view
        self.settings = settings or get_settings()
        self.editing_agent_id: str | None = None

    @property
    def is_open(self) -> bool:
        return self.view.modal.visible

    def open_create(self) -> None:
        v = self.view
        self.editing_agent_id = None
        v.modal.title = "New Agent"
        v.agent_id.value = ""
        v.agent_id.disabled = False
        v.display_name.value = ""
        v.model.value = ""
        v.trust_level.value = TrustLevel.STANDARD.value
        v.system_prompt.value = ""
        v.allowed_tools.value = ""
        v.denied_tools.value = ""
        v.max_tokens.value = str(self.settings.default_max_tokens)
        v.max_tool_calls.value = str(self.settings.default_max_tool_calls)
        v.modal.visible = True

    def open_edit(self, agent: Agent) -> None:
        v = self.view
        self.editing_agent_id = agent.agent_id
        v.modal.title = "Edit Agent"
        v.agent_id.value = agent.agent_id
        v.agent_id.disabled = True
        v.display_name.value = agent.display_name or ""
        v.model.value = agent.model or ""
        # an UNKNOWN level is shown as-is and refused on save
        v.trust_level.value = agent.trust_level.value
        v.system_prompt.value = agent.system_prompt or ""
        v.allowed_tools.value = ", ".join(agent.allowed_tools)
        v.denied_tools.value = ", ".join(agent.denied_tools)
        v.max_tokens.value = str(agent.max_tokens_per_request or self.settings.default_max_tokens)
        v.max_tool_calls.value = str(agent.max_tool_calls_per_request or self.settings.default_max_tool_calls)
        v.modal.visible = True

    def close(self) -> None:
        self.view.modal.visible = False

    def build_agent(self) -> Agent:
        """
        Turn the form fields into the upsert record.

        Raises:
            ValidationError: If the agent id is blank or the trust level unknown
        """
        v = self.view
        agent_id = v.agent_id.value.strip()
        if not agent_id:
            raise ValidationError("Agent ID is required.", details={"field": "agentId"})

        trust_level = TrustLevel(v.trust_level.value)
        if trust_level is TrustLevel.UNKNOWN:
            raise ValidationError("Please select a trust level.", details={"field": "trustLevel"})

        return Agent(
            agent_id=agent_id,
            display_name=v.display_name.value.strip() or None,
            model=v.model.value.strip() or None,
            trust_level=trust_level,
            system_prompt=v.system_prompt.value or None,
            allowed_tools=parse_tool_list(v.allowed_tools.value),
            denied_tools=parse_tool_list(v.denied_tools.value),
            max_tokens_per_request=parse_limit(v.max_tokens.value, self.settings.default_max_tokens),
            max_tool_calls_per_request=parse_limit(v.max_tool_calls.value, self.settings.default_max_tool_calls),
        )
