# tests/unit/controllers/test_agents.py
"""
Unit tests for the agents grid and agent mutations.

Tests cover:
- Grid rendering, empty state and inline load errors
- Session filter and chat agent selector population
- Create/edit/save/delete flows and their failure alerts
- Full admin re-initialization after a successful mutation
"""

import pytest

from jclaw_console.controllers import AgentForm, AgentsController
from jclaw_console.domain.exceptions import AuthenticationRequired
from tests.conftest import API
from tests.factories import AgentPayloadFactory

AGENTS = f"{API}/agents"


@pytest.fixture
def agents(gateway, page, prompt, test_settings) -> AgentsController:
    return AgentsController(gateway, page, prompt, form=AgentForm(page.agent_form, test_settings))


@pytest.mark.unit
class TestLoad:
    """Test loading the grid."""

    async def test_empty_state(self, agents, fake_api, page):
        fake_api.on("GET", AGENTS, json=[])

        await agents.load()

        assert page.agents_grid.html == '<div class="empty-state">No agents configured yet.</div>'

    async def test_renders_cards(self, agents, fake_api, page):
        fake_api.on("GET", AGENTS, json=[AgentPayloadFactory(agentId="support")])

        await agents.load()

        assert '<div class="card-title">support</div>' in page.agents_grid.html

    async def test_failure_renders_inline_error(self, agents, fake_api, page, prompt):
        fake_api.on("GET", AGENTS, status=500, text="database down")

        await agents.load()

        assert "Failed to load agents: database down" in page.agents_grid.html
        assert prompt.alerts == []

    async def test_expired_session_propagates(self, agents, fake_api, navigator):
        fake_api.on("GET", AGENTS, status=401)

        with pytest.raises(AuthenticationRequired):
            await agents.load()

        assert navigator.location is not None

    async def test_populates_selectors(self, agents, fake_api, page):
        fake_api.on(
            "GET",
            AGENTS,
            json=[AgentPayloadFactory(agentId="default"), AgentPayloadFactory(agentId="support")],
        )

        await agents.load()

        assert page.session_agent_filter.values == ["", "default", "support"]
        assert page.chat_agent_select.values == ["default", "support"]

    async def test_selectors_keep_current_selection(self, agents, fake_api, page):
        fake_api.on("GET", AGENTS, json=[AgentPayloadFactory(agentId="support")])
        await agents.load()
        page.session_agent_filter.select("support")
        page.chat_agent_select.select("support")

        await agents.load()

        assert page.session_agent_filter.value == "support"
        assert page.chat_agent_select.value == "support"

    async def test_deleted_agent_selection_falls_back(self, agents, fake_api, page):
        fake_api.on("GET", AGENTS, json=[AgentPayloadFactory(agentId="support")])
        await agents.load()
        page.session_agent_filter.select("support")
        fake_api.on("GET", AGENTS, json=[])

        await agents.load()

        assert page.session_agent_filter.value == ""
        assert page.chat_agent_select.value == "default"


@pytest.mark.unit
class TestEdit:
    async def test_opens_form_with_agent(self, agents, fake_api, page):
        fake_api.on(
            "GET", f"{AGENTS}/support", json=AgentPayloadFactory(agentId="support", deniedTools=["shell"])
        )

        await agents.edit("support")

        assert agents.form.is_open
        assert page.agent_form.agent_id.disabled is True
        assert page.agent_form.denied_tools.value == "shell"

    async def test_failure_alerts(self, agents, fake_api, prompt):
        fake_api.on("GET", f"{AGENTS}/ghost", status=404, text="Not found")

        await agents.edit("ghost")

        assert prompt.alerts == ["Failed to load agent: Not found"]
        assert not agents.form.is_open

    def test_create_and_close(self, agents):
        agents.create()
        assert agents.form.is_open

        agents.close()
        assert not agents.form.is_open


@pytest.mark.unit
class TestSave:
    """Test saving through the shared form."""

    async def test_blank_id_alerts_without_request(self, agents, fake_api, prompt):
        agents.create()

        await agents.save()

        assert prompt.alerts == ["Agent ID is required."]
        assert fake_api.requests == []
        assert agents.form.is_open

    async def test_success_closes_and_reloads(self, agents, fake_api, page):
        fake_api.on("PUT", f"{AGENTS}/support", json=AgentPayloadFactory(agentId="support"))
        fake_api.on("GET", AGENTS, json=[AgentPayloadFactory(agentId="support")])
        agents.create()
        page.agent_form.agent_id.value = "support"
        page.agent_form.allowed_tools.value = "search, , calendar"

        await agents.save()

        put = fake_api.calls("PUT", f"{AGENTS}/support")[0]
        body = fake_api.body(put)
        assert body["agentId"] == "support"
        assert body["allowedTools"] == ["search", "calendar"]
        assert body["trustLevel"] == "STANDARD"
        assert put.headers["X-XSRF-TOKEN"] == "xsrf+token="
        assert not agents.form.is_open
        assert len(fake_api.calls("GET", AGENTS)) == 1
        assert "support" in page.agents_grid.html

    async def test_failure_alerts_and_keeps_form_open(self, agents, fake_api, prompt, page):
        fake_api.on("PUT", f"{AGENTS}/support", status=400, text="Unknown tool: shell")
        agents.create()
        page.agent_form.agent_id.value = "support"

        await agents.save()

        assert prompt.alerts == ["Failed to save agent: Unknown tool: shell"]
        assert agents.form.is_open
        assert fake_api.calls("GET", AGENTS) == []

    async def test_calls_on_mutated_instead_of_load(self, agents, fake_api, page):
        calls = []

        async def on_mutated():
            calls.append("reinit")

        agents.on_mutated = on_mutated
        fake_api.on("PUT", f"{AGENTS}/support", status=200)
        agents.create()
        page.agent_form.agent_id.value = "support"

        await agents.save()

        assert calls == ["reinit"]
        assert fake_api.calls("GET", AGENTS) == []


@pytest.mark.unit
class TestDelete:
    async def test_declined_makes_no_request(self, agents, fake_api, prompt):
        prompt.confirm_answer = False

        await agents.delete("support")

        assert prompt.confirmations == ['Delete agent "support"? This cannot be undone.']
        assert fake_api.requests == []

    async def test_confirmed_deletes_and_reloads(self, agents, fake_api, page):
        fake_api.on("DELETE", f"{AGENTS}/support", status=204)
        fake_api.on("GET", AGENTS, json=[])

        await agents.delete("support")

        assert len(fake_api.calls("DELETE", f"{AGENTS}/support")) == 1
        assert "No agents configured yet." in page.agents_grid.html

    async def test_failure_alerts(self, agents, fake_api, prompt):
        fake_api.on("DELETE", f"{AGENTS}/support", status=409, text="Agent has active sessions")

        await agents.delete("support")

        assert prompt.alerts == ["Failed to delete agent: Agent has active sessions"]
