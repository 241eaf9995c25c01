# tests/unit/controllers/test_chat.py
"""
Unit tests for the chat controller.

Tests cover the single in-flight turn, transcript entries for replies and
failures, model overrides, the Enter key and clearing history.
"""

import asyncio

import httpx
import pytest

from jclaw_console.controllers import ChatController
from jclaw_console.ui.widgets import Option
from tests.conftest import API

SEND = f"{API}/chat/send"
MODELS = f"{API}/models"


@pytest.fixture
def chat(gateway, page) -> ChatController:
    return ChatController(gateway, page)


def reply(text: str | None = "Hello!"):
    return {"response": text, "agentId": "default"}


@pytest.mark.unit
class TestSendMessage:
    """Test one chat turn."""

    @pytest.mark.parametrize("text", ["", "   \n "])
    async def test_blank_input_is_ignored(self, chat, fake_api, page, text):
        page.chat_input.value = text

        await chat.send_message()

        assert fake_api.requests == []
        assert chat.transcript == []

    async def test_successful_turn(self, chat, fake_api, page):
        fake_api.on("POST", SEND, json=reply("Hi there"))
        page.chat_input.value = "  hello  "

        await chat.send_message()

        body = fake_api.body(fake_api.requests[0])
        assert body == {
            "message": "hello",
            "agentId": "default",
            "conversationId": chat.conversation_id,
        }
        assert [(m.role, m.content) for m in chat.transcript] == [
            ("user", "hello"),
            ("assistant", "Hi there"),
        ]
        assert page.chat_input.value == ""
        assert page.chat_send_btn.disabled is False
        assert page.chat_send_btn.label == "Send"
        assert '<div class="chat-msg assistant">Hi there</div>' in page.chat_messages.html

    @pytest.mark.parametrize("text", [None, ""])
    async def test_empty_reply_placeholder(self, chat, fake_api, page, text):
        fake_api.on("POST", SEND, json=reply(text))
        page.chat_input.value = "hello"

        await chat.send_message()

        assert chat.transcript[-1].content == "(empty response)"

    async def test_failure_adds_error_entry(self, chat, fake_api, page):
        fake_api.on("POST", SEND, status=502, text="Upstream model unavailable")
        page.chat_input.value = "hello"

        await chat.send_message()

        last = chat.transcript[-1]
        assert last.role == "error"
        assert last.content == "Error: Upstream model unavailable"
        assert page.chat_send_btn.disabled is False

    async def test_expired_session_becomes_error_entry(self, chat, fake_api, page, navigator):
        fake_api.on("POST", SEND, status=401)
        page.chat_input.value = "hello"

        await chat.send_message()

        assert chat.transcript[-1].content == "Error: Authentication required"
        assert navigator.location is not None

    async def test_selected_agent_and_model_override(self, chat, fake_api, page):
        fake_api.on("POST", SEND, json=reply())
        page.chat_agent_select.set_options([Option("default", "default"), Option("support", "support")])
        page.chat_agent_select.select("support")
        page.chat_model_select.set_options([Option("", "(agent default)"), Option("gpt-4o", "gpt-4o")])
        page.chat_model_select.select("gpt-4o")
        page.chat_input.value = "hello"

        await chat.send_message()

        body = fake_api.body(fake_api.requests[0])
        assert body["agentId"] == "support"
        assert body["modelOverride"] == "gpt-4o"

    async def test_same_conversation_id_across_turns(self, chat, fake_api, page):
        fake_api.on("POST", SEND, json=reply())
        for text in ("one", "two"):
            page.chat_input.value = text
            await chat.send_message()

        ids = {fake_api.body(r)["conversationId"] for r in fake_api.requests}
        assert ids == {chat.conversation_id}


@pytest.mark.unit
class TestSingleTurnInFlight:
    async def test_second_send_while_awaiting_is_ignored(self, chat, fake_api, page):
        release = asyncio.Event()

        async def slow_reply(request: httpx.Request) -> httpx.Response:
            await release.wait()
            return httpx.Response(200, json=reply("done"))

        fake_api.on("POST", SEND, handler=slow_reply)
        page.chat_input.value = "first"

        first = asyncio.create_task(chat.send_message())
        while not fake_api.requests:
            await asyncio.sleep(0)

        assert page.chat_send_btn.disabled is True
        assert page.chat_send_btn.label == "..."

        page.chat_input.value = "second"
        await chat.send_message()
        release.set()
        await first

        assert len(fake_api.requests) == 1
        assert [m.content for m in chat.transcript] == ["first", "done"]
        assert page.chat_input.value == "second"


@pytest.mark.unit
class TestClearHistory:
    async def test_clear_starts_new_conversation(self, chat, fake_api, page):
        fake_api.on("POST", SEND, json=reply())
        page.chat_input.value = "hello"
        await chat.send_message()
        old_id = chat.conversation_id

        chat.clear_history()
        page.chat_input.value = "again"
        await chat.send_message()

        assert chat.conversation_id != old_id
        assert page.chat_messages.html.count("chat-msg") == 2
        assert fake_api.body(fake_api.requests[-1])["conversationId"] == chat.conversation_id


@pytest.mark.unit
class TestInit:
    """Test model list loading and the Enter key binding."""

    async def test_models_loaded_once(self, chat, fake_api, page):
        fake_api.on("GET", MODELS, json=["gpt-4o", "claude-sonnet"])

        await chat.init()
        await chat.init()

        assert len(fake_api.calls("GET", MODELS)) == 1
        assert page.chat_model_select.values == ["", "gpt-4o", "claude-sonnet"]
        assert page.available_models == ["gpt-4o", "claude-sonnet"]

    async def test_models_failure_keeps_agent_default(self, chat, fake_api, page):
        fake_api.on("GET", MODELS, status=500)

        await chat.init()

        assert page.chat_model_select.values == [""]

    async def test_enter_sends(self, chat, fake_api, page):
        fake_api.on("GET", MODELS, json=[])
        fake_api.on("POST", SEND, json=reply())
        await chat.init()
        page.chat_input.value = "hello"

        await page.chat_input.press_key("Enter")

        assert len(fake_api.calls("POST", SEND)) == 1

    async def test_shift_enter_does_not_send(self, chat, fake_api, page):
        fake_api.on("GET", MODELS, json=[])
        await chat.init()
        page.chat_input.value = "hello"

        await page.chat_input.press_key("Enter", shift=True)
        await page.chat_input.press_key("a")

        assert fake_api.calls("POST", SEND) == []
