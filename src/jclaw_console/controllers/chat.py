"""
Interactive chat with a configured agent.

Each turn moves idle -> awaiting-response -> idle. While a turn is awaiting
its response, further sends are ignored: at most one turn is ever in flight.
"""
from jclaw_console.controllers.base import Controller
from jclaw_console.domain.conversation import ChatRole, ConversationState
from jclaw_console.domain.exceptions import AppError
from jclaw_console.domain.models import ChatRequest
from jclaw_console.gateway.client import GatewayClient
from jclaw_console.infrastructure.observability.context import log_context
from jclaw_console.infrastructure.observability.logging import get_logger
from jclaw_console.ui.page import AGENT_DEFAULT_MODEL, ConsolePage
from jclaw_console.ui.views import render_transcript
from jclaw_console.ui.widgets import Option

logger = get_logger(__name__)

EMPTY_RESPONSE_PLACEHOLDER = "(empty response)"
SEND_LABEL = "Send"
SENDING_LABEL = "..."


class ChatController(Controller):
    name = "chat"

    def __init__(self, gateway: GatewayClient, page: ConsolePage):
        super().__init__()
        self.gateway = gateway
        self.page = page
        self.conversation = ConversationState()

    @property
    def conversation_id(self) -> str:
        return self.conversation.conversation_id

    @property
    def transcript(self):
        return self.conversation.transcript

    async def _initialize(self) -> None:
        self.conversation.reset()
        self.page.chat_input.on_key = self.handle_key
        await self.load_models()

    async def load_models(self) -> None:
        """Offer per-request model overrides. Failure keeps the agent default."""
        try:
            models = await self.gateway.list_models()
        except AppError as e:
            logger.debug("model list unavailable", error=e.message)
            return

        if models:
            self.page.chat_model_select.set_options(
                [AGENT_DEFAULT_MODEL] + [Option(m, m) for m in models],
            )
            self.page.available_models = list(models)

    async def handle_key(self, key: str, shift: bool = False) -> None:
        # Shift+Enter is left to the input for a newline
        if key == "Enter" and not shift:
            await self.send_message()

    async def send_message(self) -> None:
        if self.conversation.sending:
            logger.debug("turn already in flight, ignoring send")
            return

        chat_input = self.page.chat_input
        message = chat_input.value.strip()
        if not message:
            return

        request = ChatRequest(
            message=message,
            agent_id=self.page.chat_agent_select.value or "default",
            conversation_id=self.conversation_id,
            model_override=self.page.chat_model_select.value or None,
        )

        self._append("user", message)
        chat_input.value = ""
        self._set_sending(True)

        with log_context(conversation_id=self.conversation_id, agent_id=request.agent_id):
            try:
                reply = await self.gateway.send_chat(request)
                self._append("assistant", reply.response or EMPTY_RESPONSE_PLACEHOLDER)
            except AppError as e:
                logger.warning("chat turn failed", error=e.message)
                self._append("error", f"Error: {e.message}")
            finally:
                self._set_sending(False)

    def clear_history(self) -> None:
        """Empty the transcript and start a new conversation id."""
        self.conversation.reset()
        self.page.chat_messages.clear()
        logger.info("chat history cleared", conversation_id=self.conversation_id)

    def _append(self, role: ChatRole, content: str) -> None:
        self.conversation.append(role, content)
        self.page.chat_messages.update(render_transcript(self.conversation.transcript))

    def _set_sending(self, sending: bool) -> None:
        self.conversation.sending = sending
        self.page.chat_send_btn.disabled = sending
        self.page.chat_send_btn.label = SENDING_LABEL if sending else SEND_LABEL
