"""Client-only chat conversation state."""
from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from typing import Literal

ChatRole = Literal["user", "assistant", "error"]


def new_conversation_id() -> str:
    return str(uuid.uuid4())


@dataclass
class ChatMessage:
    """One transcript entry."""
    role: ChatRole
    content: str


@dataclass
class ConversationState:
    """
    Conversation identifier, transcript and the in-flight turn flag.

    Never sent to any list endpoint; only the identifier travels with each
    chat turn so the server can correlate multi-turn context.
    """
    conversation_id: str = field(default_factory=new_conversation_id)
    transcript: list[ChatMessage] = field(default_factory=list)
    sending: bool = False

    def append(self, role: ChatRole, content: str) -> ChatMessage:
        message = ChatMessage(role=role, content=content)
        self.transcript.append(message)
        return message

    def reset(self) -> None:
        """Empty the transcript and sever correlation with prior turns."""
        self.transcript.clear()
        self.conversation_id = new_conversation_id()
