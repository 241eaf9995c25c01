# tests/unit/domain/test_conversation.py
"""Unit tests for client-side chat conversation state."""

import pytest

from jclaw_console.domain.conversation import ConversationState


@pytest.mark.unit
class TestConversationState:
    def test_fresh_state(self):
        state = ConversationState()

        assert state.transcript == []
        assert state.sending is False
        assert state.conversation_id

    def test_ids_are_unique(self):
        assert ConversationState().conversation_id != ConversationState().conversation_id

    def test_append(self):
        state = ConversationState()

        message = state.append("user", "hi")

        assert state.transcript == [message]
        assert message.role == "user"

    def test_reset_clears_and_mints_new_id(self):
        state = ConversationState()
        state.append("user", "hi")
        old_id = state.conversation_id

        state.reset()

        assert state.transcript == []
        assert state.conversation_id != old_id
