"""Domain models, conversation state and exceptions."""

from jclaw_console.domain.exceptions import (
    AppError,
    ErrorCode,
    AuthenticationRequired,
    RequestFailed,
    MalformedResponse,
    ValidationError,
)
from jclaw_console.domain.models import (
    Agent,
    AuditEvent,
    AuditEventType,
    AuditPage,
    ChatReply,
    ChatRequest,
    IdentityMapping,
    RiskLevel,
    Session,
    SessionScope,
    Skill,
    TrustLevel,
    UserInfo,
)
from jclaw_console.domain.conversation import ChatMessage, ConversationState

__all__ = [
    # Exceptions
    "AppError",
    "ErrorCode",
    "AuthenticationRequired",
    "RequestFailed",
    "MalformedResponse",
    "ValidationError",
    # Admin API records
    "Agent",
    "AuditEvent",
    "AuditEventType",
    "AuditPage",
    "ChatReply",
    "ChatRequest",
    "IdentityMapping",
    "RiskLevel",
    "Session",
    "SessionScope",
    "Skill",
    "TrustLevel",
    "UserInfo",
    # Chat
    "ChatMessage",
    "ConversationState",
]
