"""
Records mirrored from the admin API.

All models accept the server's camelCase JSON, ignore unknown fields and
serialize back with camelCase aliases. String "enums" from the server are
closed sets here: an unrecognized value becomes the UNKNOWN member instead
of flowing through to styling logic.
"""
from datetime import datetime
from enum import Enum
from typing import Any, TypeVar

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, field_validator
from pydantic import ValidationError as SchemaError
from pydantic.alias_generators import to_camel

from jclaw_console.domain.exceptions import MalformedResponse
from jclaw_console.infrastructure.observability.logging import get_logger

logger = get_logger(__name__)

M = TypeVar("M", bound=BaseModel)


class ClosedEnum(str, Enum):
    """String enum that maps unrecognized server values to UNKNOWN."""

    @classmethod
    def _missing_(cls, value: object):
        logger.warning("unknown enum value", enum=cls.__name__, value=value)
        return cls("UNKNOWN")


class TrustLevel(ClosedEnum):
    STANDARD = "STANDARD"
    ELEVATED = "ELEVATED"
    UNKNOWN = "UNKNOWN"


class RiskLevel(ClosedEnum):
    LOW = "LOW"
    MEDIUM = "MEDIUM"
    HIGH = "HIGH"
    UNKNOWN = "UNKNOWN"


class SessionScope(ClosedEnum):
    MAIN = "MAIN"
    DM = "DM"
    GROUP = "GROUP"
    API = "API"
    UNKNOWN = "UNKNOWN"


class AuditEventType(ClosedEnum):
    AUTH_SUCCESS = "AUTH_SUCCESS"
    AUTH_FAILURE = "AUTH_FAILURE"
    TOOL_CALL = "TOOL_CALL"
    SESSION_CREATE = "SESSION_CREATE"
    SESSION_ARCHIVE = "SESSION_ARCHIVE"
    CONFIG_CHANGE = "CONFIG_CHANGE"
    CONTENT_FILTER = "CONTENT_FILTER"
    MESSAGE_ROUTED = "MESSAGE_ROUTED"
    DELIVERY_FAILED = "DELIVERY_FAILED"
    MESSAGE_PROCESSED = "MESSAGE_PROCESSED"
    TOOL_LIMIT_EXCEEDED = "TOOL_LIMIT_EXCEEDED"
    UNKNOWN = "UNKNOWN"


class ApiModel(BaseModel):
    """Base for admin API records."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )

    def to_payload(self) -> dict[str, Any]:
        """Serialize with camelCase keys, as the admin API expects."""
        return self.model_dump(mode="json", by_alias=True)


class Agent(ApiModel):
    """A configured conversational agent."""

    agent_id: str = Field(..., min_length=1, description="Stable key, immutable once created")
    display_name: str | None = None
    model: str | None = None
    trust_level: TrustLevel = TrustLevel.STANDARD
    system_prompt: str | None = None
    allowed_tools: list[str] = Field(default_factory=list)
    denied_tools: list[str] = Field(default_factory=list)
    max_tokens_per_request: int = 4096
    max_tool_calls_per_request: int = 10

    @field_validator("allowed_tools", "denied_tools", mode="before")
    @classmethod
    def null_to_empty(cls, v: Any) -> Any:
        return [] if v is None else v


class IdentityMapping(ApiModel):
    """Association between an external channel user and a jclaw principal."""

    id: str
    channel_type: str
    channel_user_id: str
    display_name: str | None = None
    created_at: datetime | None = None
    jclaw_principal: str | None = None


class Session(ApiModel):
    """A live conversation bound to one agent, principal and channel."""

    id: str
    agent_id: str
    principal: str
    channel_type: str
    scope: SessionScope = SessionScope.MAIN
    message_count: int = 0
    total_tokens: int = 0
    last_active_at: datetime | None = None


class AuditEvent(ApiModel):
    """Immutable audit log record."""

    timestamp: datetime | None = None
    event_type: AuditEventType
    principal: str | None = None
    agent_id: str | None = None
    action: str = ""
    outcome: str | None = None


class AuditPage(ApiModel):
    """One page of the audit log (Spring `Page` envelope)."""

    content: list[AuditEvent] = Field(default_factory=list)
    number: int = 0
    total_pages: int = 0

    @field_validator("content", "number", "total_pages", mode="before")
    @classmethod
    def null_to_default(cls, v: Any, info) -> Any:
        if v is None:
            return [] if info.field_name == "content" else 0
        return v


class Skill(ApiModel):
    """A registered tool as exposed by the skills endpoint."""

    name: str
    description: str = ""
    risk_level: RiskLevel = RiskLevel.LOW
    requires_approval: bool = False


class UserInfo(ApiModel):
    name: str | None = None
    authorities: list[str] = Field(default_factory=list)


class ChatRequest(ApiModel):
    message: str = Field(..., min_length=1)
    agent_id: str
    conversation_id: str
    model_override: str | None = None

    def to_payload(self) -> dict[str, Any]:
        # modelOverride is omitted entirely when unset
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class ChatReply(ApiModel):
    response: str | None = None
    agent_id: str | None = None


def parse_model(model: type[M], payload: Any) -> M:
    """
    Validate a JSON payload into `model`.

    Raises:
        MalformedResponse: If the payload does not match the model
    """
    try:
        return model.model_validate(payload)
    except SchemaError as e:
        raise MalformedResponse(
            f"Unexpected {model.__name__} payload",
            details={"errors": e.errors(include_url=False, include_context=False)},
        ) from e


def parse_models(model: type[M], payload: Any) -> list[M]:
    """
    Validate a JSON array into a list of `model`. A null payload is an empty list.

    Raises:
        MalformedResponse: If the payload is not a list of matching objects
    """
    if payload is None:
        return []
    try:
        return TypeAdapter(list[model]).validate_python(payload)
    except SchemaError as e:
        raise MalformedResponse(
            f"Unexpected {model.__name__} list payload",
            details={"errors": e.errors(include_url=False, include_context=False)},
        ) from e
