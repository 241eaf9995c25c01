# tests/factories/__init__.py
"""
Factory Boy factories for admin API payloads.

Factories build the camelCase JSON dictionaries the server sends, so tests
exercise the same parsing path as production.

Usage:
    from tests.factories import AgentPayloadFactory

    payload = AgentPayloadFactory(agentId="support", trustLevel="ELEVATED")
    fake_api.on("GET", "/admin/api/agents", json=[payload])
"""

from tests.factories.payloads import (
    AgentPayloadFactory,
    AuditEventPayloadFactory,
    IdentityMappingPayloadFactory,
    SessionPayloadFactory,
    SkillPayloadFactory,
    audit_page_payload,
)

__all__ = [
    "AgentPayloadFactory",
    "AuditEventPayloadFactory",
    "IdentityMappingPayloadFactory",
    "SessionPayloadFactory",
    "SkillPayloadFactory",
    "audit_page_payload",
]
