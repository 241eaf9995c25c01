"""
View fragments.

Pure functions from records to HTML fragments; no I/O and no state. Actions
are exposed as `data-action` / `data-id` attributes for the host page to bind.
"""
from typing import Iterable

from jclaw_console.domain.conversation import ChatMessage
from jclaw_console.domain.models import AuditEvent, Agent, IdentityMapping, Session, Skill
from jclaw_console.ui.rendering import escape_html, format_timestamp


def render_empty(message: str) -> str:
    return f'<div class="empty-state">{escape_html(message)}</div>'


def render_load_error(subject: str, message: str) -> str:
    return render_empty(f"Failed to load {subject}: {message}")


def _badge(kind: str, text: str) -> str:
    return f'<span class="badge badge-{kind}">{escape_html(text)}</span>'


def _action(action: str, record_id: str, label: str, style: str) -> str:
    return (
        f'<button class="btn btn-sm {style}" data-action="{action}" '
        f'data-id="{escape_html(record_id)}">{label}</button>'
    )


def render_agent_cards(agents: Iterable[Agent]) -> str:
    cards = []
    for a in agents:
        model_badge = _badge("scope", a.model) if a.model else ""
        cards.append(
            '<div class="card">'
            f'<div class="card-title">{escape_html(a.agent_id)}</div>'
            f'<div class="card-subtitle">{escape_html(a.display_name)}</div>'
            '<div class="card-meta">'
            f'{_badge("trust", a.trust_level.value)}{model_badge}'
            f'{_badge("scope", f"{a.max_tokens_per_request} tokens")}'
            '</div>'
            '<div class="card-actions">'
            f'{_action("agents.edit", a.agent_id, "Edit", "btn-outline")}'
            f'{_action("agents.delete", a.agent_id, "Delete", "btn-danger")}'
            '</div>'
            '</div>'
        )
    return "".join(cards)


def render_mapping_cards(mappings: Iterable[IdentityMapping]) -> str:
    cards = []
    for m in mappings:
        cards.append(
            '<div class="card">'
            f'<div class="card-title">{escape_html(m.display_name or m.channel_user_id)}</div>'
            f'<div class="card-subtitle">{escape_html(m.channel_type)} &mdash; '
            f'{escape_html(m.channel_user_id)}</div>'
            '<div class="card-meta">'
            f'{_badge("scope", "Created " + format_timestamp(m.created_at))}'
            '</div>'
            '<div class="mapping-input">'
            f'<input type="text" class="input" id="mapping-principal-{escape_html(m.id)}" '
            f'placeholder="jclaw principal" value="{escape_html(m.jclaw_principal)}">'
            f'{_action("mappings.approve", m.id, "Approve", "btn-accent")}'
            '</div>'
            '</div>'
        )
    return "".join(cards)


def render_session_cards(sessions: Iterable[Session]) -> str:
    cards = []
    for s in sessions:
        cards.append(
            '<div class="card">'
            f'<div class="card-title">{escape_html(s.agent_id)}</div>'
            f'<div class="card-subtitle">{escape_html(s.principal)} &mdash; '
            f'{escape_html(s.channel_type)}</div>'
            '<div class="card-meta">'
            f'{_badge("scope", s.scope.value)}'
            f'{_badge("scope", f"{s.message_count} msgs")}'
            f'{_badge("scope", f"{s.total_tokens} tokens")}'
            '</div>'
            f'<div class="card-footnote">Last active: {format_timestamp(s.last_active_at)}</div>'
            '<div class="card-actions">'
            f'{_action("sessions.archive", s.id, "Archive", "btn-danger")}'
            '</div>'
            '</div>'
        )
    return "".join(cards)


AUDIT_COLUMNS = ("Time", "Type", "Principal", "Agent", "Action", "Outcome")


def render_audit_table(events: Iterable[AuditEvent]) -> str:
    header = "".join(f"<th>{c}</th>" for c in AUDIT_COLUMNS)
    rows = []
    for e in events:
        rows.append(
            "<tr>"
            f"<td>{format_timestamp(e.timestamp)}</td>"
            f"<td>{_badge('scope', e.event_type.value)}</td>"
            f"<td>{escape_html(e.principal or '-')}</td>"
            f"<td>{escape_html(e.agent_id or '-')}</td>"
            f'<td title="{escape_html(e.action)}">{escape_html(e.action)}</td>'
            f"<td>{escape_html(e.outcome or '-')}</td>"
            "</tr>"
        )
    return (
        '<table class="audit-table">'
        f"<thead><tr>{header}</tr></thead>"
        f"<tbody>{''.join(rows)}</tbody>"
        "</table>"
    )


def render_pagination(page: int, total_pages: int) -> str:
    """Prev / page info / Next; nothing at all for a single page."""
    if total_pages <= 1:
        return ""
    prev_disabled = " disabled" if page <= 0 else ""
    next_disabled = " disabled" if page >= total_pages - 1 else ""
    return (
        f'<button class="btn btn-sm btn-outline" data-action="audit.prev"{prev_disabled}>Prev</button>'
        f'<span class="page-info">Page {page + 1} of {total_pages}</span>'
        f'<button class="btn btn-sm btn-outline" data-action="audit.next"{next_disabled}>Next</button>'
    )


def render_skill_cards(skills: Iterable[Skill]) -> str:
    cards = []
    for s in skills:
        approval = _badge("approval", "Requires Approval") if s.requires_approval else ""
        cards.append(
            '<div class="card">'
            f'<div class="card-title">{escape_html(s.name)}</div>'
            f'<div class="card-subtitle">{escape_html(s.description)}</div>'
            '<div class="card-meta">'
            f'{_badge("risk-" + s.risk_level.value, s.risk_level.value)}{approval}'
            '</div>'
            '</div>'
        )
    return "".join(cards)


def render_transcript(messages: Iterable[ChatMessage]) -> str:
    return "".join(
        f'<div class="chat-msg {m.role}">{escape_html(m.content)}</div>' for m in messages
    )
