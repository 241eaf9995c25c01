"""Paged, filterable audit log."""
from dataclasses import dataclass

from jclaw_console.config.settings import Settings, get_settings
from jclaw_console.controllers.base import ControllerState, ListController
from jclaw_console.domain.models import AuditPage
from jclaw_console.gateway.client import GatewayClient
from jclaw_console.infrastructure.observability.logging import get_logger
from jclaw_console.ui.page import ConsolePage
from jclaw_console.ui.views import render_audit_table, render_pagination

logger = get_logger(__name__)


@dataclass
class AuditState(ControllerState):
    page: int = 0
    total_pages: int = 0

    @property
    def has_pagination(self) -> bool:
        return self.total_pages > 1

    @property
    def has_prev(self) -> bool:
        return self.has_pagination and self.page > 0

    @property
    def has_next(self) -> bool:
        return self.has_pagination and self.page < self.total_pages - 1


class AuditLogController(ListController[AuditPage]):
    """
    Audit table plus Prev/Next pagination.

    Out-of-range pages are never requested: `prev_page()` and `next_page()`
    behave like the rendered buttons and do nothing while disabled.
    """

    name = "audit_log"
    subject = "audit log"
    empty_message = "No audit events found."

    def __init__(self, gateway: GatewayClient, page: ConsolePage, settings: Settings | None = None):
        super().__init__(page.audit_log, state=AuditState())
        self.gateway = gateway
        self.page = page
        self.settings = settings or get_settings()
        self._requested_page = 0

    @property
    def principal_filter(self) -> str | None:
        return self.page.audit_principal.value.strip() or None

    @property
    def event_type_filter(self) -> str | None:
        return self.page.audit_event_type.value or None

    async def fetch(self) -> AuditPage:
        return await self.gateway.audit_page(
            self._requested_page,
            self.settings.audit_page_size,
            principal=self.principal_filter,
            event_type=self.event_type_filter,
        )

    def is_empty(self, snapshot: AuditPage) -> bool:
        return not snapshot.content

    def render(self, snapshot: AuditPage) -> str:
        return render_audit_table(snapshot.content)

    def on_loaded(self, snapshot: AuditPage) -> None:
        self.state.page = snapshot.number
        self.state.total_pages = snapshot.total_pages
        if self.is_empty(snapshot):
            self.page.audit_pagination.clear()
        else:
            self.page.audit_pagination.update(render_pagination(self.state.page, self.state.total_pages))

    async def load(self, page: int = 0) -> None:
        self._requested_page = page
        await self._load(self.fetch, page=page)

    async def prev_page(self) -> None:
        if not self.state.has_prev:
            return
        await self.load(self.state.page - 1)

    async def next_page(self) -> None:
        if not self.state.has_next:
            return
        await self.load(self.state.page + 1)

    async def apply_filters(self, principal: str | None = None, event_type: str | None = None) -> None:
        """Set the principal / event type filters and go back to the first page."""
        self.page.audit_principal.value = principal or ""
        self.page.audit_event_type.select(event_type or "")
        await self.load(0)
