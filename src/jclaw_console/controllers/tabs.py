"""Which panel is visible, and lazy one-time initialization of each tab."""
from typing import Mapping

from jclaw_console.controllers.base import Controller
from jclaw_console.infrastructure.observability.logging import get_logger
from jclaw_console.ui.page import ConsolePage

logger = get_logger(__name__)


class TabController:
    """
    Exactly one tab button and one panel are active at any time.

    Activating a tab always toggles the active state; the tab's own
    controller decides whether its `init()` still has anything to do.
    """

    def __init__(self, page: ConsolePage, controllers: Mapping[str, Controller]):
        unknown = set(controllers) - set(page.tabs)
        if unknown:
            raise ValueError(f"No tab for controllers: {sorted(unknown)}")
        self.page = page
        self.controllers = dict(controllers)
        self.active: str | None = None

    async def activate(self, name: str) -> None:
        if name not in self.controllers:
            raise ValueError(f"Unknown tab: {name!r}")

        for tab in self.page.tabs.values():
            is_active = tab.name == name
            tab.button_active = is_active
            tab.panel_active = is_active
        self.active = name
        logger.debug("tab activated", tab=name)

        await self.controllers[name].init()
