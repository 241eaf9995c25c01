"""
Controller building blocks.

Every controller owns a small state record instead of free-floating flags:
`initialized` makes `init()` idempotent, and `load_seq` tags each load so a
response that arrives after a newer load was issued is dropped instead of
overwriting the newer render.
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Generic, TypeVar

from jclaw_console.domain.exceptions import RequestFailed
from jclaw_console.infrastructure.observability.context import log_context
from jclaw_console.infrastructure.observability.logging import get_logger
from jclaw_console.ui.views import render_empty, render_load_error
from jclaw_console.ui.widgets import Region

logger = get_logger(__name__)

S = TypeVar("S")


@dataclass
class ControllerState:
    initialized: bool = False
    load_seq: int = 0

    def begin_load(self) -> int:
        self.load_seq += 1
        return self.load_seq

    def is_current(self, token: int) -> bool:
        return token == self.load_seq


class Controller:
    """Base for tab controllers: `init()` runs `_initialize()` at most once until `reset()`."""

    name: str = "controller"

    def __init__(self, state: ControllerState | None = None):
        self.state = state or ControllerState()

    async def init(self) -> None:
        if self.state.initialized:
            return
        self.state.initialized = True
        logger.debug("initializing", controller=self.name)
        await self._initialize()

    def reset(self) -> None:
        """Allow the next `init()` to run again."""
        self.state.initialized = False

    async def _initialize(self) -> None:
        pass


class ListController(Controller, ABC, Generic[S]):
    """
    Fetch, then render into one region.

    An empty snapshot renders `empty_message`; a RequestFailed renders an
    inline error in the region and goes no further. Subclasses provide
    `fetch()` and `render()` and may react to a fresh snapshot in
    `on_loaded()`.
    """

    subject: str = "items"
    empty_message: str = "Nothing here yet."

    def __init__(self, region: Region, state: ControllerState | None = None):
        super().__init__(state)
        self.region = region

    @abstractmethod
    async def fetch(self) -> S:
        """Retrieve the current snapshot from the admin API."""
        pass

    @abstractmethod
    def render(self, snapshot: S) -> str:
        """Render a non-empty snapshot."""
        pass

    def is_empty(self, snapshot: S) -> bool:
        return not snapshot

    def on_loaded(self, snapshot: S) -> None:
        pass

    async def load(self) -> None:
        await self._load(self.fetch)

    async def _initialize(self) -> None:
        await self.load()

    async def _load(self, fetch: Callable[[], Awaitable[S]], **context: Any) -> None:
        token = self.state.begin_load()
        with log_context(controller=self.name, **context):
            try:
                snapshot = await fetch()
            except RequestFailed as e:
                if self.state.is_current(token):
                    logger.warning("load failed", error=e.message)
                    self.region.update(render_load_error(self.subject, e.message))
                return

            if not self.state.is_current(token):
                logger.debug("discarding stale response", token=token, current=self.state.load_seq)
                return

            if self.is_empty(snapshot):
                self.region.update(render_empty(self.empty_message))
            else:
                self.region.update(self.render(snapshot))
            self.on_loaded(snapshot)
            logger.debug("loaded", token=token)
