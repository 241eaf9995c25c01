"""
Page model widgets.

Each widget is the in-memory counterpart of one element of the console
page. Controllers write rendered fragments into regions and read operator
input from fields and selectors; nothing else touches them.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Awaitable, Callable, Optional

KeyHandler = Callable[[str, bool], Awaitable[None]]


@dataclass
class Region:
    """A content area owned by exactly one controller."""
    html: str = ""

    def update(self, html: str) -> None:
        self.html = html

    def clear(self) -> None:
        self.html = ""


@dataclass
class Label:
    text: str = ""


@dataclass
class TextField:
    value: str = ""
    disabled: bool = False
    placeholder: str = ""
    on_key: Optional[KeyHandler] = field(default=None, repr=False)

    async def press_key(self, key: str, shift: bool = False) -> None:
        """Deliver a key press to the bound handler, if any."""
        if self.on_key is not None:
            await self.on_key(key, shift)


@dataclass(frozen=True)
class Option:
    value: str
    label: str


@dataclass
class Selector:
    options: list[Option] = field(default_factory=list)
    value: str = ""

    @property
    def values(self) -> list[str]:
        return [o.value for o in self.options]

    def set_options(self, options: list[Option], keep_selection: bool = True) -> None:
        """
        Replace the option list.

        With `keep_selection` the current value survives when it is still
        offered; otherwise the first option becomes selected.
        """
        previous = self.value
        self.options = list(options)
        if keep_selection and previous in self.values:
            self.value = previous
        else:
            self.value = self.options[0].value if self.options else ""

    def select(self, value: str) -> None:
        if value not in self.values:
            raise ValueError(f"Unknown option: {value!r}")
        self.value = value


@dataclass
class Button:
    label: str
    disabled: bool = False


@dataclass
class Modal:
    title: str = ""
    visible: bool = False


@dataclass
class Tab:
    """A tab button and its panel; the pair is always toggled together."""
    name: str
    button_active: bool = False
    panel_active: bool = False

    @property
    def active(self) -> bool:
        return self.button_active and self.panel_active
