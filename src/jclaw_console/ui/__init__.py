"""Page model, view fragments and operator interaction."""

from jclaw_console.ui.page import AgentFormView, ConsolePage, TAB_NAMES
from jclaw_console.ui.prompt import RichPrompt
from jclaw_console.ui.rendering import escape_html, format_timestamp
from jclaw_console.ui.widgets import Button, Label, Modal, Option, Region, Selector, Tab, TextField

__all__ = [
    "AgentFormView",
    "ConsolePage",
    "TAB_NAMES",
    "RichPrompt",
    "escape_html",
    "format_timestamp",
    "Button",
    "Label",
    "Modal",
    "Option",
    "Region",
    "Selector",
    "Tab",
    "TextField",
]
