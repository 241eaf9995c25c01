"""Terminal implementation of operator confirmations and alerts."""
from rich.console import Console
from rich.panel import Panel
from rich.prompt import Confirm

from jclaw_console.interfaces import IOperatorPrompt


class RichPrompt(IOperatorPrompt):
    """Ask and alert on a rich console."""

    def __init__(self, console: Console | None = None):
        self.console = console or Console()

    def confirm(self, message: str) -> bool:
        return Confirm.ask(message, console=self.console, default=False)

    def alert(self, message: str) -> None:
        self.console.print(Panel(message, title="jclaw", border_style="red"))
