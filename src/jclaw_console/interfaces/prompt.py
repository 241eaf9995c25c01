# src/jclaw_console/interfaces/prompt.py
from __future__ import annotations
from abc import ABC, abstractmethod


class IOperatorPrompt(ABC):
    """
    Blocking operator interaction used by mutation flows.

    Destructive actions ask for confirmation first; failures of mutations
    and client-side validation guards are surfaced as alerts.
    """

    @abstractmethod
    def confirm(self, message: str) -> bool:
        """Ask a yes/no question. Returns True only on an explicit yes."""
        pass

    @abstractmethod
    def alert(self, message: str) -> None:
        """Show a message the operator has to acknowledge."""
        pass
