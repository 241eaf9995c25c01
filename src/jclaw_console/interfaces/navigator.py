# src/jclaw_console/interfaces/navigator.py
from __future__ import annotations
from abc import ABC, abstractmethod


class INavigator(ABC):
    """
    Full-page navigation, used when the admin session has expired.

    Example:
        class BrowserNavigator(INavigator):
            def navigate(self, url: str) -> None:
                webbrowser.open(url)
    """

    @abstractmethod
    def navigate(self, url: str) -> None:
        """Leave the console and load `url` in its place."""
        pass
