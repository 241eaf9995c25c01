"""Full-page navigation targets for session-expiry redirects."""
import webbrowser

from jclaw_console.interfaces import INavigator
from jclaw_console.infrastructure.observability.logging import get_logger

logger = get_logger(__name__)


class BrowserNavigator(INavigator):
    """
    Navigator that hands the target URL to the system browser.

    The last target is kept in `location`, so a headless console
    (`open_browser=False`) still records where the operator was sent.
    """

    def __init__(self, open_browser: bool = True):
        self.open_browser = open_browser
        self.location: str | None = None

    def navigate(self, url: str) -> None:
        self.location = url
        logger.info("navigating", url=url)
        if self.open_browser:
            webbrowser.open(url)
