"""Base page object.

Shared navigation and wait logic lives here so page objects stay focused on
their own interactions.
"""

import logging
from typing import Optional

from playwright.async_api import Error as PlaywrightError
from playwright.async_api import Locator, Page, expect

logger = logging.getLogger(__name__)


class BasePage:
    """Base class for page objects.

    Relative paths passed to ``goto`` resolve against the context base URL.
    """

    path = ""

    def __init__(self, page: Page):
        self.page = page

    async def goto(self, path: Optional[str] = None) -> None:
        """Navigate to ``path`` (defaults to the page's own path)."""
        target = self.path if path is None else path
        await self.page.goto(target)
        logger.debug(f"Navigated to {target}")

    async def wait_for_network_idle(self) -> None:
        """Wait until there are no network connections for at least 500ms."""
        await self.page.wait_for_load_state("networkidle")

    async def wait_for_element(self, locator: Locator, timeout: int = 10000) -> None:
        """Wait for ``locator`` to be visible and enabled."""
        await locator.wait_for(state="visible", timeout=timeout)
        await expect(locator).to_be_enabled(timeout=timeout)

    async def is_visible(self, locator: Locator, timeout: int = 2000) -> bool:
        """Return whether ``locator`` becomes visible, without raising."""
        try:
            await locator.wait_for(state="visible", timeout=timeout)
            return True
        except PlaywrightError:
            return False

    async def get_title(self) -> str:
        return await self.page.title()
