"""Dashboard page object, the landing page after login."""

import re
from typing import Optional

from playwright.async_api import Locator, expect

from .base_page import BasePage


class DashboardPage(BasePage):
    """Dashboard interactions."""

    path = "/dashboard"

    @property
    def welcome_message(self) -> Locator:
        return self.page.get_by_role(
            "heading", name=re.compile("welcome|dashboard", re.IGNORECASE)
        )

    @property
    def user_menu(self) -> Locator:
        return self.page.get_by_role(
            "button", name=re.compile("user|account|profile", re.IGNORECASE)
        )

    @property
    def logout_button(self) -> Locator:
        return self.page.get_by_role(
            "button", name=re.compile("log out|sign out", re.IGNORECASE)
        )

    async def goto(self, path: Optional[str] = None) -> None:
        await super().goto(path)
        await self.wait_for_element(self.welcome_message)

    async def verify_loaded(self) -> None:
        """Assert the welcome heading is visible and the URL is the dashboard."""
        await expect(self.welcome_message).to_be_visible()
        await expect(self.page).to_have_url(re.compile("dashboard"))

    async def logout(self) -> None:
        """Log out, opening the user menu first when there is one."""
        if await self.is_visible(self.user_menu):
            await self.user_menu.click()
            await self.page.wait_for_timeout(300)

        await self.logout_button.click()
        await self.wait_for_network_idle()

    async def is_logged_in(self) -> bool:
        return await self.is_visible(self.welcome_message)
