"""Login page object."""

import logging
import re
from typing import Optional

from playwright.async_api import Locator

from .base_page import BasePage

logger = logging.getLogger(__name__)


class LoginPage(BasePage):
    """Encapsulates login interactions.

    Role selectors are preferred because they survive CSS changes; test ids
    and class names are fallbacks. Locators are properties so they are
    re-evaluated on each access.
    """

    path = "/login"

    @property
    def email_input(self) -> Locator:
        return self.page.get_by_role("textbox", name=re.compile("email", re.IGNORECASE))

    @property
    def password_input(self) -> Locator:
        # Password fields have no textbox role
        return self.page.locator('input[type="password"]').or_(
            self.page.get_by_placeholder(re.compile("password", re.IGNORECASE))
        )

    @property
    def login_button(self) -> Locator:
        return self.page.get_by_role(
            "button", name=re.compile("log in|sign in", re.IGNORECASE)
        )

    @property
    def error_message(self) -> Locator:
        return self.page.locator('[data-testid="error-message"]').or_(
            self.page.locator(".error, .alert-danger")
        )

    async def goto(self, path: Optional[str] = None) -> None:
        """Open the login page and wait for the form."""
        await super().goto(path)
        await self.wait_for_element(self.email_input)

    async def login(self, email: str, password: str) -> None:
        """Fill credentials, submit and wait for the resulting navigation."""
        await self.email_input.fill(email)
        await self.password_input.fill(password)
        await self.login_button.click()
        await self.wait_for_network_idle()
        logger.debug(f"Submitted login for {email}")

    async def has_error_message(self) -> bool:
        return await self.is_visible(self.error_message)

    async def get_error_message(self) -> str:
        return await self.error_message.text_content() or ""

    async def clear_form(self) -> None:
        await self.email_input.clear()
        await self.password_input.clear()

    async def is_already_logged_in(self) -> bool:
        """Detect dashboard markers, so a restored session can skip login."""
        indicator = self.page.locator('[data-testid="dashboard"], [href*="dashboard"]')
        return await self.is_visible(indicator)
