"""Playwright browser lifecycle management.

This module provides the PlaywrightManager class which starts Playwright,
launches browsers and creates isolated contexts and pages configured from
``BrowserOptions`` (base URL, storage state, viewport, timeouts).

CRITICAL: Proper cleanup is essential to avoid resource leaks.
"""

from playwright.async_api import (
    async_playwright,
    Browser,
    BrowserContext,
    Page,
    Playwright,
)
from typing import Optional, Dict, Any
import logging

from ..models.browser_models import BrowserOptions, BrowserType

logger = logging.getLogger(__name__)


class PlaywrightManager:
    """Manage Playwright browser instances and contexts.

    PATTERN: Reuse browser instances when possible, but create isolated contexts
    for each test to prevent interference.

    CRITICAL: Always call cleanup() or use as async context manager to ensure
    proper resource cleanup.
    """

    def __init__(self, options: Optional[BrowserOptions] = None):
        """Initialize the Playwright manager.

        Args:
            options: Default launch and context options
        """
        self.options = options or BrowserOptions()
        self.playwright: Optional[Playwright] = None
        self.browsers: Dict[str, Browser] = {}
        self.contexts: Dict[str, BrowserContext] = {}
        self.pages: Dict[str, Page] = {}
        self._initialized = False

    async def __aenter__(self):
        """Async context manager entry."""
        await self.initialize()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Async context manager exit."""
        await self.cleanup()

    async def initialize(self) -> None:
        """Start Playwright.

        Raises:
            RuntimeError: If initialization fails
        """
        if self._initialized:
            return

        try:
            self.playwright = await async_playwright().start()
            self._initialized = True
            logger.info("Playwright initialized successfully")
        except Exception as e:
            logger.error(f"Failed to initialize Playwright: {e}")
            raise RuntimeError(f"Playwright initialization failed: {e}")

    async def launch_browser(
        self,
        browser_type: Optional[BrowserType] = None,
        headless: Optional[bool] = None,
        **options: Any,
    ) -> Browser:
        """Launch a browser, reusing a running one of the same type.

        Args:
            browser_type: Browser to launch (defaults to options.browser)
            headless: Headless mode (defaults to options.headless)
            **options: Additional launch options

        Returns:
            Browser instance

        Raises:
            RuntimeError: If browser fails to launch
        """
        if not self._initialized:
            await self.initialize()

        browser_type = browser_type or self.options.browser
        headless = self.options.headless if headless is None else headless

        browser_key = browser_type.value
        if browser_key in self.browsers:
            logger.debug(f"Reusing existing {browser_type.value} browser")
            return self.browsers[browser_key]

        try:
            browser_launcher = getattr(self.playwright, browser_type.value)
            browser = await browser_launcher.launch(headless=headless, **options)

            self.browsers[browser_key] = browser
            logger.info(f"Launched {browser_type.value} browser (headless={headless})")

            return browser
        except Exception as e:
            logger.error(f"Failed to launch {browser_type.value} browser: {e}")
            raise RuntimeError(f"Browser launch failed: {e}")

    def context_options(self, **overrides: Any) -> Dict[str, Any]:
        """Translate BrowserOptions into ``new_context`` keyword arguments."""
        context_options: Dict[str, Any] = {}

        if self.options.base_url:
            context_options["base_url"] = self.options.base_url
        if self.options.storage_state:
            context_options["storage_state"] = self.options.storage_state

        viewport = self.options.viewport
        if viewport:
            context_options["viewport"] = {
                "width": viewport.width,
                "height": viewport.height,
            }
            context_options["device_scale_factor"] = viewport.device_scale_factor
            context_options["is_mobile"] = viewport.is_mobile
            context_options["has_touch"] = viewport.has_touch

        context_options.update(overrides)
        return context_options

    async def create_context(self, browser: Browser, **options: Any) -> BrowserContext:
        """Create an isolated browser context.

        CRITICAL: Each test should use its own context to prevent interference.

        Args:
            browser: Browser instance to create context in
            **options: Overrides for the derived context options

        Returns:
            Browser context

        Raises:
            RuntimeError: If context creation fails
        """
        try:
            context = await browser.new_context(**self.context_options(**options))
            context.set_default_timeout(self.options.action_timeout_ms)
            context.set_default_navigation_timeout(self.options.navigation_timeout_ms)

            context_id = f"context_{id(context)}"
            self.contexts[context_id] = context

            logger.debug(f"Created browser context: {context_id}")
            return context
        except Exception as e:
            logger.error(f"Failed to create browser context: {e}")
            raise RuntimeError(f"Context creation failed: {e}")

    async def create_page(self, context: BrowserContext) -> Page:
        """Create a new page in the specified context.

        Raises:
            RuntimeError: If page creation fails
        """
        try:
            page = await context.new_page()

            page_id = f"page_{id(page)}"
            self.pages[page_id] = page

            logger.debug(f"Created page: {page_id}")
            return page
        except Exception as e:
            logger.error(f"Failed to create page: {e}")
            raise RuntimeError(f"Page creation failed: {e}")

    async def cleanup(self) -> None:
        """Close pages, contexts and browsers, then stop Playwright.

        Raises:
            RuntimeError: If any resource failed to close
        """
        errors = []

        for page_id, page in list(self.pages.items()):
            try:
                await page.close()
                logger.debug(f"Closed page: {page_id}")
            except Exception as e:
                errors.append(f"Failed to close page {page_id}: {e}")
        self.pages.clear()

        for context_id, context in list(self.contexts.items()):
            try:
                await context.close()
                logger.debug(f"Closed context: {context_id}")
            except Exception as e:
                errors.append(f"Failed to close context {context_id}: {e}")
        self.contexts.clear()

        for browser_type, browser in list(self.browsers.items()):
            try:
                await browser.close()
                logger.debug(f"Closed browser: {browser_type}")
            except Exception as e:
                errors.append(f"Failed to close browser {browser_type}: {e}")
        self.browsers.clear()

        if self.playwright:
            try:
                await self.playwright.stop()
                logger.info("Playwright stopped successfully")
            except Exception as e:
                errors.append(f"Failed to stop Playwright: {e}")
            self.playwright = None

        self._initialized = False

        if errors:
            error_msg = "; ".join(errors)
            logger.warning(f"Cleanup completed with errors: {error_msg}")
            raise RuntimeError(f"Cleanup errors: {error_msg}")

        logger.info("Cleanup completed successfully")
