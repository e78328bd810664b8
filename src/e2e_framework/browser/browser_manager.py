"""Scoped browser contexts and pages.

This module provides the BrowserContextManager, which wraps contexts and
pages in async context managers so they are closed even when a test or the
global setup fails part way through.
"""

from typing import Optional, Dict, Any
import logging
from contextlib import asynccontextmanager

from playwright.async_api import Browser, BrowserContext, Page

from .playwright_integration import PlaywrightManager
from ..models.browser_models import BrowserOptions

logger = logging.getLogger(__name__)


class BrowserContextManager:
    """Manage browser contexts with automatic cleanup.

    PATTERN: Use context managers for automatic resource cleanup.
    """

    def __init__(self, playwright_manager: Optional[PlaywrightManager] = None):
        """Initialize the browser context manager.

        Args:
            playwright_manager: Playwright manager (a default one is created
                if omitted)
        """
        self.playwright_manager = playwright_manager or PlaywrightManager()
        self._active_contexts: Dict[str, BrowserContext] = {}
        self._active_pages: Dict[str, Page] = {}

    @classmethod
    def from_options(cls, options: BrowserOptions) -> "BrowserContextManager":
        return cls(PlaywrightManager(options))

    @asynccontextmanager
    async def create_context(self, browser: Browser, **options: Any):
        """Create and manage a browser context.

        Example:
            async with manager.create_context(browser) as context:
                ...
            # Context automatically closed
        """
        context = None
        context_id = None
        try:
            context = await self.playwright_manager.create_context(browser, **options)
            context_id = f"context_{id(context)}"
            self._active_contexts[context_id] = context
            yield context
        finally:
            if context:
                try:
                    await context.close()
                    self._active_contexts.pop(context_id, None)
                    self.playwright_manager.contexts.pop(context_id, None)
                    logger.debug(f"Closed context: {context_id}")
                except Exception as e:
                    logger.error(f"Error closing context: {e}")

    @asynccontextmanager
    async def create_page(self, context: BrowserContext):
        """Create and manage a page.

        Example:
            async with manager.create_page(context) as page:
                await page.goto("/login")
        """
        page = None
        page_id = None
        try:
            page = await self.playwright_manager.create_page(context)
            page_id = f"page_{id(page)}"
            self._active_pages[page_id] = page
            yield page
        finally:
            if page:
                try:
                    await page.close()
                    self._active_pages.pop(page_id, None)
                    self.playwright_manager.pages.pop(page_id, None)
                    logger.debug(f"Closed page: {page_id}")
                except Exception as e:
                    logger.error(f"Error closing page: {e}")

    @asynccontextmanager
    async def open_page(self, **context_options: Any):
        """Launch (or reuse) the browser and yield a page in a fresh context.

        Example:
            async with manager.open_page() as (context, page):
                await LoginPage(page).goto()
        """
        browser = await self.playwright_manager.launch_browser()
        async with self.create_context(browser, **context_options) as context:
            async with self.create_page(context) as page:
                yield context, page

    async def cleanup_all(self) -> None:
        """Close all tracked pages and contexts, then stop Playwright."""
        for page_id, page in list(self._active_pages.items()):
            try:
                await page.close()
                logger.debug(f"Cleaned up page: {page_id}")
            except Exception as e:
                logger.error(f"Error cleaning up page {page_id}: {e}")
        self._active_pages.clear()

        for context_id, context in list(self._active_contexts.items()):
            try:
                await context.close()
                logger.debug(f"Cleaned up context: {context_id}")
            except Exception as e:
                logger.error(f"Error cleaning up context {context_id}: {e}")
        self._active_contexts.clear()

        await self.playwright_manager.cleanup()
        logger.info("Browser context manager cleanup completed")
