"""Browser lifecycle for Playwright-driven tests.

This package provides:
- Playwright start-up, browser launch and isolated contexts
- Scoped contexts and pages that close on exit
"""

from .playwright_integration import PlaywrightManager
from .browser_manager import BrowserContextManager

__all__ = [
    "PlaywrightManager",
    "BrowserContextManager",
]
