"""End-to-end test framework over Playwright.

Page objects, seeded test-data builders and helpers for browser and API
tests. The data builders live in ``e2e_framework.data`` and have no browser
dependency.
"""

__version__ = "0.1.0"
