"""Assertion helpers with readable failure messages.

Prefer Playwright's ``expect`` for anything that should auto-retry. These
helpers check the current state once.
"""

import logging
import re
from typing import Optional

from playwright.async_api import APIResponse, Locator, Page, expect

from .network import UrlPattern

logger = logging.getLogger(__name__)


async def assert_contains_text(locator: Locator, expected_text: str) -> None:
    """Case-insensitive, partial text match.

    Raises:
        AssertionError: If the element text does not contain ``expected_text``
    """
    actual = await locator.text_content()
    if actual is None or expected_text.lower() not in actual.lower():
        raise AssertionError(
            f'Expected element to contain "{expected_text}" but got "{actual}"'
        )


def assert_url_matches(
    page: Page, pattern: UrlPattern, description: Optional[str] = None
) -> None:
    """Substring match for strings, ``re.search`` for compiled patterns.

    Raises:
        AssertionError: If the current URL does not match
    """
    url = page.url
    matches = pattern in url if isinstance(pattern, str) else re.search(pattern, url)
    if not matches:
        desc = f" ({description})" if description else ""
        raise AssertionError(f"Expected URL to match pattern{desc}, but got: {url}")


async def assert_element_ready(locator: Locator, timeout: int = 10000) -> None:
    """Assert the element is visible and enabled, retrying until ``timeout``."""
    await expect(locator).to_be_visible(timeout=timeout)
    await expect(locator).to_be_enabled(timeout=timeout)


async def assert_field_value(locator: Locator, expected_value: str) -> None:
    actual = await locator.input_value()
    if actual != expected_value:
        raise AssertionError(
            f'Expected field value "{expected_value}" but got "{actual}"'
        )


async def assert_element_count(locator: Locator, expected_count: int) -> None:
    count = await locator.count()
    if count != expected_count:
        raise AssertionError(f"Expected {expected_count} elements but found {count}")


def assert_api_success(response: APIResponse) -> None:
    """Assert a 2xx status without reading the body.

    Use ``ApiClient.expect_success`` when the body should be in the message.
    """
    if not response.ok:
        logger.error(f"{response.url} returned {response.status}")
        raise AssertionError(f"API request failed with status {response.status}")
