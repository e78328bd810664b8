"""Wait helpers beyond what ``BasePage`` provides."""

import asyncio
import logging
import re
from typing import Pattern, Union

from playwright.async_api import Locator, Page, Request

logger = logging.getLogger(__name__)


async def wait_for_element_to_disappear(locator: Locator, timeout: int = 10000) -> None:
    """Wait for a spinner, toast or error message to go away."""
    await locator.wait_for(state="hidden", timeout=timeout)


async def wait_for_network_requests(page: Page, count: int, timeout: int = 30000) -> int:
    """Wait until ``count`` requests have been issued by the page.

    Returns:
        Number of requests seen

    Raises:
        TimeoutError: If fewer than ``count`` requests were seen in time
    """
    if count <= 0:
        return 0

    seen = 0
    done = asyncio.get_running_loop().create_future()

    def on_request(request: Request) -> None:
        nonlocal seen
        seen += 1
        if seen >= count and not done.done():
            done.set_result(seen)

    page.on("request", on_request)
    try:
        return await asyncio.wait_for(done, timeout=timeout / 1000)
    except asyncio.TimeoutError:
        raise TimeoutError(
            f"Timeout waiting for {count} network requests. Got {seen}"
        ) from None
    finally:
        page.remove_listener("request", on_request)


async def wait_for_text(
    locator: Locator, text: Union[str, Pattern[str]], timeout: int = 10000
) -> str:
    """Wait for the element to be visible and contain ``text``.

    Returns:
        The element's text content

    Raises:
        AssertionError: If the text is not present
    """
    await locator.wait_for(state="visible", timeout=timeout)
    content = await locator.text_content() or ""

    if isinstance(text, str):
        if text not in content:
            raise AssertionError(f'Expected text "{text}" not found in element')
    elif not re.search(text, content):
        raise AssertionError(f"Expected text pattern {text.pattern!r} not found in element")

    logger.debug("Found expected text in element")
    return content
