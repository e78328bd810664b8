"""Network interception and mocking helpers.

Thin wrappers over Playwright's route API for mocking API responses,
blocking third-party traffic and recording requests.

Example:
    await mock_api_response(
        page, "**/api/users", MockResponse(status=500, body={"error": "boom"})
    )
"""

import asyncio
import json
import logging
import re
from typing import Any, Dict, List, Pattern, Union

from playwright.async_api import Page, Request, Route

from ..models.browser_models import MockResponse

logger = logging.getLogger(__name__)

UrlPattern = Union[str, Pattern[str]]


def url_matches(url: str, pattern: UrlPattern) -> bool:
    """Substring match for strings, ``re.search`` for compiled patterns."""
    if isinstance(pattern, str):
        return pattern in url
    return re.search(pattern, url) is not None


async def mock_api_response(
    page: Page, url_pattern: UrlPattern, mock_response: MockResponse
) -> None:
    """Fulfil matching requests with a canned JSON response."""

    async def handler(route: Route) -> None:
        logger.debug(f"Mocking response for: {route.request.url}")
        await route.fulfill(
            status=mock_response.status,
            body=json.dumps(mock_response.body if mock_response.body is not None else {}),
            headers={"Content-Type": "application/json", **mock_response.headers},
        )

    await page.route(url_pattern, handler)


async def block_url(page: Page, url_pattern: UrlPattern) -> None:
    """Abort matching requests, e.g. analytics or ads."""

    async def handler(route: Route) -> None:
        logger.debug(f"Blocking request to: {route.request.url}")
        await route.abort()

    await page.route(url_pattern, handler)


async def wait_for_api_request(
    page: Page, url_pattern: UrlPattern, timeout: int = 30000
) -> Request:
    """Wait for a request whose URL matches ``url_pattern``.

    Raises:
        TimeoutError: If no matching request is issued in time
    """
    matched = asyncio.get_running_loop().create_future()

    def on_request(request: Request) -> None:
        if not matched.done() and url_matches(request.url, url_pattern):
            matched.set_result(request)

    page.on("request", on_request)
    try:
        return await asyncio.wait_for(matched, timeout=timeout / 1000)
    except asyncio.TimeoutError:
        raise TimeoutError(f"Timeout waiting for API request: {url_pattern}") from None
    finally:
        page.remove_listener("request", on_request)


def capture_api_requests(page: Page, url_pattern: UrlPattern) -> List[Dict[str, Any]]:
    """Start recording matching requests.

    Returns:
        A list that fills with ``{url, method, post_data}`` entries as the
        page issues matching requests
    """
    requests: List[Dict[str, Any]] = []

    def on_request(request: Request) -> None:
        if url_matches(request.url, url_pattern):
            requests.append(
                {
                    "url": request.url,
                    "method": request.method,
                    "post_data": request.post_data,
                }
            )

    page.on("request", on_request)
    return requests


async def slow_down_network(page: Page, delay_ms: int = 1000) -> None:
    """Delay every request to exercise loading states."""

    async def handler(route: Route) -> None:
        await asyncio.sleep(delay_ms / 1000)
        await route.continue_()

    await page.route("**/*", handler)
    logger.debug(f"Slowed down network by {delay_ms}ms")
