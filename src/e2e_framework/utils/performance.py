"""Page performance measurements.

Metrics come from the browser's Navigation and Resource Timing APIs, read
with ``page.evaluate``. They are meant for regression thresholds, not for
benchmarking.
"""

import asyncio
import logging
import time
from typing import List

from playwright.async_api import Page, Response

from ..models.browser_models import PerformanceMetrics, ResourceTiming
from .network import UrlPattern, url_matches

logger = logging.getLogger(__name__)

_METRICS_SCRIPT = """
() => {
    const nav = performance.getEntriesByType('navigation')[0];
    const paint = performance.getEntriesByType('paint');
    const resources = performance.getEntriesByType('resource');
    const paintTime = (name) => {
        const entry = paint.find((p) => p.name === name);
        return entry ? entry.startTime : null;
    };
    return {
        load_time: nav ? nav.loadEventEnd - nav.fetchStart : 0,
        dom_content_loaded: nav ? nav.domContentLoadedEventEnd - nav.fetchStart : 0,
        ttfb: nav ? nav.responseStart - nav.requestStart : 0,
        first_paint: paintTime('first-paint'),
        first_contentful_paint: paintTime('first-contentful-paint'),
        network_requests: resources.length,
        total_transfer_size: resources.reduce((sum, r) => sum + (r.transferSize || 0), 0),
    };
}
"""

_RESOURCES_SCRIPT = """
() => performance.getEntriesByType('resource').map((entry) => ({
    name: entry.name,
    duration: entry.duration,
    size: entry.transferSize || 0,
}))
"""


async def collect_performance_metrics(page: Page) -> PerformanceMetrics:
    """Collect navigation, paint and resource metrics for the current page."""
    metrics = PerformanceMetrics(**await page.evaluate(_METRICS_SCRIPT))
    logger.debug(f"Performance metrics collected: {metrics}")
    return metrics


async def assert_page_load_time(page: Page, max_load_time_ms: float) -> PerformanceMetrics:
    """Assert the page loaded within ``max_load_time_ms``.

    Returns:
        The collected metrics

    Raises:
        AssertionError: If the load time exceeds the threshold
    """
    metrics = await collect_performance_metrics(page)

    if metrics.load_time > max_load_time_ms:
        raise AssertionError(
            f"Page load time {metrics.load_time}ms exceeds threshold of "
            f"{max_load_time_ms}ms"
        )

    logger.info(f"Page load time: {metrics.load_time}ms (threshold: {max_load_time_ms}ms)")
    return metrics


async def measure_api_response_time(
    page: Page, url_pattern: UrlPattern, timeout: int = 30000
) -> float:
    """Time from the call until the first matching response arrives.

    Start the wait before triggering the request, e.g. with
    ``asyncio.ensure_future``.

    Returns:
        Elapsed time in milliseconds

    Raises:
        TimeoutError: If no matching response arrives in time
    """
    start = time.monotonic()
    arrived = asyncio.get_running_loop().create_future()

    def on_response(response: Response) -> None:
        if not arrived.done() and url_matches(response.url, url_pattern):
            arrived.set_result((time.monotonic() - start) * 1000)

    page.on("response", on_response)
    try:
        return await asyncio.wait_for(arrived, timeout=timeout / 1000)
    except asyncio.TimeoutError:
        raise TimeoutError(f"Timeout waiting for API response: {url_pattern}") from None
    finally:
        page.remove_listener("response", on_response)


async def get_slowest_resources(page: Page, limit: int = 5) -> List[ResourceTiming]:
    """Return the ``limit`` resources that took longest to load."""
    entries = await page.evaluate(_RESOURCES_SCRIPT)
    resources = [ResourceTiming(**entry) for entry in entries]
    resources.sort(key=lambda resource: resource.duration, reverse=True)
    return resources[:limit]
