"""Tests for performance helpers."""

import asyncio

import pytest
from unittest.mock import AsyncMock, Mock

from e2e_framework.models.browser_models import PerformanceMetrics
from e2e_framework.utils.performance import (
    assert_page_load_time,
    collect_performance_metrics,
    get_slowest_resources,
    measure_api_response_time,
)

METRICS = {
    "load_time": 1200.0,
    "dom_content_loaded": 800.0,
    "ttfb": 120.0,
    "first_paint": 300.0,
    "first_contentful_paint": None,
    "network_requests": 14,
    "total_transfer_size": 204800,
}


@pytest.fixture
def mock_page():
    page = Mock()
    page.evaluate = AsyncMock(return_value=METRICS)
    page.listeners = []
    page.on.side_effect = lambda event, handler: page.listeners.append(handler)
    page.remove_listener.side_effect = lambda event, handler: page.listeners.remove(handler)
    return page


@pytest.mark.asyncio
async def test_collect_performance_metrics(mock_page):
    metrics = await collect_performance_metrics(mock_page)

    assert isinstance(metrics, PerformanceMetrics)
    assert metrics.load_time == 1200.0
    assert metrics.first_contentful_paint is None
    assert metrics.network_requests == 14


@pytest.mark.asyncio
async def test_assert_page_load_time_within_threshold(mock_page):
    metrics = await assert_page_load_time(mock_page, 2000)

    assert metrics.dom_content_loaded == 800.0


@pytest.mark.asyncio
async def test_assert_page_load_time_exceeded(mock_page):
    with pytest.raises(AssertionError, match="1200.0ms exceeds threshold of 1000ms"):
        await assert_page_load_time(mock_page, 1000)


@pytest.mark.asyncio
async def test_measure_api_response_time(mock_page):
    task = asyncio.ensure_future(measure_api_response_time(mock_page, "/api/orders"))
    await asyncio.sleep(0)

    for handler in list(mock_page.listeners):
        handler(Mock(url="https://app.test/api/users"))
    assert not task.done()

    for handler in list(mock_page.listeners):
        handler(Mock(url="https://app.test/api/orders"))
    elapsed = await task

    assert elapsed >= 0
    assert mock_page.listeners == []


@pytest.mark.asyncio
async def test_measure_api_response_time_timeout(mock_page):
    with pytest.raises(TimeoutError, match="/api/orders"):
        await measure_api_response_time(mock_page, "/api/orders", timeout=10)

    assert mock_page.listeners == []


@pytest.mark.asyncio
async def test_get_slowest_resources(mock_page):
    mock_page.evaluate.return_value = [
        {"name": "app.js", "duration": 120.0, "size": 5000},
        {"name": "hero.png", "duration": 480.5, "size": 90000},
        {"name": "font.woff2", "duration": 60.0, "size": 0},
    ]

    slowest = await get_slowest_resources(mock_page, limit=2)

    assert [resource.name for resource in slowest] == ["hero.png", "app.js"]
