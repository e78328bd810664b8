"""Pytest plugin with framework fixtures.

Enable it from a ``conftest.py``:

    pytest_plugins = ["e2e_framework.fixtures"]

Browser fixtures start a real browser. Data fixtures do not.
"""

import asyncio
import logging
import os
import zlib
from typing import Optional

import pytest
import pytest_asyncio

from .browser.browser_manager import BrowserContextManager
from .config.env_config import EnvironmentConfig, get_config
from .core.api_client import ApiClient
from .data.random_provider import RandomProvider
from .models.browser_models import BrowserOptions
from .pages.dashboard_page import DashboardPage
from .pages.login_page import LoginPage
from .setup.global_setup import global_setup, global_teardown
from .utils.auth import load_auth_state
from .utils.error_helpers import attach_failure_artifacts, start_console_capture
from .utils.logger import configure_logging
from .utils.tags import register_markers

logger = logging.getLogger(__name__)


def pytest_addoption(parser):
    group = parser.getgroup("e2e")
    group.addoption(
        "--e2e-seed",
        action="store",
        type=int,
        default=None,
        help="Base seed for the random_provider fixture",
    )
    group.addoption(
        "--e2e-global-auth",
        action="store_true",
        default=False,
        help="Log in once before the run and reuse the saved storage state",
    )


def pytest_configure(config):
    register_markers(config)
    configure_logging()


def pytest_sessionstart(session):
    if session.config.getoption("--e2e-global-auth", default=False):
        asyncio.run(global_setup())


def pytest_sessionfinish(session, exitstatus):
    if session.config.getoption("--e2e-global-auth", default=False):
        asyncio.run(global_teardown())


@pytest.hookimpl(hookwrapper=True, tryfirst=True)
def pytest_runtest_makereport(item, call):
    # Exposes each phase report as item.rep_setup, item.rep_call, item.rep_teardown
    outcome = yield
    report = outcome.get_result()
    setattr(item, f"rep_{report.when}", report)


def seed_from_env() -> Optional[int]:
    """Base seed from ``TEST_SEED``, or None when it is unset or empty.

    Raises:
        pytest.UsageError: If ``TEST_SEED`` is not an integer
    """
    raw = os.getenv("TEST_SEED", "").strip()
    if not raw:
        return None
    try:
        return int(raw)
    except ValueError:
        raise pytest.UsageError(
            f"TEST_SEED must be an integer, got {raw!r}"
        ) from None


@pytest.fixture(scope="session")
def env_config() -> EnvironmentConfig:
    """Environment config for the run."""
    return get_config()


@pytest.fixture
def random_provider(request) -> RandomProvider:
    """Provider seeded from the test id, isolated from the global default.

    With ``--e2e-seed`` the seed is offset by a hash of the test id, so each
    test has its own reproducible sequence.
    """
    base_seed = request.config.getoption("--e2e-seed", default=None)
    if base_seed is None:
        base_seed = seed_from_env()
    if base_seed is None:
        return RandomProvider()

    seed = base_seed + zlib.crc32(request.node.nodeid.encode("utf-8"))
    logger.debug(f"Seeding {request.node.nodeid} with {seed}")
    return RandomProvider(seed=seed)


@pytest_asyncio.fixture
async def browser_manager(env_config):
    """Browser manager configured for the current environment."""
    options = BrowserOptions(
        base_url=env_config.base_url,
        headless=env_config.headless,
        storage_state=load_auth_state(env_config.auth_state_path),
    )
    manager = BrowserContextManager.from_options(options)
    yield manager
    await manager.cleanup_all()


@pytest_asyncio.fixture
async def browser_page(browser_manager, request):
    """A page in a fresh context.

    When the test fails, a screenshot, the page HTML and the console log are
    saved and listed in the test's ``user_properties``.
    """
    async with browser_manager.open_page() as (_, page):
        console_logs = start_console_capture(page)
        yield page

        report = getattr(request.node, "rep_call", None)
        if report is not None and report.failed:
            await attach_failure_artifacts(request.node, page, console_logs)


@pytest.fixture
def login_page(browser_page) -> LoginPage:
    return LoginPage(browser_page)


@pytest.fixture
def dashboard_page(browser_page) -> DashboardPage:
    return DashboardPage(browser_page)


@pytest.fixture
def api_client(browser_page, env_config) -> ApiClient:
    """API client sharing the page's cookies."""
    return ApiClient(browser_page.request, base_url=env_config.base_url)
