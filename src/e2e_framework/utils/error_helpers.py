"""Failure diagnostics: screenshots, page HTML, console and network logs.

The ``browser_page`` fixture records console output for every test and, when
the test fails, saves a screenshot, the page HTML and the console log under
``test-results/`` and lists them in the test's ``user_properties`` (which end
up in the JUnit XML report).

Capturing is best effort. A capture that fails is logged and skipped so the
original test failure is the one reported.
"""

import asyncio
import json
import logging
import re
from datetime import datetime
from pathlib import Path
from typing import Any, Awaitable, Callable, Dict, List, Optional, TypeVar

from playwright.async_api import ConsoleMessage, Page, Request, Response
from playwright.async_api import Error as PlaywrightError

logger = logging.getLogger(__name__)

T = TypeVar("T")

DEFAULT_ARTIFACT_DIR = "test-results"


def artifact_stem(name: str) -> str:
    """File-system safe name with a timestamp, e.g. ``tests_login_py_x-20240101T...``."""
    safe = re.sub(r"[^\w.-]+", "_", name).strip("_") or "error"
    return f"{safe}-{datetime.now().strftime('%Y%m%dT%H%M%S%f')}"


async def capture_error_screenshot(
    page: Page, name: str = "error", output_dir: str = DEFAULT_ARTIFACT_DIR
) -> Optional[Path]:
    """Save a full-page screenshot.

    Returns:
        Path of the screenshot, or None if it could not be taken
    """
    path = Path(output_dir) / "screenshots" / f"{artifact_stem(name)}.png"
    path.parent.mkdir(parents=True, exist_ok=True)

    try:
        await page.screenshot(path=str(path), full_page=True)
    except PlaywrightError as e:
        logger.warning(f"Failed to capture error screenshot: {e}")
        return None

    logger.error(f"Error screenshot saved: {path}")
    return path


async def capture_error_html(
    page: Page, name: str = "error", output_dir: str = DEFAULT_ARTIFACT_DIR
) -> Optional[Path]:
    """Save the page HTML as it was when the error happened.

    Returns:
        Path of the HTML file, or None if the page could not be read
    """
    try:
        html = await page.content()
    except PlaywrightError as e:
        logger.warning(f"Failed to capture error HTML: {e}")
        return None

    path = Path(output_dir) / "html" / f"{artifact_stem(name)}.html"
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(html, encoding="utf-8")
    logger.debug(f"Error HTML saved: {path}")
    return path


def start_console_capture(page: Page) -> List[str]:
    """Record console messages and uncaught page errors.

    Returns:
        A list that fills with ``[type] text`` lines as the page logs
    """
    logs: List[str] = []

    def on_console(message: ConsoleMessage) -> None:
        logs.append(f"[{message.type}] {message.text}")

    def on_page_error(error: PlaywrightError) -> None:
        logs.append(f"[ERROR] {error.message}")

    page.on("console", on_console)
    page.on("pageerror", on_page_error)
    return logs


def start_network_capture(page: Page) -> List[Dict[str, Any]]:
    """Record every request with its status, or its error when it failed.

    Returns:
        A list that fills with ``{url, method, status}`` or
        ``{url, method, error}`` entries
    """
    logs: List[Dict[str, Any]] = []

    def on_request(request: Request) -> None:
        logs.append({"url": request.url, "method": request.method})

    def on_response(response: Response) -> None:
        for entry in reversed(logs):
            if entry["url"] == response.url and "status" not in entry:
                entry["status"] = response.status
                break

    def on_request_failed(request: Request) -> None:
        logs.append(
            {
                "url": request.url,
                "method": request.method,
                "error": request.failure or "Unknown error",
            }
        )

    page.on("request", on_request)
    page.on("response", on_response)
    page.on("requestfailed", on_request_failed)
    return logs


def save_log(
    entries: List[Any], name: str, output_dir: str = DEFAULT_ARTIFACT_DIR
) -> Path:
    """Write captured console lines (as text) or network entries (as JSON)."""
    if entries and isinstance(entries[0], dict):
        path = Path(output_dir) / "logs" / f"{artifact_stem(name)}.json"
        content = json.dumps(entries, indent=2)
    else:
        path = Path(output_dir) / "logs" / f"{artifact_stem(name)}.log"
        content = "\n".join(entries)

    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")
    return path


async def capture_full_error_context(
    page: Page, name: str = "error", output_dir: str = DEFAULT_ARTIFACT_DIR
) -> Dict[str, Path]:
    """Take a screenshot and save the HTML.

    Returns:
        Saved artifacts keyed by kind (``screenshot``, ``html``)
    """
    screenshot, html = await asyncio.gather(
        capture_error_screenshot(page, name, output_dir),
        capture_error_html(page, name, output_dir),
    )
    artifacts = {
        kind: path
        for kind, path in (("screenshot", screenshot), ("html", html))
        if path is not None
    }
    logger.error(f"Full error context captured for: {name}")
    return artifacts


async def with_error_capture(
    page: Page,
    func: Callable[[], Awaitable[T]],
    name: str = "failure",
    output_dir: str = DEFAULT_ARTIFACT_DIR,
) -> T:
    """Run ``func``; on any error capture the page context and re-raise."""
    try:
        return await func()
    except Exception:
        await capture_full_error_context(page, name, output_dir)
        raise


async def attach_failure_artifacts(
    node,
    page: Page,
    console_logs: Optional[List[str]] = None,
    output_dir: str = DEFAULT_ARTIFACT_DIR,
) -> Dict[str, Path]:
    """Capture failure context for a pytest item and list it in ``user_properties``."""
    artifacts = await capture_full_error_context(page, node.nodeid, output_dir)
    if console_logs:
        artifacts["console"] = save_log(console_logs, node.nodeid, output_dir)

    for kind, path in artifacts.items():
        node.user_properties.append((f"error_{kind}", str(path)))
    return artifacts
