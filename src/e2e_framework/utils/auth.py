"""Authentication state helpers.

Save a logged-in storage state once and reuse it across tests, or inject and
read tokens directly when the login UI is not under test.
"""

import logging
from pathlib import Path
from typing import Optional

from playwright.async_api import BrowserContext, Page

from ..config.env_config import DEFAULT_AUTH_STATE_PATH

logger = logging.getLogger(__name__)

TOKEN_STORAGE_KEYS = ("token", "authToken", "accessToken")
AUTH_COOKIE_MARKERS = ("token", "auth", "session")

_READ_TOKEN_SCRIPT = """
(keys) => {
    for (const storage of [window.localStorage, window.sessionStorage]) {
        if (!storage) continue;
        for (const key of keys) {
            const value = storage.getItem(key);
            if (value) return value;
        }
    }
    return null;
}
"""


async def save_auth_state(
    context: BrowserContext, file_path: str = DEFAULT_AUTH_STATE_PATH
) -> Path:
    """Write cookies and local storage of ``context`` to ``file_path``."""
    path = Path(file_path)
    path.parent.mkdir(parents=True, exist_ok=True)
    await context.storage_state(path=str(path))
    logger.info(f"Saved auth state to {path}")
    return path


def load_auth_state(file_path: str = DEFAULT_AUTH_STATE_PATH) -> Optional[str]:
    """Return ``file_path`` if a saved state exists, for ``storage_state=``."""
    if Path(file_path).is_file():
        logger.info(f"Loading auth state from {file_path}")
        return file_path
    logger.debug(f"No auth state at {file_path}")
    return None


async def get_auth_token(page: Page) -> Optional[str]:
    """Read an auth token from web storage, falling back to cookies."""
    token = await page.evaluate(_READ_TOKEN_SCRIPT, list(TOKEN_STORAGE_KEYS))
    if token:
        return token

    cookies = await page.context.cookies()
    for cookie in cookies:
        name = cookie.get("name", "")
        if any(marker in name for marker in AUTH_COOKIE_MARKERS):
            return cookie.get("value")
    return None


async def set_auth_token(page: Page, token: str, key: str = "token") -> None:
    """Store ``token`` in local storage to skip the login UI."""
    await page.evaluate(
        "([key, token]) => window.localStorage.setItem(key, token)", [key, token]
    )
    logger.debug(f"Set auth token in localStorage: {key}")


async def clear_auth_state(page: Page) -> None:
    """Clear web storage and cookies."""
    await page.evaluate(
        "() => { window.localStorage?.clear(); window.sessionStorage?.clear(); }"
    )
    await page.context.clear_cookies()
    logger.debug("Cleared all auth state")
