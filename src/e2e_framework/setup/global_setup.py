"""One-time setup and teardown for a test run.

Global setup logs in once with the shared credentials and saves the storage
state, so individual tests start authenticated without going through the
login form.
"""

import logging
from pathlib import Path
from typing import Optional

from ..browser.browser_manager import BrowserContextManager
from ..config.env_config import EnvironmentConfig, get_config
from ..models.browser_models import BrowserOptions
from ..pages.login_page import LoginPage
from ..utils.auth import save_auth_state

logger = logging.getLogger(__name__)


async def global_setup(
    config: Optional[EnvironmentConfig] = None,
    manager: Optional[BrowserContextManager] = None,
) -> Optional[Path]:
    """Authenticate once and save the storage state.

    Args:
        config: Environment config (read from the environment if omitted)
        manager: Browser manager (one is created from config if omitted)

    Returns:
        Path of the saved state, or None when no credentials are configured

    Raises:
        RuntimeError: If the browser cannot be started
    """
    config = config or get_config()

    if not config.credentials:
        logger.warning("No credentials provided - skipping authentication")
        return None

    manager = manager or BrowserContextManager.from_options(
        BrowserOptions(base_url=config.base_url, headless=config.headless)
    )

    try:
        async with manager.open_page() as (context, page):
            login_page = LoginPage(page)
            await login_page.goto()
            await login_page.login(
                config.credentials.username, config.credentials.password
            )
            path = await save_auth_state(context, config.auth_state_path)
            logger.info("Authentication successful - auth state saved")
            return path
    except Exception as e:
        logger.error(f"Global setup failed: {e}")
        raise
    finally:
        await manager.cleanup_all()


async def global_teardown(
    config: Optional[EnvironmentConfig] = None, remove_auth_state: bool = False
) -> None:
    """Finish the run, optionally deleting the saved storage state."""
    config = config or get_config()
    logger.info("Running global teardown...")

    state = Path(config.auth_state_path)
    if remove_auth_state and state.is_file():
        state.unlink()
        logger.debug(f"Removed auth state {state}")

    logger.info("Global teardown complete")
