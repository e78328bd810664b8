"""Viewport presets for responsive tests.

Presets are ``Viewport`` models, so they can be used both to resize a page
and as context options through ``BrowserOptions.viewport``.
"""

import logging
from typing import Awaitable, Callable, Dict, Iterable, Optional

from playwright.async_api import Page

from ..models.browser_models import Viewport

logger = logging.getLogger(__name__)

# Breakpoints (width in CSS pixels)
TABLET_MIN_WIDTH = 768
DESKTOP_MIN_WIDTH = 1024

VIEWPORT_PRESETS: Dict[str, Viewport] = {
    "mobile": Viewport(width=375, height=667, is_mobile=True, has_touch=True),
    "mobile_large": Viewport(width=414, height=896, is_mobile=True, has_touch=True),
    "tablet": Viewport(width=768, height=1024, has_touch=True),
    "tablet_landscape": Viewport(width=1024, height=768, has_touch=True),
    "desktop": Viewport(width=1920, height=1080),
    "desktop_small": Viewport(width=1366, height=768),
    "desktop_large": Viewport(width=2560, height=1440),
}

DEFAULT_RESPONSIVE_PRESETS = ("mobile", "tablet", "desktop")


def get_preset(name: str) -> Viewport:
    """Return a copy of the named preset.

    Raises:
        ValueError: If ``name`` is not a known preset
    """
    try:
        return VIEWPORT_PRESETS[name].model_copy()
    except KeyError:
        raise ValueError(
            f"Unknown viewport preset '{name}'. "
            f"Available: {', '.join(sorted(VIEWPORT_PRESETS))}"
        ) from None


async def set_viewport(page: Page, viewport: Viewport) -> None:
    """Resize the page. Mobile and touch emulation need a new context."""
    await page.set_viewport_size({"width": viewport.width, "height": viewport.height})
    logger.debug(f"Viewport set to {viewport.width}x{viewport.height}")


async def run_at_viewports(
    page: Page,
    check: Callable[[], Awaitable[None]],
    presets: Optional[Iterable[str]] = None,
) -> None:
    """Resize to each preset in turn and run ``check`` at that size."""
    for name in presets or DEFAULT_RESPONSIVE_PRESETS:
        viewport = get_preset(name)
        await set_viewport(page, viewport)
        logger.info(f"Testing at {name} ({viewport.width}x{viewport.height})")
        await check()


def get_viewport_size(page: Page) -> Viewport:
    """Current size, or 0x0 when the page has no fixed viewport."""
    size = page.viewport_size
    if size is None:
        return Viewport(width=0, height=0)
    return Viewport(width=size["width"], height=size["height"])


def is_mobile_viewport(page: Page) -> bool:
    return get_viewport_size(page).width < TABLET_MIN_WIDTH


def is_tablet_viewport(page: Page) -> bool:
    return TABLET_MIN_WIDTH <= get_viewport_size(page).width < DESKTOP_MIN_WIDTH


def is_desktop_viewport(page: Page) -> bool:
    return get_viewport_size(page).width >= DESKTOP_MIN_WIDTH
