"""File upload helpers.

``set_input_files`` works on hidden inputs too, so most upload widgets can be
driven through their ``<input type="file">``.
"""

import logging
from pathlib import Path
from typing import Sequence, Union

from playwright.async_api import Locator

logger = logging.getLogger(__name__)

FilePath = Union[str, Path]


async def upload_file(file_input: Locator, file_path: FilePath) -> None:
    await file_input.set_input_files(file_path)
    logger.debug(f"Uploaded file: {file_path}")


async def upload_files(file_input: Locator, file_paths: Sequence[FilePath]) -> None:
    """Select several files at once on a ``multiple`` input."""
    await file_input.set_input_files(list(file_paths))
    logger.debug(f"Uploaded {len(file_paths)} files")


async def clear_file_input(file_input: Locator) -> None:
    await file_input.set_input_files([])
    logger.debug("Cleared file input")


async def drag_and_drop_file(drop_zone: Locator, file_path: FilePath) -> None:
    """Upload through the file input inside a drop zone.

    Raises:
        RuntimeError: If the drop zone has no file input
    """
    file_input = drop_zone.locator('input[type="file"]').first
    if await file_input.count() == 0:
        logger.warning(f"No file input found in drop zone for: {file_path}")
        raise RuntimeError(
            "Drop zone has no file input. Drag and drop without one needs a "
            "page-specific page.evaluate() implementation."
        )

    await upload_file(file_input, file_path)
    logger.debug(f"Dropped file via file input: {file_path}")
