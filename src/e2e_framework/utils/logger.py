"""Logging setup for test runs.

Modules log through ``logging.getLogger(__name__)``; this module only
configures the root handler once per process.
"""

import logging
from typing import Optional, Union

from ..config.env_config import EnvironmentConfig, get_config

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# Third-party loggers that are noisy at DEBUG
NOISY_LOGGERS = ("faker", "asyncio", "urllib3")


def resolve_log_level(
    level: Optional[Union[int, str]] = None,
    config: Optional[EnvironmentConfig] = None,
) -> int:
    """Resolve the effective log level.

    GOTCHA: Under CI debug output is suppressed, so the level is raised to
    INFO even when DEBUG was requested.

    Args:
        level: Explicit level, overrides ``LOG_LEVEL``
        config: Environment config (read from the environment if omitted)

    Returns:
        Numeric logging level
    """
    config = config or get_config()
    requested = level if level is not None else config.log_level

    if isinstance(requested, str):
        numeric = logging.getLevelName(requested.upper())
        if not isinstance(numeric, int):
            numeric = logging.INFO
    else:
        numeric = requested

    if config.ci and numeric < logging.INFO:
        numeric = logging.INFO
    return numeric


def configure_logging(
    level: Optional[Union[int, str]] = None,
    config: Optional[EnvironmentConfig] = None,
) -> int:
    """Configure root logging for a test run.

    Returns:
        The level that was applied
    """
    numeric = resolve_log_level(level, config)
    logging.basicConfig(level=numeric, format=LOG_FORMAT)
    logging.getLogger().setLevel(numeric)

    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(max(numeric, logging.WARNING))

    return numeric
