"""Configuration package."""

from .env_config import (
    Environment,
    EnvironmentConfig,
    Credentials,
    BASE_URLS,
    get_environment,
    get_base_url,
    get_credentials,
    get_config,
)

__all__ = [
    "Environment",
    "EnvironmentConfig",
    "Credentials",
    "BASE_URLS",
    "get_environment",
    "get_base_url",
    "get_credentials",
    "get_config",
]
