"""Environment configuration with environment variable loading.

``ENV`` selects the target environment and with it the base URL. ``BASE_URL``
overrides the URL outright. Credentials for the shared login come from
``TEST_USERNAME`` and ``TEST_PASSWORD`` when both are set.
"""

import logging
import os
from enum import Enum
from typing import Dict, Optional

from dotenv import load_dotenv
from pydantic import BaseModel, Field

# Load environment variables from .env file
load_dotenv()

logger = logging.getLogger(__name__)

DEFAULT_AUTH_STATE_PATH = "playwright/.auth/user.json"


class Environment(str, Enum):
    """Deployment environments a run can target."""

    LOCAL = "local"
    TEST = "test"
    STAGE = "stage"
    PROD = "prod"


BASE_URLS: Dict[Environment, str] = {
    Environment.LOCAL: "http://localhost:3000",
    Environment.TEST: "https://test.example.com",
    Environment.STAGE: "https://stage.example.com",
    Environment.PROD: "https://example.com",
}


def _env_flag(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None or value == "":
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


def get_environment() -> Environment:
    """Resolve ``ENV``, falling back to local for missing or unknown values."""
    raw = (os.getenv("ENV") or Environment.LOCAL.value).lower()
    try:
        return Environment(raw)
    except ValueError:
        logger.warning(f'Invalid ENV "{raw}", defaulting to "local"')
        return Environment.LOCAL


def get_base_url() -> str:
    """Base URL for the current environment, or ``BASE_URL`` when set."""
    return os.getenv("BASE_URL") or BASE_URLS[get_environment()]


class Credentials(BaseModel):
    """Login credentials for the shared test account."""

    username: str = Field(description="Login username or email")
    password: str = Field(description="Login password")


def get_credentials() -> Optional[Credentials]:
    """Credentials from the environment, or None when either is missing."""
    username = os.getenv("TEST_USERNAME")
    password = os.getenv("TEST_PASSWORD")
    if username and password:
        return Credentials(username=username, password=password)
    return None


class EnvironmentConfig(BaseModel):
    """Run configuration resolved from the environment."""

    environment: Environment = Field(
        default_factory=get_environment, description="Target environment"
    )
    base_url: str = Field(default_factory=get_base_url, description="Application URL")
    credentials: Optional[Credentials] = Field(
        default_factory=get_credentials, description="Shared account credentials"
    )

    # Browser
    headless: bool = Field(
        default_factory=lambda: _env_flag("HEADLESS", True),
        description="Run browsers headless",
    )
    auth_state_path: str = Field(
        default_factory=lambda: os.getenv("AUTH_STATE_PATH", DEFAULT_AUTH_STATE_PATH),
        description="Storage state file for the shared login",
    )

    # Logging
    ci: bool = Field(
        default_factory=lambda: _env_flag("CI", False),
        description="Running under continuous integration",
    )
    log_level: str = Field(
        default_factory=lambda: os.getenv("LOG_LEVEL", "DEBUG").upper(),
        description="Root log level",
    )

    @property
    def has_credentials(self) -> bool:
        return self.credentials is not None


def get_config() -> EnvironmentConfig:
    """Build a config snapshot from the current environment."""
    return EnvironmentConfig()
