"""
End-to-end suite configuration module.

This module defines configuration classes for the environments the suite
runs in (local development, CI, unit testing). Configuration values are
loaded from environment variables with sensible defaults.
"""

import os
from pathlib import Path

# Base directory of the project
BASE_DIR = Path(__file__).resolve().parent

_TRUTHY = {"1", "true", "yes", "on"}


def env_flag(name: str, default: bool = False) -> bool:
    """
    Read a boolean flag from the environment.

    Args:
        name: Environment variable name.
        default: Value used when the variable is unset.

    Returns:
        True when the variable holds one of 1/true/yes/on (any case).
    """
    value = os.environ.get(name)
    if value is None:
        return default
    return value.strip().lower() in _TRUTHY


class Config:
    """Base configuration with default settings."""

    CALYPSO_BASE_URL: str = os.environ.get("CALYPSO_BASE_URL", "https://wordpress.com")

    # Budgets (milliseconds)
    SCENARIO_TIMEOUT_MS: int = int(os.environ.get("SCENARIO_TIMEOUT_MS", "20000"))
    START_BROWSER_TIMEOUT_MS: int = int(os.environ.get("START_BROWSER_TIMEOUT_MS", "30000"))
    EXPLICIT_WAIT_MS: int = int(os.environ.get("EXPLICIT_WAIT_MS", "20000"))
    WAIT_POLL_INTERVAL_MS: int = int(os.environ.get("WAIT_POLL_INTERVAL_MS", "250"))

    # Browser
    BROWSER_SIZE: str = os.environ.get("BROWSERSIZE", "desktop")
    BROWSER_NAME: str = os.environ.get("BROWSER", "chromium")
    BROWSER_ENDPOINT: str | None = os.environ.get("BROWSER_ENDPOINT")
    HEADLESS: bool = env_flag("HEADLESS", default=True)

    # Selects which editor surface owns the visibility controls
    USE_NEW_MOBILE_EDITOR: bool = env_flag("USE_NEW_MOBILE_EDITOR")

    # Accounts
    TEST_ACCOUNT_USERNAME: str | None = os.environ.get("TEST_ACCOUNT_USERNAME")
    TEST_ACCOUNT_PASSWORD: str | None = os.environ.get("TEST_ACCOUNT_PASSWORD")
    TEST_SITE: str | None = os.environ.get("TEST_SITE")
    SIGNUP_PASSWORD: str | None = os.environ.get("SIGNUP_PASSWORD")
    SIGNUP_INBOX_DOMAIN: str = os.environ.get("SIGNUP_INBOX_DOMAIN", "e2e.example.com")

    SCREENSHOT_DIR: str = os.environ.get(
        "SCREENSHOT_DIR", str(BASE_DIR / "test-results" / "screenshots")
    )

    # Live scenarios touch a real site, so they only run when asked to
    RUN_E2E: bool = env_flag("RUN_E2E")


class DevelopmentConfig(Config):
    """Local development configuration: a visible browser is easier to debug."""

    HEADLESS: bool = env_flag("HEADLESS", default=False)


class CIConfig(Config):
    """Continuous integration configuration."""

    HEADLESS: bool = True
    SCENARIO_TIMEOUT_MS: int = int(os.environ.get("SCENARIO_TIMEOUT_MS", "60000"))


class TestingConfig(Config):
    """Configuration used by the unit tests (fake browser, no network)."""

    __test__ = False

    CALYPSO_BASE_URL: str = "https://wordpress.test"
    BROWSER_ENDPOINT: str | None = None
    HEADLESS: bool = True
    USE_NEW_MOBILE_EDITOR: bool = False
    EXPLICIT_WAIT_MS: int = 1000
    WAIT_POLL_INTERVAL_MS: int = 100
    TEST_ACCOUNT_USERNAME: str | None = "e2eflowtesting"
    TEST_ACCOUNT_PASSWORD: str | None = "not-a-real-password"
    TEST_SITE: str | None = None
    SIGNUP_PASSWORD: str | None = "e2e-signup-password"
    SIGNUP_INBOX_DOMAIN: str = "inbox.test"
    RUN_E2E: bool = False


# Configuration mapping for easy access
config = {
    "development": DevelopmentConfig,
    "ci": CIConfig,
    "testing": TestingConfig,
    "default": DevelopmentConfig,
}


def get_config(env: str | None = None) -> type[Config]:
    """
    Get the configuration class for the specified environment.

    Args:
        env: Environment name (development, ci, testing).
             If None, uses the E2E_ENV environment variable.

    Returns:
        Configuration class for the specified environment.
    """
    if env is None:
        env = os.environ.get("E2E_ENV", "development")
    return config.get(env, config["default"])
