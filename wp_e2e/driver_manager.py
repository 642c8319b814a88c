"""
Driver Session Manager.

Owns the lifecycle of the browser session a test file runs against:
starting it (locally or against a remote endpoint), resetting cookies and
local storage between scenarios, and tearing it down.

Key Concepts Demonstrated:
- Remote endpoint readiness polling before connecting
- Translating client failures into a single SessionStartError
- Idempotent reset and teardown
"""

from __future__ import annotations

import logging
import os
import re
import time
from urllib.parse import urlparse

import requests
from playwright.sync_api import Error as PlaywrightError
from playwright.sync_api import sync_playwright

from config import Config, get_config
from wp_e2e.errors import SessionStartError
from wp_e2e.session import EditorVariant, Session, Viewport
from wp_e2e.wait import WaitPolicy

logger = logging.getLogger(__name__)

SUPPORTED_BROWSERS = ("chromium", "firefox", "webkit")

# Pages without an origin have no local storage to clear
_STORAGELESS_URL_PREFIXES = ("about:", "data:", "chrome:", "chrome-error:")


def current_screen_size(config: type[Config] | None = None) -> Viewport:
    """Viewport class the suite was asked to run at (``BROWSERSIZE``)."""
    config = config or get_config()
    return Viewport.parse(config.BROWSER_SIZE)


def _endpoint_health_url(endpoint: str) -> str:
    parsed = urlparse(endpoint)
    scheme = {"ws": "http", "wss": "https"}.get(parsed.scheme, parsed.scheme)
    return f"{scheme}://{parsed.netloc}/json/version"


def wait_for_endpoint(endpoint: str, timeout: float, interval: float = 1.0) -> None:
    """
    Poll a remote browser endpoint until it answers or ``timeout`` passes.

    Args:
        endpoint: CDP endpoint (``http(s)://`` or ``ws(s)://``).
        timeout: Budget in seconds.
        interval: Pause between attempts in seconds.

    Raises:
        SessionStartError: If the endpoint never responds with 200.
    """
    url = _endpoint_health_url(endpoint)
    deadline = time.monotonic() + timeout
    last_problem = "no response"
    while True:
        try:
            response = requests.get(url, timeout=2)
            if response.status_code == 200:
                return
            last_problem = f"HTTP {response.status_code}"
        except requests.RequestException as exc:
            last_problem = str(exc)
        if time.monotonic() >= deadline:
            break
        time.sleep(interval)
    raise SessionStartError(
        f"Browser endpoint {endpoint} not reachable after {timeout:g}s ({last_problem})"
    )


def _browser_name(config: type[Config]) -> str:
    name = config.BROWSER_NAME.lower()
    if name not in SUPPORTED_BROWSERS:
        raise ValueError(f"Unsupported browser {config.BROWSER_NAME!r}")
    # Remote endpoints are reached over CDP, which only Chromium speaks
    if config.BROWSER_ENDPOINT and name != "chromium":
        raise ValueError(
            f"BROWSER_ENDPOINT requires chromium, got BROWSER_NAME={config.BROWSER_NAME!r}"
        )
    return name


def _open_browser(playwright, config: type[Config], timeout_ms: int):
    name = _browser_name(config)
    if config.BROWSER_ENDPOINT:
        wait_for_endpoint(config.BROWSER_ENDPOINT, timeout=timeout_ms / 1000)
        logger.info("Connecting to remote browser at %s", config.BROWSER_ENDPOINT)
        return playwright.chromium.connect_over_cdp(config.BROWSER_ENDPOINT, timeout=timeout_ms)

    logger.info("Launching local %s (headless=%s)", name, config.HEADLESS)
    return getattr(playwright, name).launch(headless=config.HEADLESS, timeout=timeout_ms)


def start_session(
    viewport: Viewport | str | None = None,
    config: type[Config] | None = None,
) -> Session:
    """
    Start a browser session sized for ``viewport``.

    The editor variant is fixed here, once, from ``USE_NEW_MOBILE_EDITOR``.
    Every browser action in the session is bounded by ``SCENARIO_TIMEOUT_MS``.

    Args:
        viewport: Viewport class; defaults to ``BROWSERSIZE``.
        config: Configuration class; defaults to :func:`config.get_config`.

    Returns:
        A fresh :class:`Session` with one open tab.

    Raises:
        SessionStartError: If the browser cannot be reached or launched
            within ``START_BROWSER_TIMEOUT_MS``.
    """
    config = config or get_config()
    viewport = Viewport.parse(viewport) if viewport else current_screen_size(config)
    timeout_ms = config.START_BROWSER_TIMEOUT_MS
    _browser_name(config)

    try:
        playwright = sync_playwright().start()
    except PlaywrightError as exc:
        raise SessionStartError(f"Could not start the browser driver: {exc}") from exc

    try:
        browser = _open_browser(playwright, config, timeout_ms)
        context = browser.new_context(viewport=viewport.size, ignore_https_errors=True)
        context.set_default_timeout(config.SCENARIO_TIMEOUT_MS)
        context.set_default_navigation_timeout(config.SCENARIO_TIMEOUT_MS)
        page = context.new_page()
    except SessionStartError:
        playwright.stop()
        raise
    except PlaywrightError as exc:
        playwright.stop()
        raise SessionStartError(f"Could not start {config.BROWSER_NAME} session: {exc}") from exc

    session = Session(
        playwright=playwright,
        browser=browser,
        context=context,
        page=page,
        viewport=viewport,
        editor_variant=EditorVariant.from_flag(config.USE_NEW_MOBILE_EDITOR),
        wait_policy=WaitPolicy.from_config(config),
        base_url=config.CALYPSO_BASE_URL,
    )
    logger.info(
        "Started %s session (%s, %s editor)",
        config.BROWSER_NAME,
        viewport.value,
        session.editor_variant.value,
    )
    return session


def delete_local_storage(session: Session) -> None:
    """Clear local storage for the current origin, if the page has one."""
    url = session.page.url or ""
    if not url or url.startswith(_STORAGELESS_URL_PREFIXES):
        logger.debug("No origin loaded (%r); nothing to clear from local storage", url)
        return
    session.page.evaluate("() => window.localStorage.clear()")


def reset_state(session: Session) -> None:
    """
    Clear cookies and local storage so the session is unauthenticated.

    Safe to call repeatedly and on a session that never loaded a page.
    """
    logger.debug("Clearing cookies and local storage")
    session.context.clear_cookies()
    delete_local_storage(session)


def clear_cookies_and_refresh(session: Session) -> None:
    """Log the visitor out by dropping cookies, then reload the page."""
    session.context.clear_cookies()
    session.refresh()


def resize_browser(session: Session, viewport: Viewport | str) -> None:
    """Resize the session's tab to another viewport class."""
    viewport = Viewport.parse(viewport)
    session.page.set_viewport_size(viewport.size)
    session.viewport = viewport


def teardown(session: Session) -> None:
    """Release the session. Does nothing if it was already closed."""
    if session.closed:
        return
    session.closed = True
    for name, close in (("context", session.context.close), ("browser", session.browser.close)):
        try:
            close()
        except PlaywrightError as exc:
            logger.debug("Browser %s was already closed: %s", name, exc)
    session.playwright.stop()
    logger.info("Browser session closed")


def save_screenshot(session: Session, name: str, directory: str | None = None) -> str:
    """
    Save a full-page screenshot of the session's tab.

    Args:
        session: Session to capture.
        name: File name without extension; unsafe characters are replaced.
        directory: Target directory; defaults to ``SCREENSHOT_DIR``.

    Returns:
        Path to the saved screenshot.
    """
    screenshot_dir = directory or get_config().SCREENSHOT_DIR
    os.makedirs(screenshot_dir, exist_ok=True)
    safe_name = re.sub(r"[^\w.-]+", "_", name)
    path = os.path.join(screenshot_dir, f"{safe_name}.png")
    session.page.screenshot(path=path, full_page=True)
    logger.debug("Screenshot saved: %s", path)
    return path
