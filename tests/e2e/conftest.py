"""
Playwright fixtures and runner hooks for the live WordPress.com scenarios.

Each test module owns one browser session for its whole run. Scenario
groups are test classes; a class marked ``@pytest.mark.bail`` stops
running its remaining steps once one of them fails, while other groups
in the module carry on.

Key Concepts Demonstrated:
- Module-scoped browser session with guaranteed teardown
- Cookie/local storage reset between scenario groups
- Bail-on-first-failure groups via runner hooks
- Screenshot capture on failure
"""

from __future__ import annotations

import logging
import warnings
from collections.abc import Generator

import pytest
from playwright.sync_api import Error as PlaywrightError

from config import Config, get_config
from wp_e2e import driver_manager, media_helper
from wp_e2e.media_helper import FileDetails
from wp_e2e.scenario import BailGroups
from wp_e2e.session import Session

logger = logging.getLogger(__name__)

_bail_groups = BailGroups()


def _bail_group_ids(item: pytest.Item) -> list[str]:
    """Node ids of every ``bail``-marked class enclosing ``item``."""
    return [node.nodeid for node, _ in item.iter_markers_with_node("bail")]


# -----------------------------------------------------------------------------
# Session Fixtures
# -----------------------------------------------------------------------------

@pytest.fixture(scope="session")
def e2e_config() -> type[Config]:
    return get_config()


@pytest.fixture(scope="module")
def session(e2e_config: type[Config]) -> Generator[Session, None, None]:
    """
    One browser session per test module.

    Live scenarios create content on a real site, so they only run when
    ``RUN_E2E`` is set. A session that cannot be started errors every
    scenario in the module.
    """
    if not e2e_config.RUN_E2E:
        pytest.skip("set RUN_E2E=1 to run the live WordPress.com scenarios")

    browser_session = driver_manager.start_session(config=e2e_config)
    try:
        yield browser_session
    finally:
        driver_manager.teardown(browser_session)


@pytest.fixture(scope="class")
def logged_out_session(session: Session) -> Session:
    """The module session with cookies and local storage cleared for a new scenario group."""
    driver_manager.reset_state(session)
    return session


@pytest.fixture
def fresh_session(session: Session) -> Session:
    """The module session with cookies and local storage cleared before each test."""
    driver_manager.reset_state(session)
    return session


# -----------------------------------------------------------------------------
# Fixture Data
# -----------------------------------------------------------------------------

@pytest.fixture(scope="class")
def upload_file(tmp_path_factory) -> Generator[FileDetails, None, None]:
    """
    An image on disk for upload steps, deleted once the group finishes.

    The file lives in a pytest-managed temporary directory, so nothing
    outlives the retained test runs even if the delete fails.

    A failed delete is reported as a warning; it never fails steps that
    already passed.
    """
    details = media_helper.create_file(str(tmp_path_factory.mktemp("media")))
    yield details
    try:
        media_helper.delete_file(details)
    except OSError as exc:
        logger.warning("Could not delete upload fixture %s: %s", details.file_path, exc)
        warnings.warn(f"Could not delete upload fixture {details.file_path}: {exc}")


# -----------------------------------------------------------------------------
# Runner Hooks
# -----------------------------------------------------------------------------

@pytest.hookimpl(tryfirst=True)
def pytest_runtest_setup(item):
    """Skip the remaining steps of a bail group once one of its steps failed."""
    failed_step = _bail_groups.failed_step(_bail_group_ids(item))
    if failed_step is not None:
        pytest.skip(f"earlier step {failed_step} failed")


@pytest.hookimpl(tryfirst=True, hookwrapper=True)
def pytest_runtest_makereport(item, call):
    """Record bail group failures and capture a screenshot on step failure."""
    outcome = yield
    report = outcome.get_result()

    if report.failed and report.when in ("setup", "call"):
        group_ids = _bail_group_ids(item)
        if group_ids:
            _bail_groups.record_failure(group_ids, item.name)

    if report.when == "call" and report.failed:
        browser_session = next(
            (
                item.funcargs[name]
                for name in ("session", "logged_out_session", "fresh_session")
                if name in item.funcargs
            ),
            None,
        )
        if browser_session is not None and not browser_session.closed:
            config = get_config()
            try:
                path = driver_manager.save_screenshot(
                    browser_session, f"failed-{item.nodeid}", config.SCREENSHOT_DIR
                )
                print(f"\nScreenshot saved: {path}")
            except (PlaywrightError, OSError) as exc:
                print(f"\nFailed to capture screenshot: {exc}")


def pytest_sessionfinish(session, exitstatus):
    _bail_groups.clear()
