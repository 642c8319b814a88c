"""
Shared pytest fixtures for the end-to-end suite's own tests.

The page, component and flow layers are exercised against the in-memory
browser in :mod:`tests.mocks.fake_browser` and a fake clock, so these
tests never start a browser or touch the network.

Key Concepts Demonstrated:
- Fixture dependencies (clock -> wait policy -> session)
- Fakes that satisfy the browser client's interface
- Deterministic time for wait/timeout behaviour
"""

from __future__ import annotations

import pytest

from config import TestingConfig
from tests.mocks.fake_browser import FakeBrowser, FakeClock, FakeContext, FakePage, FakePlaywright
from wp_e2e.session import EditorVariant, Session, Viewport
from wp_e2e.wait import WaitPolicy


# -----------------------------------------------------------------------------
# Configuration Fixtures
# -----------------------------------------------------------------------------

@pytest.fixture
def test_config(tmp_path) -> type[TestingConfig]:
    """
    Testing configuration with screenshots redirected to a temp directory.

    Returns:
        A throwaway subclass of TestingConfig, safe to mutate per test.
    """
    return type(
        "PerTestConfig",
        (TestingConfig,),
        {"SCREENSHOT_DIR": str(tmp_path / "screenshots")},
    )


# -----------------------------------------------------------------------------
# Fake Browser Fixtures
# -----------------------------------------------------------------------------

@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def wait_policy(clock: FakeClock) -> WaitPolicy:
    """A five second budget polled every half second on the fake clock."""
    return WaitPolicy(timeout=5.0, poll_interval=0.5, clock=clock, sleep=clock.sleep)


@pytest.fixture
def fake_page() -> FakePage:
    return FakePage(url="https://wordpress.test/")


@pytest.fixture
def fake_context(fake_page: FakePage) -> FakeContext:
    return FakeContext(fake_page)


@pytest.fixture
def session_factory(fake_context: FakeContext, wait_policy: WaitPolicy):
    """
    Factory for sessions over the fake browser.

    Example:
        def test_something(session_factory):
            session = session_factory(viewport=Viewport.MOBILE)
    """

    def _make(
        viewport: Viewport = Viewport.DESKTOP,
        editor_variant: EditorVariant = EditorVariant.CLASSIC,
    ) -> Session:
        return Session(
            playwright=FakePlaywright(),
            browser=FakeBrowser(fake_context),
            context=fake_context,
            page=fake_context.page,
            viewport=viewport,
            editor_variant=editor_variant,
            wait_policy=wait_policy,
            base_url=TestingConfig.CALYPSO_BASE_URL,
        )

    return _make


@pytest.fixture
def session(session_factory) -> Session:
    """Desktop session using the classic editor."""
    return session_factory()
