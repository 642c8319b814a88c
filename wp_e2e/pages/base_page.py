"""
Base classes for the Page Object Model.

Every read from and action on the browser goes through the helpers on
:class:`PageObject`, which wait (via the injected :class:`WaitPolicy`)
for the element to be displayed before touching it.

Key Concepts Demonstrated:
- Base class pattern for code reuse
- Wait-then-read / wait-then-act discipline
- Injectable wait policy
- Screenshot capture for flows
"""

from __future__ import annotations

from playwright.sync_api import Locator

from wp_e2e.driver_manager import save_screenshot
from wp_e2e.session import Session
from wp_e2e.wait import WaitPolicy


class PageObject:
    """
    Common capability of pages and components: bind to a session, query, act.

    Subclasses declare selectors as class constants and expose semantic
    methods built from the protected helpers below. Constructing a page
    object never navigates.

    Attributes:
        session: Session the object drives.
        wait: Wait policy applied before every read and action.
    """

    def __init__(self, session: Session, wait: WaitPolicy | None = None):
        """
        Bind to an existing session.

        Args:
            session: Live browser session.
            wait: Wait policy; defaults to the session's policy.
        """
        self.session = session
        self.wait = wait or session.wait_policy

    @property
    def page(self):
        """The Playwright page of the bound session."""
        return self.session.page

    # -------------------------------------------------------------------------
    # Locators
    # -------------------------------------------------------------------------

    def _find(self, selector: str) -> Locator:
        """Locator for ``selector`` within this object's region."""
        return self.page.locator(selector).first

    def _find_in_frame(self, frame_selector: str, selector: str) -> Locator:
        """Locator for ``selector`` inside the iframe matched by ``frame_selector``."""
        return self.page.frame_locator(frame_selector).locator(selector).first

    # -------------------------------------------------------------------------
    # Wait-then-read / wait-then-act
    # -------------------------------------------------------------------------

    def _wait_for(self, locator: Locator, description: str) -> Locator:
        """
        Wait until ``locator`` is displayed and return it.

        Raises:
            ElementTimeoutError: If it is not displayed within the budget.
        """
        self.wait.until(locator.is_visible, f"{description} to be displayed")
        return locator

    def _wait_for_displayed(self, selector: str, description: str | None = None) -> Locator:
        return self._wait_for(self._find(selector), description or selector)

    def _wait_until_gone(self, selector: str, description: str | None = None) -> None:
        locator = self._find(selector)
        self.wait.until(lambda: not locator.is_visible(), f"{description or selector} to disappear")

    def _is_displayed(self, selector: str, wait: WaitPolicy | None = None) -> bool:
        """
        Whether the element is displayed, polling for at most ``wait``.

        Without an explicit policy the element is checked once.
        """
        return self._locator_displayed(self._find(selector), selector, wait)

    def _locator_displayed(
        self, locator: Locator, description: str, wait: WaitPolicy | None = None
    ) -> bool:
        policy = wait or self.wait.with_timeout(0)
        return policy.holds(locator.is_visible, f"{description} to be displayed")

    def _read_text(self, selector: str, description: str | None = None) -> str:
        return self._wait_for_displayed(selector, description).inner_text()

    def _click(self, selector: str, description: str | None = None) -> None:
        self._wait_for_displayed(selector, description).click()

    def _fill(self, selector: str, text: str) -> None:
        self._wait_for_displayed(selector).fill(text)

    def _type(self, selector: str, text: str) -> None:
        """Type key by key; newlines are sent as Enter presses."""
        self._wait_for_displayed(selector).press_sequentially(text)

    def _set_checked(self, selector: str, checked: bool) -> None:
        locator = self._wait_for_displayed(selector)
        if locator.is_checked() != checked:
            locator.click()
        self.wait.until(
            lambda: locator.is_checked() == checked,
            f"{selector} to be {'checked' if checked else 'unchecked'}",
        )

    def _image_loaded(self, locator: Locator, description: str) -> bool:
        """
        Whether the image behind ``locator`` is displayed and fully loaded.

        Absence counts as "not displayed" rather than an error.
        """
        if not self.wait.holds(locator.is_visible, f"{description} to be displayed"):
            return False
        return bool(locator.evaluate("img => img.complete && img.naturalWidth > 0"))


class BasePage(PageObject):
    """
    Base class for whole-screen page objects.

    Subclasses set ``EXPECTED_ELEMENT`` to the selector that proves the
    screen is displayed, and ``URL_PATH`` when the screen can be visited
    directly.
    """

    EXPECTED_ELEMENT: str = "body"
    URL_PATH: str | None = None

    # -------------------------------------------------------------------------
    # Navigation Methods
    # -------------------------------------------------------------------------

    def visit(self, path: str | None = None):
        """
        Navigate to this page and wait for it to be displayed.

        Returns:
            Self for method chaining.
        """
        target = path if path is not None else self.URL_PATH
        if target is None:
            raise ValueError(f"{type(self).__name__} cannot be visited directly")
        self.session.navigate(self.session.url_for(target))
        return self.wait_until_displayed()

    def wait_until_displayed(self):
        """
        Wait for the page's expected element.

        Returns:
            Self for method chaining.

        Raises:
            ElementTimeoutError: If the page never appears.
        """
        self._wait_for_displayed(self.EXPECTED_ELEMENT, f"{type(self).__name__}")
        return self

    def displayed(self) -> bool:
        """Whether this page is displayed, waiting up to the full budget."""
        return self._is_displayed(self.EXPECTED_ELEMENT, wait=self.wait)

    # -------------------------------------------------------------------------
    # Utility Methods
    # -------------------------------------------------------------------------

    def take_screenshot(self, name: str, directory: str | None = None) -> str:
        """
        Take a screenshot of the current page.

        Args:
            name: Name for the screenshot file.
            directory: Target directory; defaults to the configured ``SCREENSHOT_DIR``.

        Returns:
            Path to the saved screenshot.
        """
        return save_screenshot(self.session, name, directory)
