"""
Base class for component objects.

A component wraps a DOM region reused across several pages (the editor
sidebar, the preview pane). Lookups are scoped to the component's root
selector and re-located on every call. A component records the session's
navigation count when it is created and refuses to work after the session
navigates away; callers construct a fresh one instead.
"""

from __future__ import annotations

from playwright.sync_api import Locator

from wp_e2e.errors import StaleObjectError
from wp_e2e.pages.base_page import PageObject
from wp_e2e.session import Session
from wp_e2e.wait import WaitPolicy


class BaseComponent(PageObject):
    """
    Page object scoped to the region matched by ``ROOT``.

    Attributes:
        ROOT: Selector of the region this component wraps.
    """

    ROOT: str = "body"

    def __init__(self, session: Session, wait: WaitPolicy | None = None):
        super().__init__(session, wait)
        self._navigation_count = session.navigation_count

    def _ensure_current(self) -> None:
        """
        Raises:
            StaleObjectError: If the session navigated since construction.
        """
        if self.session.navigation_count != self._navigation_count:
            raise StaleObjectError(
                f"{type(self).__name__} was created before the page changed; "
                "construct a new instance after navigating"
            )

    def _find(self, selector: str) -> Locator:
        self._ensure_current()
        return self.page.locator(self.ROOT).locator(selector).first

    def _find_in_frame(self, frame_selector: str, selector: str) -> Locator:
        self._ensure_current()
        return self.page.frame_locator(f"{self.ROOT} {frame_selector}").locator(selector).first

    def _find_on_page(self, selector: str) -> Locator:
        """Locator outside the component's region (notices, dialogs)."""
        self._ensure_current()
        return self.page.locator(selector).first

    def displayed(self) -> bool:
        """Whether the component's region is displayed, waiting up to the budget."""
        self._ensure_current()
        return self.wait.holds(self.page.locator(self.ROOT).first.is_visible, self.ROOT)
