"""
Browser session value threaded through every flow, page and component.

A :class:`Session` is one live browser connection. Nothing in the suite
holds a process-wide driver handle; flows and page objects receive the
session explicitly.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any

from wp_e2e.wait import WaitPolicy

logger = logging.getLogger(__name__)


class Viewport(str, Enum):
    """Viewport classes the suite runs against."""

    DESKTOP = "desktop"
    TABLET = "tablet"
    MOBILE = "mobile"

    @property
    def size(self) -> dict[str, int]:
        """Window size in CSS pixels."""
        return _VIEWPORT_SIZES[self]

    @classmethod
    def parse(cls, value: "str | Viewport") -> "Viewport":
        """
        Resolve a viewport name such as ``"Mobile"`` to a member.

        Raises:
            ValueError: If the name is not a known viewport class.
        """
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            valid = ", ".join(member.value for member in cls)
            raise ValueError(f"Unknown browser size {value!r}; expected one of: {valid}") from None


_VIEWPORT_SIZES = {
    Viewport.DESKTOP: {"width": 1440, "height": 1000},
    Viewport.TABLET: {"width": 1024, "height": 1000},
    Viewport.MOBILE: {"width": 400, "height": 1000},
}


class EditorVariant(str, Enum):
    """Which editor surface hosts the post settings (visibility etc.)."""

    CLASSIC = "classic"
    NEW_MOBILE = "new_mobile"

    @classmethod
    def from_flag(cls, use_new_mobile_editor: bool) -> "EditorVariant":
        return cls.NEW_MOBILE if use_new_mobile_editor else cls.CLASSIC


@dataclass
class Session:
    """
    One live connection to a controlled browser.

    Attributes:
        playwright: The running Playwright driver.
        browser: Connected or launched browser.
        context: Browser context holding cookies and storage for this session.
        page: The tab every page object drives.
        viewport: Current viewport class.
        editor_variant: Editor surface chosen once when the session started.
        wait_policy: Default wait policy handed to page objects.
        base_url: Root URL of the site under test.
        navigation_count: Incremented on every navigation the suite triggers;
            component objects use it to detect that they went stale.
        closed: True once the session has been torn down.
    """

    playwright: Any
    browser: Any
    context: Any
    page: Any
    viewport: Viewport
    editor_variant: EditorVariant
    wait_policy: WaitPolicy
    base_url: str
    navigation_count: int = 0
    closed: bool = False

    def url_for(self, path: str = "") -> str:
        """Absolute URL for a path on the site under test."""
        return f"{self.base_url.rstrip('/')}/{path.lstrip('/')}"

    def navigate(self, url: str) -> None:
        """Load ``url`` in the session's tab."""
        logger.debug("Navigating to %s", url)
        self.page.goto(url)
        self.mark_navigated()

    def refresh(self) -> None:
        """Reload the current page."""
        self.page.reload()
        self.mark_navigated()

    def mark_navigated(self) -> None:
        """Record that the displayed document was replaced."""
        self.navigation_count += 1
