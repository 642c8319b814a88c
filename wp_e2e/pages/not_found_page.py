"""Page object for the front-end 404 page."""

from __future__ import annotations

from wp_e2e.pages.base_page import BasePage


class NotFoundPage(BasePage):
    """The theme's "not found" presentation, shown for missing or private content."""

    EXPECTED_ELEMENT = "body.error404"
