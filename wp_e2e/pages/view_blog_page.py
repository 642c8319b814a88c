"""Page object for the front page of a blog."""

from __future__ import annotations

from wp_e2e.pages.base_page import BasePage


class ViewBlogPage(BasePage):
    """The blog's home page, reached at the end of sign-up."""

    EXPECTED_ELEMENT = "body.home"

    SITE_TITLE = ".site-title"

    def site_title(self) -> str:
        return self._read_text(self.SITE_TITLE, "site title")
