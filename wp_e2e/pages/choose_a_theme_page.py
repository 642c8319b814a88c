"""Page object for the theme selection sign-up step."""

from __future__ import annotations

from wp_e2e.pages.base_page import BasePage


class ChooseAThemePage(BasePage):
    EXPECTED_ELEMENT = ".theme-selection__pick-a-theme"

    FIRST_THEME = ".theme-selection__pick-a-theme .theme:not(.is-placeholder)"

    def select_first_theme(self) -> None:
        """Pick whichever theme is listed first."""
        self._click(self.FIRST_THEME, "first theme")
