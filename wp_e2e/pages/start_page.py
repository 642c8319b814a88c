"""Page object for the first step of the sign-up flow."""

from __future__ import annotations

from wp_e2e.pages.base_page import BasePage


class StartPage(BasePage):
    """Entry point of sign-up at ``/start``, optionally localised."""

    URL_PATH = "/start"
    EXPECTED_ELEMENT = ".step-wrapper"

    def visit_in_locale(self, locale: str | None = None) -> "StartPage":
        """
        Open sign-up in ``locale`` (English when None or ``"en"``).

        Returns:
            Self for method chaining.
        """
        path = self.URL_PATH
        if locale and locale != "en":
            path = f"{path}/{locale}"
        return self.visit(path)
