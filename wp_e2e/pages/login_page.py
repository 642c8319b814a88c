"""Login page object for authentication flows."""

from __future__ import annotations

from wp_e2e.pages.base_page import BasePage


class LoginPage(BasePage):
    """
    Page object for the log-in screen.

    Provides methods for:
    - Visiting the log-in form
    - Entering credentials and submitting
    - Waiting for the logged-in masterbar
    """

    URL_PATH = "/log-in"
    EXPECTED_ELEMENT = ".login__form"

    USERNAME_INPUT = "#usernameOrEmail"
    PASSWORD_INPUT = "#password"
    SUBMIT_BUTTON = ".login__form-action button[type='submit']"
    LOGGED_IN_MARKER = ".masterbar__item-me"

    def login(self, username: str, password: str) -> None:
        """
        Fill credentials, submit the form and wait until logged in.

        Args:
            username: Username or email address.
            password: Account password.

        Raises:
            ElementTimeoutError: If the logged-in masterbar never appears.
        """
        self._fill(self.USERNAME_INPUT, username)
        self._fill(self.PASSWORD_INPUT, password)
        self._click(self.SUBMIT_BUTTON, "log in button")
        self._wait_for_displayed(self.LOGGED_IN_MARKER, "logged-in masterbar")
        self.session.mark_navigated()
