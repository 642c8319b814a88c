"""Page object for the account creation sign-up step."""

from __future__ import annotations

from wp_e2e.pages.base_page import BasePage


class CreateYourAccountPage(BasePage):
    """
    Page object for the account form.

    Provides methods for:
    - Filling email, username and password
    - Submitting the account form
    """

    EXPECTED_ELEMENT = ".signup-form"

    EMAIL_INPUT = "#email"
    USERNAME_INPUT = "#username"
    PASSWORD_INPUT = "#password"
    SUBMIT_BUTTON = "button.signup-form__submit"

    def enter_account_details_and_submit(self, email: str, username: str, password: str) -> None:
        """
        Fill all fields and submit the account form.

        Args:
            email: Email address for the new account.
            username: Username for the new account.
            password: Password for the new account.
        """
        self._fill(self.EMAIL_INPUT, email)
        self._fill(self.USERNAME_INPUT, username)
        self._fill(self.PASSWORD_INPUT, password)
        self._click(self.SUBMIT_BUTTON, "create account button")
