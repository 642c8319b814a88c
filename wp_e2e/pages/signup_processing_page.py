"""Page object for the screen shown while a new site is being created."""

from __future__ import annotations

from wp_e2e.pages.base_page import BasePage

# Site creation runs server side and routinely outlasts the element budget
PROCESSING_TIMEOUT_SECONDS = 60.0


class SignupProcessingPage(BasePage):
    EXPECTED_ELEMENT = ".signup-processing-screen"

    CONTINUE_BUTTON = ".signup-processing-screen__continue-button"

    def wait_for_continue_button_to_be_enabled(self) -> None:
        """
        Block until site creation finishes and "Continue" becomes clickable.

        Raises:
            ElementTimeoutError: If processing does not finish in time.
        """
        policy = self.wait.with_timeout(max(self.wait.timeout, PROCESSING_TIMEOUT_SECONDS))
        button = self._find(self.CONTINUE_BUTTON)
        policy.until(
            lambda: button.is_visible() and button.is_enabled(),
            "continue button to be enabled",
        )

    def continue_along(self) -> None:
        self._click(self.CONTINUE_BUTTON, "continue button")
        self.session.mark_navigated()
