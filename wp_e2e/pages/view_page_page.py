"""Page object for a published page viewed on the front end."""

from __future__ import annotations

from wp_e2e.media_helper import FileDetails
from wp_e2e.pages.base_page import BasePage


class ViewPagePage(BasePage):
    """
    Page object for a published page.

    Provides methods for:
    - Reading the rendered title and content
    - Checking sharing buttons and inserted images
    - Unlocking password protected content
    """

    EXPECTED_ELEMENT = ".type-page"

    TITLE = ".entry-title"
    CONTENT = ".entry-content"
    SHARING_BUTTONS = "div.sd-sharing"
    PASSWORD_FORM = "form.post-password-form"
    PASSWORD_INPUT = "form.post-password-form input[name='post_password']"
    PASSWORD_SUBMIT = "form.post-password-form input[name='Submit']"

    def page_title(self) -> str:
        """Rendered page title (with any "Private:"/"Protected:" prefix)."""
        return self._read_text(self.TITLE, "page title")

    def page_content(self) -> str:
        """Rendered text of the page body."""
        return self._read_text(self.CONTENT, "page content")

    def sharing_buttons_visible(self) -> bool:
        """Whether the sharing buttons are shown. Checked once, without waiting."""
        self.wait_until_displayed()
        return self._is_displayed(self.SHARING_BUTTONS)

    def image_displayed(self, file_details: FileDetails) -> bool:
        """Whether the uploaded image is displayed and has loaded."""
        image = self._find(f"{self.CONTENT} img[alt='{file_details.image_name}']")
        return self._image_loaded(image, f"image {file_details.image_name}")

    def is_password_protected(self) -> bool:
        """Whether the password form is shown in place of the content."""
        self._wait_for_displayed(self.CONTENT, "page content")
        return self._is_displayed(self.PASSWORD_FORM)

    def enter_password(self, password: str) -> None:
        """Submit ``password`` through the post password form."""
        self._fill(self.PASSWORD_INPUT, password)
        self._click(self.PASSWORD_SUBMIT, "password submit button")
        self.session.mark_navigated()
        self.wait_until_displayed()
