"""
Editor Page Object.

This page object encapsulates the post/page editor: title and body entry,
media insertion, and (for the classic editor layout) the visibility
settings in the editor header.

Key Concepts Demonstrated:
- Interacting with a rich-text editor hosted in an iframe
- File uploads through a hidden input
- Confirmation dialogs
"""

from __future__ import annotations

import logging

from wp_e2e.media_helper import FileDetails
from wp_e2e.pages.base_page import BasePage

logger = logging.getLogger(__name__)


class EditorPage(BasePage):
    """
    Page object for the post and page editor.

    Provides methods for:
    - Entering title and content
    - Uploading and inserting an image
    - Setting visibility (classic layout)
    - Following the "View" link once published
    """

    EXPECTED_ELEMENT = ".post-editor"

    TITLE_INPUT = ".editor-title__input"
    CONTENT_FRAME = ".mce-edit-area iframe"
    CONTENT_BODY = "#tinymce"

    INSERT_MENU_BUTTON = ".mce-wpcom-insert-menu button"
    MEDIA_FILE_INPUT = ".media-library__upload-button input[type='file']"
    UPLOADED_MEDIA = ".media-library__list-item.is-selected:not(.is-transient)"
    INSERT_MEDIA_BUTTON = "button[data-e2e-button='confirm']"

    VISIBILITY_TOGGLE = ".editor-visibility"
    PRIVATE_OPTION = ".editor-visibility input[value='private']"
    PASSWORD_OPTION = ".editor-visibility input[value='password']"
    PASSWORD_INPUT = ".editor-visibility__password-input"
    CONFIRM_DIALOG_BUTTON = ".dialog button.is-primary"

    VIEW_PUBLISHED_LINK = ".notice.is-success .notice__action"

    # -------------------------------------------------------------------------
    # Content
    # -------------------------------------------------------------------------

    def enter_title(self, title: str) -> None:
        """Type the post/page title."""
        self._type(self.TITLE_INPUT, title)

    def enter_content(self, content: str) -> None:
        """
        Type body content into the visual editor.

        Newlines become paragraph breaks.
        """
        body = self._wait_for(
            self._find_in_frame(self.CONTENT_FRAME, self.CONTENT_BODY), "editor body"
        )
        body.click()
        body.press_sequentially(content)

    def enter_post_image(self, file_details: FileDetails) -> None:
        """
        Upload an image through the media modal and insert it.

        Args:
            file_details: Upload fixture from :func:`wp_e2e.media_helper.create_file`.
        """
        self._click(self.INSERT_MENU_BUTTON, "add media button")
        file_input = self._find(self.MEDIA_FILE_INPUT)
        # The file input is hidden behind a styled button, so it is never "displayed"
        self.wait.until(lambda: file_input.count() > 0, "media file input to be attached")
        file_input.set_input_files(file_details.file_path)
        self._wait_for_displayed(self.UPLOADED_MEDIA, f"upload of {file_details.file_name}")
        self._click(self.INSERT_MEDIA_BUTTON, "insert media button")

    def wait_until_image_inserted(self, file_details: FileDetails) -> None:
        """Wait for the uploaded image to appear in the editor body."""
        image = self._find_in_frame(
            self.CONTENT_FRAME, f"img[alt='{file_details.image_name}']"
        )
        self._wait_for(image, f"inserted image {file_details.image_name}")

    # -------------------------------------------------------------------------
    # Visibility (classic editor layout)
    # -------------------------------------------------------------------------

    def set_visibility_to_private(self) -> None:
        """
        Make the page private.

        Private content is published immediately, after a confirmation.
        """
        self._click(self.VISIBILITY_TOGGLE, "visibility toggle")
        self._click(self.PRIVATE_OPTION, "private option")
        self._click(self.CONFIRM_DIALOG_BUTTON, "private confirmation")
        self._wait_until_gone(self.CONFIRM_DIALOG_BUTTON, "private confirmation dialog")

    def set_visibility_to_password_protected(self, password: str) -> None:
        """Protect the page with ``password`` and close the popover."""
        self._click(self.VISIBILITY_TOGGLE, "visibility toggle")
        self._click(self.PASSWORD_OPTION, "password protected option")
        self._fill(self.PASSWORD_INPUT, password)
        self._click(self.VISIBILITY_TOGGLE, "visibility toggle")

    # -------------------------------------------------------------------------
    # Publishing
    # -------------------------------------------------------------------------

    def view_published_post_or_page(self) -> None:
        """Follow the "View" link of the published notice."""
        self._click(self.VIEW_PUBLISHED_LINK, "view published link")
        self.session.mark_navigated()
        logger.info("Viewing published content at %s", self.page.url)
