"""
Post Editor Sidebar Component Object.

The sidebar sits beside every editor screen and hosts the save, preview
and publish controls, the sharing settings and, in the new mobile editor,
the visibility settings.

Key Concepts Demonstrated:
- Accordion sections that must be expanded before use
- Idempotent toggles (only click when the state differs)
- Viewport-dependent UI (the sidebar is collapsed on mobile)
"""

from __future__ import annotations

import logging

from wp_e2e.components.base_component import BaseComponent
from wp_e2e.session import Viewport

logger = logging.getLogger(__name__)


class PostEditorSidebarComponent(BaseComponent):
    """
    Component object for the editor sidebar.

    Provides methods for:
    - Saving, previewing and publishing
    - Toggling sharing buttons
    - Setting visibility (new mobile editor)
    """

    ROOT = ".post-editor__sidebar"

    # Ground control
    SAVE_BUTTON = ".editor-ground-control__status button.editor-ground-control__save"
    SAVED_LABEL = ".editor-ground-control__saved"
    PREVIEW_BUTTON = ".editor-ground-control__preview-button"
    PUBLISH_BUTTON = ".editor-ground-control__publish-button"

    # Sharing section
    SHARING_HEADER = ".editor-sharing__accordion .accordion__header"
    SHARING_EXPANDED = ".editor-sharing__accordion.is-expanded"
    SHARING_BUTTONS_TOGGLE = "input[name='sharing_enabled']"

    # Visibility
    VISIBILITY_TOGGLE = ".editor-visibility"
    PRIVATE_OPTION = ".editor-visibility input[value='private']"
    PASSWORD_OPTION = ".editor-visibility input[value='password']"
    PASSWORD_INPUT = ".editor-visibility__password-input"

    # Outside the sidebar
    SIDEBAR_TOGGLE = ".editor-ground-control__toggle-sidebar"
    SIDEBAR_OPEN = ".post-editor.focus-sidebar"
    CONFIRM_DIALOG_BUTTON = ".dialog button.is-primary"
    VIEW_PUBLISHED_LINK = ".notice.is-success .notice__action"

    # -------------------------------------------------------------------------
    # Helpers
    # -------------------------------------------------------------------------

    def _open_if_collapsed(self) -> None:
        """On mobile the sidebar hides behind a toggle; open it if needed."""
        if self.session.viewport is not Viewport.MOBILE:
            return
        if self._locator_displayed(self._find_on_page(self.SIDEBAR_OPEN), "open sidebar"):
            return
        toggle = self._wait_for(self._find_on_page(self.SIDEBAR_TOGGLE), "sidebar toggle")
        toggle.click()
        self._wait_for(self._find_on_page(self.SIDEBAR_OPEN), "open sidebar")

    def _sharing_expanded(self) -> bool:
        return self._is_displayed(self.SHARING_EXPANDED)

    # -------------------------------------------------------------------------
    # Sharing
    # -------------------------------------------------------------------------

    def expand_sharing_section(self) -> None:
        self._open_if_collapsed()
        if not self._sharing_expanded():
            self._click(self.SHARING_HEADER, "sharing section header")
        self._wait_for_displayed(self.SHARING_EXPANDED, "expanded sharing section")

    def set_sharing_buttons(self, enabled: bool) -> None:
        """Show or hide sharing buttons on the published content."""
        self._set_checked(self.SHARING_BUTTONS_TOGGLE, enabled)

    def close_sharing_section(self) -> None:
        if self._sharing_expanded():
            self._click(self.SHARING_HEADER, "sharing section header")
        self._wait_until_gone(self.SHARING_EXPANDED, "expanded sharing section")

    # -------------------------------------------------------------------------
    # Save / preview / publish
    # -------------------------------------------------------------------------

    def ensure_saved(self) -> None:
        """Save the draft if there are unsaved changes and wait for "Saved"."""
        if self._is_displayed(self.SAVE_BUTTON):
            self._click(self.SAVE_BUTTON, "save button")
        self._wait_for_displayed(self.SAVED_LABEL, "saved label")

    def launch_preview(self) -> None:
        self._click(self.PREVIEW_BUTTON, "preview button")

    def publish_and_view_content(self) -> None:
        """Publish, then follow the notice's "View" link to the front end."""
        self._click(self.PUBLISH_BUTTON, "publish button")
        view_link = self._wait_for(self._find_on_page(self.VIEW_PUBLISHED_LINK), "view link")
        view_link.click()
        self.session.mark_navigated()
        logger.info("Published and viewing %s", self.page.url)

    # -------------------------------------------------------------------------
    # Visibility (new mobile editor)
    # -------------------------------------------------------------------------

    def set_visibility_to_private(self) -> None:
        self._open_if_collapsed()
        self._click(self.VISIBILITY_TOGGLE, "visibility toggle")
        self._click(self.PRIVATE_OPTION, "private option")
        confirm = self._wait_for(
            self._find_on_page(self.CONFIRM_DIALOG_BUTTON), "private confirmation"
        )
        confirm.click()
        self.wait.until(lambda: not confirm.is_visible(), "private confirmation dialog to close")

    def set_visibility_to_password_protected(self, password: str) -> None:
        self._open_if_collapsed()
        self._click(self.VISIBILITY_TOGGLE, "visibility toggle")
        self._click(self.PASSWORD_OPTION, "password protected option")
        self._fill(self.PASSWORD_INPUT, password)
        self._click(self.VISIBILITY_TOGGLE, "visibility toggle")
