"""
Selection of the editor surface that owns the visibility settings.

The classic editor shows visibility in the editor header; the new mobile
editor moved it into the sidebar. The choice is made once per session
(:attr:`Session.editor_variant`) instead of at every call site.
"""

from __future__ import annotations

from typing import Protocol

from wp_e2e.components.post_editor_sidebar_component import PostEditorSidebarComponent
from wp_e2e.pages.editor_page import EditorPage
from wp_e2e.session import EditorVariant, Session
from wp_e2e.wait import WaitPolicy


class VisibilityControl(Protocol):
    """Anything that can change the visibility of the content being edited."""

    def set_visibility_to_private(self) -> None: ...

    def set_visibility_to_password_protected(self, password: str) -> None: ...


_VISIBILITY_CONTROLS: dict[EditorVariant, type] = {
    EditorVariant.CLASSIC: EditorPage,
    EditorVariant.NEW_MOBILE: PostEditorSidebarComponent,
}


def visibility_control(session: Session, wait: WaitPolicy | None = None) -> VisibilityControl:
    """Return the visibility control for the session's editor variant."""
    return _VISIBILITY_CONTROLS[session.editor_variant](session, wait)
