"""
Unit tests for the component objects.

Component lookups are scoped to the component root, so elements are
registered under ``"<ROOT> >> <selector>"`` keys; page-level elements
(dialogs, notices) use the bare selector.

Key SDET Concepts Demonstrated:
- Stale-object detection after navigation
- Idempotent toggles
- Selecting an implementation by a session-level tag
"""

from __future__ import annotations

import pytest

from wp_e2e.components import (
    FindADomainComponent,
    PagePreviewComponent,
    PostEditorSidebarComponent,
    visibility_control,
)
from wp_e2e.errors import ElementTimeoutError, StaleObjectError
from wp_e2e.media_helper import FileDetails
from wp_e2e.pages import EditorPage
from wp_e2e.session import EditorVariant, Viewport

pytestmark = pytest.mark.unit

SIDEBAR = PostEditorSidebarComponent


def in_sidebar(selector: str) -> str:
    return f"{SIDEBAR.ROOT} >> {selector}"


def in_preview(selector: str) -> str:
    return f"{PagePreviewComponent.ROOT} {PagePreviewComponent.FRAME} >> {selector}"


# -----------------------------------------------------------------------------
# Base Component
# -----------------------------------------------------------------------------

class TestStaleness:
    """Tests for stale component detection."""

    def test_component_usable_before_navigation(self, session, fake_page):
        fake_page.add(SIDEBAR.ROOT)

        assert SIDEBAR(session).displayed() is True

    def test_component_stale_after_navigation(self, session):
        """Test that a component created before navigating refuses to act."""
        # Arrange
        sidebar = SIDEBAR(session)

        # Act
        session.navigate(session.url_for("/page/example.wordpress.com/42"))

        # Assert
        with pytest.raises(StaleObjectError, match="PostEditorSidebarComponent"):
            sidebar.launch_preview()

    def test_fresh_component_after_navigation_works(self, session, fake_page):
        session.navigate(session.url_for("/page"))
        fake_page.add(in_sidebar(SIDEBAR.PREVIEW_BUTTON))

        SIDEBAR(session).launch_preview()

        assert fake_page.actions == [("click", in_sidebar(SIDEBAR.PREVIEW_BUTTON))]

    def test_stale_after_refresh(self, session):
        component = FindADomainComponent(session)

        session.refresh()

        with pytest.raises(StaleObjectError):
            component.select_free_address()


# -----------------------------------------------------------------------------
# Post Editor Sidebar
# -----------------------------------------------------------------------------

class TestSharing:
    """Tests for the sidebar sharing section."""

    def test_expand_clicks_header_when_collapsed(self, session, fake_page):
        fake_page.add(
            in_sidebar(SIDEBAR.SHARING_HEADER),
            on_click=lambda page: page.add(in_sidebar(SIDEBAR.SHARING_EXPANDED)),
        )

        SIDEBAR(session).expand_sharing_section()

        assert fake_page.actions == [("click", in_sidebar(SIDEBAR.SHARING_HEADER))]

    def test_expand_is_idempotent(self, session, fake_page):
        """Test that an already expanded section is left alone."""
        fake_page.add(in_sidebar(SIDEBAR.SHARING_HEADER))
        fake_page.add(in_sidebar(SIDEBAR.SHARING_EXPANDED))

        SIDEBAR(session).expand_sharing_section()

        assert fake_page.actions == []

    @pytest.mark.parametrize("initial, wanted, clicks", [
        (True, False, 1),
        (False, False, 0),
        (False, True, 1),
        (True, True, 0),
    ])
    def test_set_sharing_buttons(self, session, fake_page, initial, wanted, clicks):
        toggle = fake_page.add(in_sidebar(SIDEBAR.SHARING_BUTTONS_TOGGLE), checked=initial)

        SIDEBAR(session).set_sharing_buttons(wanted)

        assert toggle.checked is wanted
        assert len(fake_page.actions) == clicks

    def test_close_sharing_section(self, session, fake_page):
        fake_page.add(
            in_sidebar(SIDEBAR.SHARING_HEADER),
            on_click=lambda page: page.remove(in_sidebar(SIDEBAR.SHARING_EXPANDED)),
        )
        fake_page.add(in_sidebar(SIDEBAR.SHARING_EXPANDED))

        SIDEBAR(session).close_sharing_section()

        assert in_sidebar(SIDEBAR.SHARING_EXPANDED) not in fake_page.elements

    def test_mobile_opens_collapsed_sidebar_first(self, session_factory, fake_page):
        """Test that on mobile the sidebar toggle is used before touching its contents."""
        # Arrange
        session = session_factory(viewport=Viewport.MOBILE)
        fake_page.add(
            SIDEBAR.SIDEBAR_TOGGLE,
            on_click=lambda page: page.add(SIDEBAR.SIDEBAR_OPEN),
        )
        fake_page.add(in_sidebar(SIDEBAR.SHARING_EXPANDED))

        # Act
        SIDEBAR(session).expand_sharing_section()

        # Assert
        assert fake_page.actions == [("click", SIDEBAR.SIDEBAR_TOGGLE)]


class TestSavePreviewPublish:
    """Tests for ground control actions."""

    def test_ensure_saved_clicks_save_when_dirty(self, session, fake_page):
        fake_page.add(
            in_sidebar(SIDEBAR.SAVE_BUTTON),
            on_click=lambda page: page.add(in_sidebar(SIDEBAR.SAVED_LABEL), appears_after=2),
        )

        SIDEBAR(session).ensure_saved()

        assert fake_page.actions == [("click", in_sidebar(SIDEBAR.SAVE_BUTTON))]

    def test_ensure_saved_when_already_saved(self, session, fake_page):
        fake_page.add(in_sidebar(SIDEBAR.SAVED_LABEL))

        SIDEBAR(session).ensure_saved()

        assert fake_page.actions == []

    def test_ensure_saved_times_out(self, session):
        with pytest.raises(ElementTimeoutError, match="saved label"):
            SIDEBAR(session).ensure_saved()

    def test_publish_and_view_content(self, session, fake_page):
        # Arrange
        fake_page.add(
            in_sidebar(SIDEBAR.PUBLISH_BUTTON),
            on_click=lambda page: page.add(SIDEBAR.VIEW_PUBLISHED_LINK, appears_after=3),
        )

        # Act
        SIDEBAR(session).publish_and_view_content()

        # Assert
        assert fake_page.actions == [
            ("click", in_sidebar(SIDEBAR.PUBLISH_BUTTON)),
            ("click", SIDEBAR.VIEW_PUBLISHED_LINK),
        ]
        assert session.navigation_count == 1

    def test_sidebar_visibility_private(self, session, fake_page):
        fake_page.add(in_sidebar(SIDEBAR.VISIBILITY_TOGGLE))
        fake_page.add(in_sidebar(SIDEBAR.PRIVATE_OPTION))
        fake_page.add(
            SIDEBAR.CONFIRM_DIALOG_BUTTON,
            on_click=lambda page: page.remove(SIDEBAR.CONFIRM_DIALOG_BUTTON),
        )

        SIDEBAR(session).set_visibility_to_private()

        assert fake_page.actions[-1] == ("click", SIDEBAR.CONFIRM_DIALOG_BUTTON)


# -----------------------------------------------------------------------------
# Page Preview
# -----------------------------------------------------------------------------

class TestPagePreview:
    """Tests for PagePreviewComponent."""

    def test_reads_title_and_content_from_frame(self, session, fake_page):
        fake_page.add(in_preview(PagePreviewComponent.TITLE), text="My Page", appears_after=2)
        fake_page.add(in_preview(PagePreviewComponent.CONTENT), text="A quote")
        preview = PagePreviewComponent(session)

        assert preview.page_title() == "My Page"
        assert preview.page_content() == "A quote"

    def test_image_displayed(self, session, fake_page):
        image = FileDetails("image-abc", "image-abc.png", "/tmp/image-abc.png")
        fake_page.add(in_preview(f"{PagePreviewComponent.CONTENT} img[alt='image-abc']"))

        assert PagePreviewComponent(session).image_displayed(image) is True

    def test_close_waits_for_overlay_to_go(self, session, fake_page):
        fake_page.add(PagePreviewComponent.ROOT)
        fake_page.add(
            f"{PagePreviewComponent.ROOT} >> {PagePreviewComponent.CLOSE_BUTTON}",
            on_click=lambda page: page.remove(PagePreviewComponent.ROOT),
        )

        PagePreviewComponent(session).close()

        assert PagePreviewComponent.ROOT not in fake_page.elements


# -----------------------------------------------------------------------------
# Find a Domain
# -----------------------------------------------------------------------------

class TestFindADomain:
    """Tests for FindADomainComponent."""

    def test_search_then_select_free_address(self, session, fake_page):
        root = FindADomainComponent.ROOT
        fake_page.add(f"{root} >> {FindADomainComponent.SEARCH_INPUT}")
        fake_page.add(f"{root} >> {FindADomainComponent.SUGGESTIONS}", appears_after=4)
        fake_page.add(f"{root} >> {FindADomainComponent.FREE_ADDRESS_BUTTON}")
        component = FindADomainComponent(session)

        component.search_for_blog_name_and_wait_for_results("e2eflowtesting123")
        component.select_free_address()

        assert fake_page.actions == [
            ("fill", f"{root} >> {FindADomainComponent.SEARCH_INPUT}", "e2eflowtesting123"),
            ("click", f"{root} >> {FindADomainComponent.FREE_ADDRESS_BUTTON}"),
        ]


# -----------------------------------------------------------------------------
# Visibility Control Selection
# -----------------------------------------------------------------------------

class TestVisibilityControl:
    """Tests for choosing the visibility surface by editor variant."""

    def test_classic_editor_uses_editor_page(self, session_factory):
        session = session_factory(editor_variant=EditorVariant.CLASSIC)

        assert isinstance(visibility_control(session), EditorPage)

    def test_new_mobile_editor_uses_sidebar(self, session_factory):
        session = session_factory(editor_variant=EditorVariant.NEW_MOBILE)

        assert isinstance(visibility_control(session), PostEditorSidebarComponent)

    def test_explicit_wait_policy_passed_through(self, session, wait_policy):
        shorter = wait_policy.with_timeout(1.0)

        assert visibility_control(session, shorter).wait is shorter
