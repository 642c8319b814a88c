"""
Component objects: page-object-like wrappers for DOM regions reused
across several pages.
"""

from wp_e2e.components.base_component import BaseComponent
from wp_e2e.components.find_a_domain_component import FindADomainComponent
from wp_e2e.components.page_preview_component import PagePreviewComponent
from wp_e2e.components.post_editor_sidebar_component import PostEditorSidebarComponent
from wp_e2e.components.visibility import VisibilityControl, visibility_control

__all__ = [
    "BaseComponent",
    "FindADomainComponent",
    "PagePreviewComponent",
    "PostEditorSidebarComponent",
    "VisibilityControl",
    "visibility_control",
]
