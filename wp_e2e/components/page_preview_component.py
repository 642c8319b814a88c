"""Component object for the in-editor web preview pane."""

from __future__ import annotations

from wp_e2e.components.base_component import BaseComponent
from wp_e2e.media_helper import FileDetails


class PagePreviewComponent(BaseComponent):
    """
    The preview overlay launched from the editor.

    The rendered page lives in an iframe inside the overlay.
    """

    ROOT = ".web-preview"

    FRAME = ".web-preview__frame"
    TITLE = ".entry-title"
    CONTENT = ".entry-content"
    CLOSE_BUTTON = "button.web-preview__close"

    def page_title(self) -> str:
        title = self._find_in_frame(self.FRAME, self.TITLE)
        return self._wait_for(title, "preview title").inner_text()

    def page_content(self) -> str:
        content = self._find_in_frame(self.FRAME, self.CONTENT)
        return self._wait_for(content, "preview content").inner_text()

    def image_displayed(self, file_details: FileDetails) -> bool:
        image = self._find_in_frame(
            self.FRAME, f"{self.CONTENT} img[alt='{file_details.image_name}']"
        )
        return self._image_loaded(image, f"preview image {file_details.image_name}")

    def close(self) -> None:
        """Close the preview and wait for the overlay to go away."""
        self._click(self.CLOSE_BUTTON, "close preview button")
        overlay = self._find_on_page(self.ROOT)
        self.wait.until(lambda: not overlay.is_visible(), "preview to close")
