"""Page object for the "about your site" sign-up step."""

from __future__ import annotations

from wp_e2e.pages.base_page import BasePage


class AboutPage(BasePage):
    """Collects the site title and topic at the start of sign-up."""

    EXPECTED_ELEMENT = ".about__wrapper"

    SITE_TITLE_INPUT = "#siteTitle"
    SITE_TOPIC_INPUT = "#siteTopic"
    SUBMIT_BUTTON = ".about__submit-wrapper button.is-primary"

    def enter_site_details(self, title: str, topic: str) -> None:
        self._fill(self.SITE_TITLE_INPUT, title)
        self._fill(self.SITE_TOPIC_INPUT, topic)

    def submit_form(self) -> None:
        self._click(self.SUBMIT_BUTTON, "continue button")
