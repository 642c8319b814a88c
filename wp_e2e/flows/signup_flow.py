"""
Sign Up Flow.

Creates a free blog through the public sign-up funnel, saving a
screenshot at every step so localised layouts can be reviewed.

Key Concepts Demonstrated:
- Orchestrating several page and component objects in a fixed order
- Per-flow viewport sizing on a shared session
- Fail-fast: any step that times out aborts the whole flow
"""

from __future__ import annotations

import logging

from config import Config, get_config
from wp_e2e import data_helper
from wp_e2e.components.find_a_domain_component import FindADomainComponent
from wp_e2e.driver_manager import resize_browser, save_screenshot
from wp_e2e.pages.about_page import AboutPage
from wp_e2e.pages.choose_a_theme_page import ChooseAThemePage
from wp_e2e.pages.create_your_account_page import CreateYourAccountPage
from wp_e2e.pages.pick_a_plan_page import PickAPlanPage
from wp_e2e.pages.signup_processing_page import SignupProcessingPage
from wp_e2e.pages.start_page import StartPage
from wp_e2e.pages.view_blog_page import ViewBlogPage
from wp_e2e.session import Session, Viewport

logger = logging.getLogger(__name__)

SITE_TOPIC = "Electronics"


class SignUpFlow:
    """
    Create a free blog at a given viewport.

    Attributes:
        session: Session to drive.
        viewport: Viewport the flow resizes the browser to before starting.
    """

    def __init__(
        self,
        session: Session,
        viewport: Viewport | str,
        config: type[Config] | None = None,
    ):
        self.session = session
        self.viewport = Viewport.parse(viewport)
        self.config = config or get_config()
        self._step = 0
        self._locale = "en"

    def _screenshot(self, step: str) -> None:
        self._step += 1
        name = f"signup-{self._locale}-{self.viewport.value}-{self._step:02d}-{step}"
        save_screenshot(self.session, name, self.config.SCREENSHOT_DIR)

    def create_free_blog_with_screenshots(self, locale: str = "en") -> None:
        """
        Walk the sign-up funnel in ``locale`` and land on the new blog.

        Raises:
            ElementTimeoutError: If any step never appears.
        """
        self._locale = locale
        self._step = 0
        resize_browser(self.session, self.viewport)

        blog_name = data_helper.new_blog_name()
        email = data_helper.email_address(blog_name, self.config.SIGNUP_INBOX_DOMAIN)
        password = data_helper.signup_password(self.config.SIGNUP_PASSWORD)
        logger.info("Signing up %s (%s, %s)", blog_name, locale, self.viewport.value)

        StartPage(self.session).visit_in_locale(locale)
        self._screenshot("start")

        about_page = AboutPage(self.session).wait_until_displayed()
        about_page.enter_site_details(blog_name, SITE_TOPIC)
        self._screenshot("about")
        about_page.submit_form()

        theme_page = ChooseAThemePage(self.session).wait_until_displayed()
        self._screenshot("theme")
        theme_page.select_first_theme()

        find_a_domain = FindADomainComponent(self.session)
        find_a_domain.search_for_blog_name_and_wait_for_results(blog_name)
        self._screenshot("domain")
        find_a_domain.select_free_address()

        plan_page = PickAPlanPage(self.session).wait_until_displayed()
        self._screenshot("plan")
        plan_page.select_free_plan()

        account_page = CreateYourAccountPage(self.session).wait_until_displayed()
        self._screenshot("account")
        account_page.enter_account_details_and_submit(email, blog_name, password)

        processing_page = SignupProcessingPage(self.session).wait_until_displayed()
        processing_page.wait_for_continue_button_to_be_enabled()
        self._screenshot("processing")
        processing_page.continue_along()

        ViewBlogPage(self.session).wait_until_displayed()
        self._screenshot("blog")
        logger.info("Created blog %s", blog_name)
