"""
Page Object Model (POM) classes for the publishing platform.

This package contains page objects that encapsulate page-specific
locators and interactions. The POM pattern provides:
- Separation of test logic from page details
- Reusable page interactions
- Maintainable test code (changes to UI only require updates in one place)
"""

from wp_e2e.pages.about_page import AboutPage
from wp_e2e.pages.base_page import BasePage, PageObject
from wp_e2e.pages.choose_a_theme_page import ChooseAThemePage
from wp_e2e.pages.create_your_account_page import CreateYourAccountPage
from wp_e2e.pages.editor_page import EditorPage
from wp_e2e.pages.login_page import LoginPage
from wp_e2e.pages.not_found_page import NotFoundPage
from wp_e2e.pages.pick_a_plan_page import PickAPlanPage
from wp_e2e.pages.signup_processing_page import SignupProcessingPage
from wp_e2e.pages.start_page import StartPage
from wp_e2e.pages.view_blog_page import ViewBlogPage
from wp_e2e.pages.view_page_page import ViewPagePage

__all__ = [
    "AboutPage",
    "BasePage",
    "ChooseAThemePage",
    "CreateYourAccountPage",
    "EditorPage",
    "LoginPage",
    "NotFoundPage",
    "PageObject",
    "PickAPlanPage",
    "SignupProcessingPage",
    "StartPage",
    "ViewBlogPage",
    "ViewPagePage",
]
