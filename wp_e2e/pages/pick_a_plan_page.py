"""Page object for the plan selection sign-up step."""

from __future__ import annotations

from wp_e2e.pages.base_page import BasePage


class PickAPlanPage(BasePage):
    EXPECTED_ELEMENT = ".plans-features-main"

    FREE_PLAN_BUTTON = ".plan-features__actions-button.is-free-plan"

    def select_free_plan(self) -> None:
        self._click(self.FREE_PLAN_BUTTON, "free plan button")
