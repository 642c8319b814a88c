"""Component object for the domain search step of sign-up."""

from __future__ import annotations

from wp_e2e.components.base_component import BaseComponent


class FindADomainComponent(BaseComponent):
    ROOT = ".register-domain-step"

    SEARCH_INPUT = ".search__input"
    SUGGESTIONS = ".domain-search-results__domain-suggestions"
    FREE_ADDRESS_BUTTON = ".domain-suggestion.is-free .domain-suggestion__action"

    def search_for_blog_name_and_wait_for_results(self, blog_name: str) -> None:
        """Search for ``blog_name`` and wait until suggestions are listed."""
        self._fill(self.SEARCH_INPUT, blog_name)
        self._wait_for_displayed(self.SUGGESTIONS, "domain suggestions")

    def select_free_address(self) -> None:
        """Take the free ``*.wordpress.com`` address."""
        self._click(self.FREE_ADDRESS_BUTTON, "free address")
