"""
Assertion helpers for scenario steps.

Each helper raises :class:`AssertionFailure` with a message that shows
both the observed and the expected value, so a failed step reads well in
the test report without a debugger.
"""

from __future__ import annotations

from wp_e2e.errors import AssertionFailure


def assert_title_equals(actual: str, expected: str, message: str = "The page title is not correct") -> None:
    """Titles are compared case-insensitively (themes often upper-case them)."""
    if actual.strip().upper() != expected.strip().upper():
        raise AssertionFailure(f"{message}: expected {expected!r}, got {actual!r}")


def _collapse_whitespace(text: str) -> str:
    """Rendered paragraphs come back separated by blank lines; compare words only."""
    return " ".join(text.split())


def assert_content_contains(content: str, expected: str) -> None:
    if _collapse_whitespace(expected) not in _collapse_whitespace(content):
        raise AssertionFailure(
            f"The page content ({content!r}) does not include the expected content ({expected!r})"
        )


def assert_content_excludes(content: str, unexpected: str) -> None:
    if _collapse_whitespace(unexpected) in _collapse_whitespace(content):
        raise AssertionFailure(
            f"The page content ({content!r}) displays the content ({unexpected!r}) "
            "when it should be hidden"
        )


def assert_displayed(displayed: bool, message: str) -> None:
    if displayed is not True:
        raise AssertionFailure(message)


def assert_not_displayed(displayed: bool, message: str) -> None:
    if displayed is not False:
        raise AssertionFailure(message)
