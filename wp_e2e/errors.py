"""Exception hierarchy for the end-to-end page-object layer."""

from __future__ import annotations


class E2EError(Exception):
    """Base exception for all suite-level failures."""


class SessionStartError(E2EError):
    """The browser session could not be started within its startup budget."""


class ElementTimeoutError(E2EError):
    """
    An expected UI state never materialised within the wait budget.

    Attributes:
        description: Human readable description of the awaited condition.
        timeout: The budget, in seconds, that was exhausted.
        last_error: The last transient browser error seen while polling.
    """

    def __init__(
        self,
        description: str,
        timeout: float,
        last_error: BaseException | None = None,
    ) -> None:
        message = f"Timed out after {timeout:g}s waiting for {description}"
        if last_error is not None:
            message = f"{message} (last error: {last_error})"
        super().__init__(message)
        self.description = description
        self.timeout = timeout
        self.last_error = last_error


class StaleObjectError(E2EError):
    """A page or component object was used after the page it wraps went away."""


class AssertionFailure(E2EError, AssertionError):
    """An observed value on the page did not match the expected value."""
