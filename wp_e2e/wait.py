"""
Wait Policy

Bounded polling used by every page and component object before it reads
from or acts on the browser. The clock and sleep functions are injectable
so the policy can be exercised against a fake clock.
"""

from __future__ import annotations

import dataclasses
import logging
import time
from dataclasses import dataclass
from typing import Callable, TypeVar

from playwright.sync_api import Error as PlaywrightError

from wp_e2e.errors import ElementTimeoutError

logger = logging.getLogger(__name__)

T = TypeVar("T")

# Errors the browser client raises while the DOM is still settling
# (detached nodes, frames mid-navigation). They are retried inside a wait.
TRANSIENT_ERRORS: tuple[type[BaseException], ...] = (PlaywrightError,)


@dataclass(frozen=True)
class WaitPolicy:
    """
    Timeout and poll interval for a wait, plus the clock it is measured on.

    Attributes:
        timeout: Maximum time to wait, in seconds.
        poll_interval: Time between polls, in seconds.
        clock: Monotonic time source.
        sleep: Function used to pause between polls.
    """

    timeout: float = 20.0
    poll_interval: float = 0.25
    clock: Callable[[], float] = time.monotonic
    sleep: Callable[[float], None] = time.sleep

    @classmethod
    def from_config(cls, config) -> "WaitPolicy":
        """Build the default policy from a configuration class."""
        return cls(
            timeout=config.EXPLICIT_WAIT_MS / 1000,
            poll_interval=config.WAIT_POLL_INTERVAL_MS / 1000,
        )

    def with_timeout(self, timeout: float) -> "WaitPolicy":
        """Return a copy of this policy with a different budget."""
        return dataclasses.replace(self, timeout=timeout)

    def until(self, condition: Callable[[], T], description: str) -> T:
        """
        Poll ``condition`` until it returns a truthy value.

        The condition is always evaluated at least once, even with a zero
        budget. Transient browser errors count as "not yet".

        Args:
            condition: Zero-argument callable polled until truthy.
            description: What is being waited for, used in the error.

        Returns:
            The first truthy value returned by ``condition``.

        Raises:
            ElementTimeoutError: If the budget is exhausted first.
        """
        deadline = self.clock() + self.timeout
        last_error: BaseException | None = None

        while True:
            try:
                result = condition()
            except TRANSIENT_ERRORS as exc:
                logger.debug("Transient error while waiting for %s: %s", description, exc)
                last_error = exc
            else:
                if result:
                    return result
                last_error = None

            remaining = deadline - self.clock()
            if remaining <= 0:
                raise ElementTimeoutError(description, self.timeout, last_error) from last_error
            self.sleep(min(self.poll_interval, remaining))

    def holds(self, condition: Callable[[], object], description: str = "condition") -> bool:
        """
        Poll ``condition`` like :meth:`until` but report a timeout as False.

        Used by queries whose answer may legitimately be "no", such as
        "are the sharing buttons displayed".
        """
        try:
            self.until(condition, description)
        except ElementTimeoutError:
            logger.debug("%s did not hold within %gs", description, self.timeout)
            return False
        return True
