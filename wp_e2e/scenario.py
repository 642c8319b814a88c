"""
Scenario support: explicit step-to-step state and bail-on-first-failure groups.

Scenario steps are pytest test methods grouped in classes. Data a later
step needs from an earlier one (a generated title, an uploaded file, the
page object left on screen) travels in a :class:`ScenarioContext` rather
than through shared closure state.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any

from wp_e2e.media_helper import FileDetails

logger = logging.getLogger(__name__)

_MISSING = object()


@dataclass
class ScenarioContext:
    """
    State shared by the steps of one scenario group.

    Attributes:
        title: Generated title for the content under test.
        quote: Body text entered and later searched for.
        password: Password for protected content, if any.
        file_details: Upload fixture, if any.
    """

    title: str
    quote: str
    password: str | None = None
    file_details: FileDetails | None = None
    _values: dict[str, Any] = field(default_factory=dict, repr=False)

    def remember(self, key: str, value: Any) -> Any:
        """Store ``value`` for later steps and return it."""
        self._values[key] = value
        return value

    def recall(self, key: str, default: Any = _MISSING) -> Any:
        """
        Fetch a value stored by an earlier step.

        Raises:
            KeyError: If no earlier step stored ``key`` and no default is given.
        """
        if key in self._values:
            return self._values[key]
        if default is not _MISSING:
            return default
        raise KeyError(f"No earlier step stored {key!r}; did it fail or get skipped?")


class BailGroups:
    """
    Remembers which bail-on-first-failure groups already had a failing step.

    Groups are identified by the node id of the class that carries the
    ``bail`` marker; a step belongs to every bailing group that encloses it.
    """

    def __init__(self) -> None:
        self._failures: dict[str, str] = {}

    def record_failure(self, group_ids: list[str], step_name: str) -> None:
        for group_id in group_ids:
            if group_id not in self._failures:
                logger.info("Bailing out of %s after %s failed", group_id, step_name)
                self._failures[group_id] = step_name

    def failed_step(self, group_ids: list[str]) -> str | None:
        """Name of the first failed step in any of ``group_ids``, if one failed."""
        for group_id in group_ids:
            if group_id in self._failures:
                return self._failures[group_id]
        return None

    def clear(self) -> None:
        self._failures.clear()
