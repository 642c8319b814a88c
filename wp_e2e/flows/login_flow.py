"""
Login Flow.

Logs the configured test account in and, optionally, opens the editor
for a new post or page. A flow is single use: it moves the session's
browser forward and does not undo anything if a step fails.
"""

from __future__ import annotations

import logging

from config import Config, get_config
from wp_e2e.pages.editor_page import EditorPage
from wp_e2e.pages.login_page import LoginPage
from wp_e2e.session import Session

logger = logging.getLogger(__name__)


class LoginFlow:
    """
    Log in and start composing.

    Attributes:
        session: Session to drive.
        username: Account to log in as.
        password: Password for ``username``.
    """

    def __init__(
        self,
        session: Session,
        config: type[Config] | None = None,
        username: str | None = None,
        password: str | None = None,
    ):
        """
        Args:
            session: Session to drive.
            config: Configuration class; defaults to :func:`config.get_config`.
            username: Overrides ``TEST_ACCOUNT_USERNAME``.
            password: Overrides ``TEST_ACCOUNT_PASSWORD``.

        Raises:
            ValueError: If no account credentials are available.
        """
        self.session = session
        self.config = config or get_config()
        self.username = username or self.config.TEST_ACCOUNT_USERNAME
        self.password = password or self.config.TEST_ACCOUNT_PASSWORD
        if not self.username or not self.password:
            raise ValueError("TEST_ACCOUNT_USERNAME and TEST_ACCOUNT_PASSWORD must be set")

    def login(self) -> None:
        logger.info("Logging in as %s", self.username)
        LoginPage(self.session).visit().login(self.username, self.password)

    def login_and_start_new_post(self) -> None:
        self.login()
        self._start_new("post")

    def login_and_start_new_page(self) -> None:
        self.login()
        self._start_new("page")

    def _start_new(self, kind: str) -> None:
        path = f"/{kind}"
        if self.config.TEST_SITE:
            path = f"{path}/{self.config.TEST_SITE}"
        logger.info("Starting a new %s", kind)
        self.session.navigate(self.session.url_for(path))
        EditorPage(self.session).wait_until_displayed()
