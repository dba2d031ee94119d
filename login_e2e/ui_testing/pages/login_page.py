"""
================================================================================
Login Page Object (Async / Playwright)
================================================================================

Encapsulates the login form so tests never touch raw selectors.

Design goals:
  - User-facing locators only: inputs by accessible label, submit by role + name
  - Locators are built once in __init__ and resolved lazily by Playwright
  - Holds a PageHandle instead of inheriting from a base page
  - Automation errors propagate to the test untouched

================================================================================
"""

from __future__ import annotations

from typing import Optional

import allure
from loguru import logger

from login_e2e.ui_testing.framework.page_handle import PageHandle
from login_e2e.ui_testing.framework.settings import LoginCaptions


class LoginPage:
    """Login page object (async)."""

    URL_PATH = "/login"

    def __init__(self, handle: PageHandle, captions: Optional[LoginCaptions] = None):
        self.handle = handle
        self.captions = captions or LoginCaptions.from_config()

        self.email_input = handle.get_by_label(self.captions.email_label)
        self.password_input = handle.get_by_label(self.captions.password_label)
        self.submit_button = handle.get_by_role("button", name=self.captions.submit_name)

    @property
    def page(self):
        """Playwright page behind the handle, for assertions in tests."""
        return self.handle.page

    async def navigate(self, path: Optional[str] = None) -> None:
        """Navigate to `path`, or to the login page itself when omitted."""
        await self.handle.navigate(path or self.URL_PATH)

    async def do_login(self, email: str, password: str) -> None:
        """
        Fill the credentials and submit the form.

        Each step waits for Playwright's actionability checks. A step that
        fails raises immediately and the remaining steps are not attempted.
        Only the masked password reaches the Allure report.

        Args:
            email: Value for the e-mail input
            password: Value for the password input
        """
        logger.info(f"Logging in as {email}")

        with allure.step(f"Login (email={email})"):
            with allure.step(f"Fill {self.captions.email_label}: {email}"):
                await self.email_input.fill(email)
            with allure.step(f"Fill {self.captions.password_label}: {'*' * len(password)}"):
                await self.password_input.fill(password)
            with allure.step(f"Click {self.captions.submit_name}"):
                await self.submit_button.click()

        logger.debug("Login form submitted")


__all__ = [
    "LoginPage",
]
