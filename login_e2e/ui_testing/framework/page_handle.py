"""
================================================================================
Page Handle
================================================================================

Thin wrapper around one Playwright page, shared by every page object of a
test invocation.

Provides:
    - Navigation relative to the configured base URL
    - Accessibility-first locator factories (label, role + name)
    - Failure capture for the Allure report

Page objects hold a PageHandle by reference; they never subclass it and never
own the underlying page. Playwright errors are not caught here.

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

from typing import Optional

import allure
from loguru import logger
from playwright.async_api import Locator, Page

from .config_loader import ConfigLoader


ABSOLUTE_URL_PREFIXES = ("http://", "https://", "about:", "data:", "file:")


class PageHandle:
    """
    Navigation and locator capability over a Playwright page.

    Usage:
        handle = PageHandle(page, base_url="http://localhost:3000")
        await handle.navigate("/login")
        email = handle.get_by_label("E-mail")
    """

    def __init__(self, page: Page, base_url: str = ""):
        """
        Args:
            page: Playwright Page owned by the current test invocation
            base_url: Base URL for relative paths (defaults to `ui.base_url`)
        """
        self._page = page
        if not base_url:
            base_url = ConfigLoader().get("ui.base_url", "http://localhost:3000")
        self.base_url = base_url.rstrip("/")

    @property
    def page(self) -> Page:
        """Underlying Playwright page."""
        return self._page

    @property
    def current_url(self) -> str:
        return self._page.url

    def url_for(self, path: str) -> str:
        """
        Resolve `path` against the base URL.

        Absolute URLs are returned unchanged.
        """
        if path.startswith(ABSOLUTE_URL_PREFIXES):
            return path
        if not path.startswith("/"):
            path = f"/{path}"
        return f"{self.base_url}{path}"

    async def navigate(self, path: str, wait_until: str = "load") -> None:
        """
        Load `path` and wait for the given load state.

        Args:
            path: Path relative to the base URL, or an absolute URL
            wait_until: 'load', 'domcontentloaded', 'networkidle' or 'commit'
        """
        url = self.url_for(path)
        with allure.step(f"Navigate to {path}"):
            logger.info(f"Navigating to: {url}")
            await self._page.goto(url, wait_until=wait_until)
            logger.debug(f"Navigation finished: {self._page.url}")

    # =========================================================================
    # Locator Factories
    # =========================================================================

    def get_by_label(self, text: str, exact: bool = False) -> Locator:
        """Locator for a form control by its accessible label. Lazy."""
        return self._page.get_by_label(text, exact=exact)

    def get_by_role(
        self,
        role: str,
        name: Optional[str] = None,
        exact: bool = False,
    ) -> Locator:
        """Locator for an element by ARIA role and accessible name. Lazy."""
        if name is None:
            return self._page.get_by_role(role)
        return self._page.get_by_role(role, name=name, exact=exact)

    # =========================================================================
    # Debug Utilities
    # =========================================================================

    async def capture_failure(self, name: str) -> None:
        """
        Attach a full-page screenshot and the current URL to the Allure report.

        Args:
            name: Attachment name, usually the failing test's node name
        """
        with allure.step("Capture failure details"):
            screenshot = await self._page.screenshot(full_page=True)
            allure.attach(
                screenshot,
                name=f"failure_{name}",
                attachment_type=allure.attachment_type.PNG,
            )
            allure.attach(
                self._page.url,
                name="Current URL",
                attachment_type=allure.attachment_type.TEXT,
            )
        logger.debug(f"Failure details captured for {name}")


__all__ = [
    "PageHandle",
]
