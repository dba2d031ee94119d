"""
================================================================================
Browser Manager
================================================================================

Browser lifecycle management for UI automation.

Features:
    - One browser per session (or per xdist worker)
    - Isolated context per test, preconfigured with suite timeouts
    - Browser type and headless mode from UISettings

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from loguru import logger
from playwright.async_api import (
    async_playwright,
    Browser,
    BrowserContext,
    Error as PlaywrightError,
    Playwright,
)

from .settings import UISettings


class BrowserManager:
    """
    Manages the browser instance and its contexts for UI testing.

    Usage:
        manager = BrowserManager(settings)
        await manager.start()
        context = await manager.new_context()
        ...
        await manager.close()
    """

    # Default browser launch options
    DEFAULT_LAUNCH_OPTIONS: Dict[str, Any] = {
        "args": [
            "--ignore-certificate-errors",
        ],
    }

    # Default context options
    DEFAULT_CONTEXT_OPTIONS: Dict[str, Any] = {
        "viewport": {"width": 1920, "height": 1080},
        "ignore_https_errors": True,
    }

    def __init__(self, settings: Optional[UISettings] = None):
        """
        Initialize browser manager.

        Args:
            settings: Browser and timeout settings (from config if omitted)
        """
        self.settings = settings or UISettings.from_config()

        self._playwright: Optional[Playwright] = None
        self._browser: Optional[Browser] = None
        self._contexts: List[BrowserContext] = []

    async def start(self) -> None:
        """Start Playwright and launch the configured browser."""
        self._playwright = await async_playwright().start()
        browser_launcher = getattr(self._playwright, self.settings.browser)

        launch_options = dict(self.DEFAULT_LAUNCH_OPTIONS)
        if self.settings.browser != "chromium":
            launch_options.pop("args")

        try:
            self._browser = await browser_launcher.launch(
                headless=self.settings.headless,
                slow_mo=self.settings.slow_mo,
                **launch_options,
            )
        except PlaywrightError:
            await self._playwright.stop()
            self._playwright = None
            raise

        logger.debug(
            f"Browser started: {self.settings.browser} "
            f"(headless={self.settings.headless})"
        )

    async def close(self) -> None:
        """Close all contexts and browser."""
        for context in self._contexts:
            try:
                await context.close()
            except PlaywrightError as e:
                logger.debug(f"Context already closed: {e}")
        self._contexts.clear()

        if self._browser:
            await self._browser.close()
            self._browser = None

        if self._playwright:
            await self._playwright.stop()
            self._playwright = None

        logger.debug("Browser closed")

    async def new_context(self, **options: Any) -> BrowserContext:
        """
        Create new browser context.

        Each context is isolated - separate cookies, localStorage, etc.
        Default action, navigation and the suite's timeouts are applied.

        Args:
            **options: Additional context options

        Returns:
            New BrowserContext
        """
        if not self._browser:
            raise RuntimeError("Browser not started. Call start() first.")

        context_options = {**self.DEFAULT_CONTEXT_OPTIONS, **options}
        context = await self._browser.new_context(**context_options)
        context.set_default_timeout(self.settings.action_timeout)
        context.set_default_navigation_timeout(self.settings.navigation_timeout)
        self._contexts.append(context)

        return context

    def forget(self, context: BrowserContext) -> None:
        """Stop tracking a context its owner has already closed."""
        if context in self._contexts:
            self._contexts.remove(context)


__all__ = [
    "BrowserManager",
]
