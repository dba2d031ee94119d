"""
================================================================================
UI Settings
================================================================================

Typed view over the `ui` section of the configuration.

All timeouts are in milliseconds, the unit Playwright expects.

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Optional

from .config_loader import ConfigLoader


SUPPORTED_BROWSERS = ("chromium", "firefox", "webkit")


@dataclass(frozen=True)
class LoginCaptions:
    """
    User-facing captions the login form is located by.

    Attributes:
        email_label: Accessible label of the e-mail input
        password_label: Accessible label of the password input
        submit_name: Accessible name of the submit button
    """
    email_label: str = "E-mail"
    password_label: str = "Senha"
    submit_name: str = "Entrar"

    @classmethod
    def from_config(cls, config: Optional[ConfigLoader] = None) -> "LoginCaptions":
        config = config or ConfigLoader()
        return cls(
            email_label=config.get("ui.login.email_label", cls.email_label),
            password_label=config.get("ui.login.password_label", cls.password_label),
            submit_name=config.get("ui.login.submit_name", cls.submit_name),
        )


@dataclass(frozen=True)
class UISettings:
    """Browser and timing settings for the UI suite."""

    base_url: str = "http://localhost:3000"
    browser: str = "chromium"
    headless: bool = True
    slow_mo: int = 0
    action_timeout: int = 10000
    navigation_timeout: int = 30000
    expect_timeout: int = 5000
    use_stub_app: bool = True
    screenshot_on_failure: bool = True
    login: LoginCaptions = field(default_factory=LoginCaptions)

    def __post_init__(self) -> None:
        if self.browser not in SUPPORTED_BROWSERS:
            raise ValueError(
                f"Unsupported browser '{self.browser}', "
                f"expected one of {', '.join(SUPPORTED_BROWSERS)}"
            )

    @classmethod
    def from_config(cls, config: Optional[ConfigLoader] = None) -> "UISettings":
        """
        Build settings from the configuration loader.

        Args:
            config: Loader to read from; the process-wide loader if omitted
        """
        config = config or ConfigLoader()
        return cls(
            base_url=config.get("ui.base_url", cls.base_url).rstrip("/"),
            browser=config.get("ui.browser", cls.browser),
            headless=config.get("ui.headless", cls.headless),
            slow_mo=config.get("ui.slow_mo", cls.slow_mo),
            action_timeout=config.get("ui.action_timeout", cls.action_timeout),
            navigation_timeout=config.get("ui.navigation_timeout", cls.navigation_timeout),
            expect_timeout=config.get("ui.expect_timeout", cls.expect_timeout),
            use_stub_app=config.get("ui.use_stub_app", cls.use_stub_app),
            screenshot_on_failure=config.get(
                "ui.screenshot_on_failure", cls.screenshot_on_failure
            ),
            login=LoginCaptions.from_config(config),
        )

    def with_overrides(
        self,
        browser: Optional[str] = None,
        headed: bool = False,
    ) -> "UISettings":
        """Apply command-line overrides (`--ui-browser`, `--ui-headed`)."""
        settings = self
        if browser:
            settings = replace(settings, browser=browser)
        if headed:
            settings = replace(settings, headless=False)
        return settings


__all__ = [
    "LoginCaptions",
    "SUPPORTED_BROWSERS",
    "UISettings",
]
