"""
================================================================================
UI Testing Framework
================================================================================

Playwright-based page object layer for the login end-to-end suite.

Components:
    - page_handle: Navigation and locator capability over one page
    - fixture_registry: Per-test page object factories and caching
    - browser_manager: Browser lifecycle management
    - settings / config_loader: YAML + environment configuration
    - log_config: Loguru setup

Author: Automation Team
License: MIT
================================================================================
"""

from .browser_manager import BrowserManager
from .config_loader import ConfigLoader, ConfigurationError
from .fixture_registry import (
    DuplicateFixtureError,
    FixtureRegistry,
    InvocationContext,
    UnknownFixtureError,
    page_object_fixture,
)
from .log_config import init_logger
from .page_handle import PageHandle
from .settings import LoginCaptions, UISettings

__all__ = [
    "BrowserManager",
    "ConfigLoader",
    "ConfigurationError",
    "DuplicateFixtureError",
    "FixtureRegistry",
    "InvocationContext",
    "LoginCaptions",
    "PageHandle",
    "UISettings",
    "UnknownFixtureError",
    "init_logger",
    "page_object_fixture",
]
