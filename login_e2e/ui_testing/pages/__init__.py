"""
================================================================================
Page Objects
================================================================================

Page Object Model implementations for application pages.

Each page class encapsulates:
    - Element locators
    - Page-specific actions

`default_registry()` is the single place page objects are made available to
tests as fixtures.

Author: Automation Team
License: MIT
================================================================================
"""

from login_e2e.ui_testing.framework.fixture_registry import FixtureRegistry

from .login_page import LoginPage


def default_registry() -> FixtureRegistry:
    """Registry with every page object of the suite."""
    return FixtureRegistry().register("login_page", LoginPage)


__all__ = [
    "LoginPage",
    "default_registry",
]
