"""
================================================================================
UI Testing Pytest Configuration
================================================================================

Fixtures for browser management, page handles and page objects.

Key Features:
- One browser per session, one context + page per test
- Page objects resolved through the fixture registry (built once per test)
- Stub login application when `ui.use_stub_app` is on
- Screenshot capture on failure

================================================================================
"""

from typing import AsyncGenerator

import pytest
from loguru import logger
from playwright.async_api import (
    BrowserContext,
    Error as PlaywrightError,
    Page,
    expect,
)

from login_e2e.ui_testing.framework.browser_manager import BrowserManager
from login_e2e.ui_testing.framework.config_loader import ConfigLoader
from login_e2e.ui_testing.framework.fixture_registry import (
    FixtureRegistry,
    InvocationContext,
    page_object_fixture,
)
from login_e2e.ui_testing.framework.page_handle import PageHandle
from login_e2e.ui_testing.framework.settings import UISettings
from login_e2e.ui_testing.pages import default_registry
from login_e2e.ui_testing.support.stub_app import install_stub_app


# ================================================================================
# Settings
# ================================================================================

@pytest.fixture(scope="session")
def ui_settings(pytestconfig) -> UISettings:
    """UI settings from config/config.yaml, env vars and command-line options."""
    return UISettings.from_config().with_overrides(
        browser=pytestconfig.getoption("--ui-browser"),
        headed=pytestconfig.getoption("--ui-headed"),
    )


# ================================================================================
# Browser Fixtures
# ================================================================================

@pytest.fixture(scope="session")
async def browser_manager(ui_settings: UISettings) -> AsyncGenerator[BrowserManager, None]:
    """
    Session-scoped browser manager fixture.

    Launches a single browser for the whole session. If the browser binary is
    not installed, every browser-driven test is skipped.
    """
    manager = BrowserManager(ui_settings)
    try:
        await manager.start()
    except PlaywrightError as e:
        reason = str(e).strip().splitlines()[0] if str(e).strip() else repr(e)
        pytest.skip(
            f"{ui_settings.browser} could not be launched "
            f"(try `playwright install {ui_settings.browser}`): {reason}"
        )

    expect.set_options(timeout=ui_settings.expect_timeout)
    yield manager
    await manager.close()


@pytest.fixture(scope="function")
async def context(
    browser_manager: BrowserManager,
    ui_settings: UISettings,
) -> AsyncGenerator[BrowserContext, None]:
    """
    Function-scoped browser context fixture.

    Creates a new browser context for each test, providing isolation.
    """
    context = await browser_manager.new_context()
    if ui_settings.use_stub_app:
        await install_stub_app(context, ui_settings.base_url, ui_settings.login)
    yield context
    await context.close()
    browser_manager.forget(context)


@pytest.fixture(scope="function")
async def page(context: BrowserContext) -> AsyncGenerator[Page, None]:
    """Function-scoped page fixture."""
    page = await context.new_page()
    yield page
    await page.close()


@pytest.fixture(scope="function")
async def page_handle(
    page: Page,
    ui_settings: UISettings,
    request,
) -> AsyncGenerator[PageHandle, None]:
    """
    PageHandle for the current test.

    Attaches a screenshot and the current URL to Allure when the test body failed.
    """
    handle = PageHandle(page, base_url=ui_settings.base_url)
    yield handle

    report = getattr(request.node, "rep_call", None)
    if ui_settings.screenshot_on_failure and report is not None and report.failed:
        try:
            await handle.capture_failure(request.node.name)
        except PlaywrightError as e:
            logger.warning(f"Failed to capture screenshot on failure: {e}")


@pytest.fixture(scope="function")
def stub_app(ui_settings: UISettings) -> None:
    """Skip tests that depend on the stub application's exact pages."""
    if not ui_settings.use_stub_app:
        pytest.skip("requires the stub login application (ui.use_stub_app)")


# ================================================================================
# Page Object Fixtures
# ================================================================================

@pytest.fixture(scope="session")
def fixture_registry() -> FixtureRegistry:
    """Every page object the suite knows about."""
    return default_registry()


@pytest.fixture(scope="function")
def ui_context(fixture_registry: FixtureRegistry, page_handle: PageHandle) -> InvocationContext:
    """Per-test page object cache bound to this test's PageHandle."""
    return fixture_registry.new_context(page_handle)


login_page = page_object_fixture("login_page")


# ================================================================================
# Test Lifecycle Hooks
# ================================================================================

@pytest.hookimpl(hookwrapper=True)
def pytest_runtest_makereport(item, call):
    """Keep each phase's report on the item (rep_setup, rep_call, rep_teardown)."""
    outcome = yield
    report = outcome.get_result()
    setattr(item, f"rep_{report.when}", report)


# ================================================================================
# Utility Fixtures
# ================================================================================

@pytest.fixture
def test_data():
    """
    Provides common test data for UI tests.
    """
    config = ConfigLoader()
    return {
        "valid_user": {
            "email": config.get("auth.email", "usuario@teste.com"),
            "password": config.get("auth.password", "senhaSegura123"),
        },
        "invalid_user": {
            "email": "usuario@teste.com",
            "password": "",
        },
    }
