"""
================================================================================
Root Pytest Configuration
================================================================================

Project-wide configuration for the whole suite:
  - Loguru setup from config/config.yaml
  - Custom markers
  - Command-line options for the UI suite
  - Automatic `ui` / `unit` markers by directory

================================================================================
"""

from __future__ import annotations

from pathlib import Path

import pytest

from login_e2e.ui_testing.framework.log_config import init_logger
from login_e2e.ui_testing.framework.settings import SUPPORTED_BROWSERS


def pytest_addoption(parser):
    """Options for the browser-driven suite."""
    group = parser.getgroup("ui", "UI testing")
    group.addoption(
        "--ui-browser",
        action="store",
        choices=SUPPORTED_BROWSERS,
        default=None,
        help="Browser for UI tests (overrides ui.browser)",
    )
    group.addoption(
        "--ui-headed",
        action="store_true",
        default=False,
        help="Run the browser with a visible window",
    )


def pytest_configure(config):
    """Configure logging and register project-wide custom markers."""
    init_logger()

    # Priority markers
    config.addinivalue_line(
        "markers", "P0: Critical priority tests - must pass for deployment"
    )
    config.addinivalue_line(
        "markers", "P1: High priority tests - important functionality"
    )
    config.addinivalue_line(
        "markers", "P2: Medium priority tests - edge cases and minor features"
    )
    config.addinivalue_line(
        "markers", "P3: Low priority tests - extensive validation"
    )

    # Test type markers
    config.addinivalue_line(
        "markers", "smoke: Quick verification tests"
    )
    config.addinivalue_line(
        "markers", "regression: Full regression test suite"
    )
    config.addinivalue_line(
        "markers", "e2e: End-to-end tests simulating user flows"
    )

    # Domain markers
    config.addinivalue_line(
        "markers", "ui: Browser-driven tests"
    )
    config.addinivalue_line(
        "markers", "unit: Browser-free framework tests"
    )
    config.addinivalue_line(
        "markers", "auth: Tests related to authentication"
    )


def pytest_collection_modifyitems(config, items):
    """Add directory-based markers to collected tests."""
    for item in items:
        path = str(item.fspath)
        if "ui_testing" in path:
            item.add_marker(pytest.mark.ui)
            item.add_marker(pytest.mark.e2e)
        elif "unit" in Path(path).parts:
            item.add_marker(pytest.mark.unit)


def pytest_report_header(config):
    """Add custom header to pytest output."""
    return [
        "",
        "=" * 60,
        "Login E2E Suite (Playwright page objects)",
        "=" * 60,
        "",
    ]


@pytest.fixture(scope="session")
def project_root() -> Path:
    """Return repo root path."""
    return Path(__file__).parent
