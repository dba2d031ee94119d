"""
================================================================================
Page Object Fixture Registry
================================================================================

Explicit name -> factory map for page objects.

A FixtureRegistry is built once per session. Each test invocation gets its own
InvocationContext bound to that invocation's PageHandle; the context builds a
page object on first lookup and returns the cached instance afterwards.

Adding a page object to the suite means one `register()` call plus one
`page_object_fixture()` line in conftest.

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

from typing import Any, Callable, Dict, List, Mapping, Optional

import pytest
from loguru import logger

from .page_handle import PageHandle


PageObjectFactory = Callable[[PageHandle], Any]


class DuplicateFixtureError(ValueError):
    """Raised when a fixture name is registered twice."""
    pass


class UnknownFixtureError(KeyError):
    """Raised when a test asks for a fixture name nobody registered."""
    pass


class InvocationContext:
    """
    Page objects for a single test invocation.

    Never shared between tests: build a new one per invocation.
    """

    def __init__(self, handle: PageHandle, factories: Mapping[str, PageObjectFactory]):
        self._handle = handle
        self._factories = dict(factories)
        self._instances: Dict[str, Any] = {}

    @property
    def handle(self) -> PageHandle:
        return self._handle

    @property
    def resolved(self) -> List[str]:
        """Names already built in this invocation, in build order."""
        return list(self._instances)

    def get(self, name: str) -> Any:
        """
        Return the page object registered under `name`.

        Raises:
            UnknownFixtureError: if `name` is not registered
        """
        if name in self._instances:
            return self._instances[name]

        try:
            factory = self._factories[name]
        except KeyError:
            raise UnknownFixtureError(
                f"No page object registered as '{name}'. "
                f"Known: {', '.join(sorted(self._factories)) or '<none>'}"
            ) from None

        instance = factory(self._handle)
        self._instances[name] = instance
        logger.debug(f"Built page object '{name}': {type(instance).__name__}")
        return instance

    def __contains__(self, name: str) -> bool:
        return name in self._factories


class FixtureRegistry:
    """
    Session-wide map of page object factories.

    Usage:
        registry = FixtureRegistry().register("login_page", LoginPage)
        ctx = registry.new_context(handle)
        login_page = ctx.get("login_page")
    """

    def __init__(self, factories: Optional[Mapping[str, PageObjectFactory]] = None):
        self._factories: Dict[str, PageObjectFactory] = {}
        for name, factory in (factories or {}).items():
            self.register(name, factory)

    def register(self, name: str, factory: PageObjectFactory) -> "FixtureRegistry":
        """
        Register a factory under `name`.

        Raises:
            DuplicateFixtureError: if `name` is already registered
        """
        if name in self._factories:
            raise DuplicateFixtureError(f"Page object '{name}' is already registered")
        self._factories[name] = factory
        return self

    @property
    def names(self) -> List[str]:
        return sorted(self._factories)

    def __contains__(self, name: str) -> bool:
        return name in self._factories

    def new_context(self, handle: PageHandle) -> InvocationContext:
        """Fresh per-invocation context bound to `handle`."""
        return InvocationContext(handle, self._factories)


def page_object_fixture(name: str):
    """
    Create a pytest fixture that resolves `name` through the `ui_context`
    fixture of the current test.

    Usage (in conftest.py):
        login_page = page_object_fixture("login_page")
    """

    @pytest.fixture(name=name)
    def _page_object(ui_context: InvocationContext) -> Any:
        """Registered page object for the current test."""
        return ui_context.get(name)

    return _page_object


__all__ = [
    "DuplicateFixtureError",
    "FixtureRegistry",
    "InvocationContext",
    "PageObjectFactory",
    "UnknownFixtureError",
    "page_object_fixture",
]
