"""
In-memory stand-ins for the parts of the Playwright Page / Locator API the
page objects use. Every live interaction is appended to `FakePage.actions`;
building a locator is recorded separately in `FakePage.queries`.
"""

from __future__ import annotations

from typing import Any, Iterable, List, Optional, Tuple

from playwright.async_api import TimeoutError as PlaywrightTimeoutError


class FakeLocator:
    def __init__(self, page: "FakePage", description: str, resolvable: bool = True):
        self._page = page
        self.description = description
        self.resolvable = resolvable

    def _ensure_resolvable(self, action: str) -> None:
        if not self.resolvable:
            raise PlaywrightTimeoutError(
                f"Timeout exceeded while waiting for {self.description} to {action}"
            )

    async def fill(self, value: str, **kwargs: Any) -> None:
        self._ensure_resolvable("fill")
        self._page.actions.append(("fill", self.description, value))

    async def click(self, **kwargs: Any) -> None:
        self._ensure_resolvable("click")
        self._page.actions.append(("click", self.description))


class FakePage:
    def __init__(
        self,
        url: str = "about:blank",
        missing: Iterable[str] = (),
        goto_error: Optional[Exception] = None,
    ):
        self.url = url
        self.missing = set(missing)
        self.goto_error = goto_error
        self.actions: List[Tuple[Any, ...]] = []
        self.queries: List[Tuple[Any, ...]] = []

    def _locator(self, description: str) -> FakeLocator:
        return FakeLocator(self, description, resolvable=description not in self.missing)

    def get_by_label(self, text: str, exact: bool = False) -> FakeLocator:
        self.queries.append(("label", text))
        return self._locator(f"label={text}")

    def get_by_role(self, role: str, name: Optional[str] = None, exact: bool = False) -> FakeLocator:
        self.queries.append(("role", role, name))
        return self._locator(f"role={role}[name={name}]")

    async def goto(self, url: str, wait_until: str = "load", **kwargs: Any) -> None:
        self.actions.append(("goto", url, wait_until))
        if self.goto_error is not None:
            raise self.goto_error
        self.url = url

    async def screenshot(self, full_page: bool = False, **kwargs: Any) -> bytes:
        self.actions.append(("screenshot", full_page))
        return b"\x89PNG\r\n"
