"""
================================================================================
Stub Login Application
================================================================================

Minimal login application served through Playwright request routing, so the
browser specs run without a deployed frontend.

Routes (relative to the base URL):
    /login      login form; submitting non-empty credentials redirects
    /dashboard  page with a "Dashboard" heading
    anything    404

Enabled by `ui.use_stub_app` (env: UI_USE_STUB_APP).

================================================================================
"""

from __future__ import annotations

from html import escape
from urllib.parse import urlparse

from loguru import logger
from playwright.async_api import BrowserContext, Route

from login_e2e.ui_testing.framework.settings import LoginCaptions


LOGIN_TEMPLATE = """<!doctype html>
<html lang="pt-BR">
<head><meta charset="utf-8"><title>Login</title></head>
<body>
  <main>
    <h1>Login</h1>
    <form id="login-form" novalidate>
      <label for="email">{email_label}</label>
      <input id="email" name="email" type="email" autocomplete="username">
      <label for="password">{password_label}</label>
      <input id="password" name="password" type="password" autocomplete="current-password">
      <button type="submit">{submit_name}</button>
      <p id="error" role="alert" hidden>Credenciais inv&aacute;lidas</p>
    </form>
  </main>
  <script>
    document.getElementById("login-form").addEventListener("submit", function (event) {{
      event.preventDefault();
      var email = document.getElementById("email").value;
      var password = document.getElementById("password").value;
      if (email && password) {{
        window.location.href = "/dashboard";
      }} else {{
        document.getElementById("error").hidden = false;
      }}
    }});
  </script>
</body>
</html>
"""

DASHBOARD_HTML = """<!doctype html>
<html lang="pt-BR">
<head><meta charset="utf-8"><title>Dashboard</title></head>
<body><main><h1>Dashboard</h1></main></body>
</html>
"""

NOT_FOUND_HTML = """<!doctype html>
<html><head><meta charset="utf-8"><title>Not Found</title></head>
<body><h1>404</h1></body></html>
"""


def render_login(captions: LoginCaptions) -> str:
    return LOGIN_TEMPLATE.format(
        email_label=escape(captions.email_label),
        password_label=escape(captions.password_label),
        submit_name=escape(captions.submit_name),
    )


async def install_stub_app(
    context: BrowserContext,
    base_url: str,
    captions: LoginCaptions,
) -> None:
    """
    Serve the stub application for every request under `base_url`.

    Args:
        context: Browser context to install the route on
        base_url: Origin the application pretends to live at
        captions: Captions rendered into the login form
    """
    pages = {
        "/login": render_login(captions),
        "/dashboard": DASHBOARD_HTML,
    }

    async def handle(route: Route) -> None:
        path = urlparse(route.request.url).path.rstrip("/") or "/"
        body = pages.get(path)
        if body is None:
            await route.fulfill(status=404, content_type="text/html", body=NOT_FOUND_HTML)
            return
        await route.fulfill(status=200, content_type="text/html", body=body)

    await context.route(f"{base_url.rstrip('/')}/**", handle)
    logger.debug(f"Stub login application installed at {base_url}")


__all__ = [
    "install_stub_app",
    "render_login",
]
