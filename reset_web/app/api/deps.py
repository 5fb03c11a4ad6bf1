"""
FastAPI dependencies shared by the endpoint modules.

``get_page`` mounts a :class:`PageContext` for the request and unmounts
everything it created once the response has been produced.
``require_admin`` runs the auth gate for every admin route.
"""

from typing import Iterator

from fastapi import Depends, Request

from reset_web.app.admin.gate import AuthGate
from reset_web.app.core.context import PageContext, SiteContainer
from reset_web.app.core.exceptions import NavigationRequired
from reset_web.app.core.navigation import LOGIN_PATH


def get_container(request: Request) -> SiteContainer:
    return request.app.state.container


def get_page(request: Request, container: SiteContainer = Depends(get_container)) -> Iterator[PageContext]:
    page = container.page(request.url.path)
    try:
        yield page
    finally:
        page.close()


def require_admin(page: PageContext = Depends(get_page)) -> PageContext:
    """Send visitors without a stored token to the login view."""
    gate = AuthGate(page.session_store, page.navigator)
    if not gate.on_mount():
        raise NavigationRequired(page.navigator.take_pending() or LOGIN_PATH)
    return page
