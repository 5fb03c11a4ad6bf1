"""Login and logout views."""

import logging
from typing import Any, Dict

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse, RedirectResponse

from reset_web.app.admin.gate import login_redirect
from reset_web.app.api.deps import get_page
from reset_web.app.core.context import PageContext
from reset_web.app.core.exceptions import ClientError, UnauthorizedError
from reset_web.app.core.navigation import ADMIN_PATH, LOGIN_PATH
from reset_web.app.schemas.auth import LoginRequest

logger = logging.getLogger(__name__)

router = APIRouter()

INVALID_CREDENTIALS = "Credenciales inválidas"


@router.get("/login")
def login_view(page: PageContext = Depends(get_page)):
    """Already authenticated visitors go straight to the dashboard."""
    if login_redirect(page.session_store, page.navigator):
        return RedirectResponse(page.navigator.take_pending() or ADMIN_PATH, status_code=status.HTTP_303_SEE_OTHER)
    return {"authenticated": False}


@router.post("/login")
def login(credentials: LoginRequest, page: PageContext = Depends(get_page)):
    try:
        result = page.api.login(credentials.email, credentials.password)
    except (UnauthorizedError, ClientError) as exc:
        logger.info("Login rejected for %s: %s", credentials.email, exc.message)
        return JSONResponse(status_code=status.HTTP_401_UNAUTHORIZED, content={"detail": INVALID_CREDENTIALS})
    user: Dict[str, Any] = result.user.model_dump() if result.user else {}
    return {"success": True, "user": user, "redirect": ADMIN_PATH}


@router.post("/logout")
def logout(page: PageContext = Depends(get_page)) -> RedirectResponse:
    page.api.logout()
    return RedirectResponse(LOGIN_PATH, status_code=status.HTTP_303_SEE_OTHER)
