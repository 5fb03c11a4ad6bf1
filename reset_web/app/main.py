"""
Main entrypoint for the RESET Multiservicios web front.

This module assembles the FastAPI application, sets up logging, wires
the site container and registers the exception handlers that turn
gateway failures into HTTP answers.  The ``create_app`` function builds
and configures the app, which is then instantiated at module import
time as ``app``::

    uvicorn reset_web.app.main:app --reload

Error mapping:

* :class:`NavigationRequired` and :class:`UnauthorizedError` redirect
  to the requested view (``/login`` after a 401);
* :class:`FormValidationError` answers ``422`` with the field errors;
* :class:`UploadValidationError` answers ``400``;
* :class:`ClientError` keeps the backend's status and ``detail``;
* any other :class:`ApiError` answers ``502``.
"""

import logging
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse, RedirectResponse

from .api.router import router
from .core.config import settings
from .core.context import SiteContainer
from .core.exceptions import (
    ApiError,
    ClientError,
    FormValidationError,
    NavigationRequired,
    UnauthorizedError,
    UploadValidationError,
)
from .core.logging_config import setup_logging
from .core.navigation import LOGIN_PATH

logger = logging.getLogger(__name__)


def create_app(container: Optional[SiteContainer] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    container : Optional[SiteContainer]
        Pre-built object graph.  Tests pass one wired to a fake HTTP
        session and a manual scheduler; by default it is built from
        ``settings``.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    setup_logging(settings.log_level, settings.log_file or None)

    app = FastAPI(title=settings.project_name, version=settings.api_version)
    app.state.container = container or SiteContainer(settings)

    app.include_router(router)

    @app.on_event("startup")
    def startup_event() -> None:
        app.state.container.start()

    @app.on_event("shutdown")
    def shutdown_event() -> None:
        app.state.container.stop()

    @app.exception_handler(NavigationRequired)
    async def navigation_handler(request: Request, exc: NavigationRequired) -> RedirectResponse:
        return RedirectResponse(exc.location, status_code=status.HTTP_303_SEE_OTHER)

    @app.exception_handler(UnauthorizedError)
    async def unauthorized_handler(request: Request, exc: UnauthorizedError) -> RedirectResponse:
        logger.info("Session rejected by backend on %s", request.url.path)
        return RedirectResponse(LOGIN_PATH, status_code=status.HTTP_303_SEE_OTHER)

    @app.exception_handler(FormValidationError)
    async def form_handler(request: Request, exc: FormValidationError) -> JSONResponse:
        return JSONResponse(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            content={"detail": "Completa los campos obligatorios", "errors": exc.errors},
        )

    @app.exception_handler(UploadValidationError)
    async def upload_handler(request: Request, exc: UploadValidationError) -> JSONResponse:
        return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"detail": str(exc)})

    @app.exception_handler(ClientError)
    async def client_error_handler(request: Request, exc: ClientError) -> JSONResponse:
        return JSONResponse(
            status_code=exc.status_code or status.HTTP_400_BAD_REQUEST,
            content={"detail": exc.detail or exc.message},
        )

    @app.exception_handler(ApiError)
    async def api_error_handler(request: Request, exc: ApiError) -> JSONResponse:
        logger.error("Backend call failed on %s: %s", request.url.path, exc.message)
        return JSONResponse(status_code=status.HTTP_502_BAD_GATEWAY, content={"detail": exc.message})

    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
