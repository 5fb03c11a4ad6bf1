"""Entry point for the RESET Multiservicios web front.

Serves ``reset_web.app.main:app`` with Uvicorn.  Host and port are read
from ``WEB_HOST`` and ``WEB_PORT`` (defaults ``0.0.0.0`` and ``3000``);
the backend origin comes from ``RESET_API_URL``.

Usage:
    python run.py
"""
import asyncio
import logging

from uvicorn import Config, Server

from reset_web.app.core.config import settings
from reset_web.app.main import app


async def run_web() -> None:
    """Start the web front using Uvicorn."""
    config = Config(app=app, host=settings.web_host, port=settings.web_port, reload=False, log_level="info")
    server = Server(config)
    await server.serve()


if __name__ == "__main__":
    try:
        asyncio.run(run_web())
    except (KeyboardInterrupt, SystemExit):
        logging.getLogger(__name__).info("Web front stopped")
