"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from environment
variables.  Defaults are provided for all fields so the site can be
started against a local backend without any setup.  In a production
deployment point ``RESET_API_URL`` at the real backend origin.
"""

import os
from dataclasses import dataclass


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "RESET Multiservicios")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    debug: bool = os.getenv("DEBUG", "false").lower() in {"1", "true", "yes"}
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    log_file: str = os.getenv("LOG_FILE", "")

    # Origin of the REST backend.  Relative image paths returned by the
    # backend are resolved against this origin as well.
    api_url: str = os.getenv("RESET_API_URL", "http://localhost:8000")
    # Path prefix under which the backend mounts its routes.
    api_prefix: str = os.getenv("RESET_API_PREFIX", "/api/v1")
    request_timeout: int = int(os.getenv("REQUEST_TIMEOUT", "30"))

    # JSON file used as the persistent session storage (token and user
    # record).  An empty value keeps the session in memory only.
    session_file: str = os.getenv("SESSION_FILE", "")

    carousel_autoplay_seconds: float = float(os.getenv("CAROUSEL_AUTOPLAY_SECONDS", "5"))
    carousel_refresh_seconds: float = float(os.getenv("CAROUSEL_REFRESH_SECONDS", "30"))

    whatsapp_phone: str = os.getenv("WHATSAPP_PHONE", "+5219932081792")

    web_host: str = os.getenv("WEB_HOST", "0.0.0.0")
    web_port: int = int(os.getenv("WEB_PORT", "3000"))


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Environment variables should
# be set before importing this module.
settings = Settings()
