"""HTTP client for the RESET REST backend."""

from .api_client import ResetAPI  # noqa: F401
