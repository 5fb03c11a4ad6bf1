"""Client-side navigation target.

Components that need to send the visitor somewhere else (the gateway
after a 401, the auth gate, the login view) call :meth:`Navigator.push`.
The web front inspects the navigator after handling a request and turns
a pending navigation into an HTTP redirect.
"""

from __future__ import annotations

import logging
import threading
from typing import List, Optional

logger = logging.getLogger(__name__)

LOGIN_PATH = "/login"
ADMIN_PATH = "/admin"


class Navigator:
    """Records the current location and the navigation history."""

    def __init__(self, location: str = "/") -> None:
        self.location = location
        self.history: List[str] = []
        self._pending: Optional[str] = None
        self._lock = threading.Lock()

    def push(self, path: str) -> None:
        with self._lock:
            logger.debug("Navigating from %s to %s", self.location, path)
            self.history.append(self.location)
            self.location = path
            self._pending = path

    def redirect_to_login(self) -> None:
        self.push(LOGIN_PATH)

    def take_pending(self) -> Optional[str]:
        """Return and clear the navigation requested since the last call."""
        with self._lock:
            pending, self._pending = self._pending, None
            return pending
