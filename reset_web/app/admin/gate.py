"""
Client-side admin gate.

The gate runs when an admin view is mounted.  Once the first render pass
has completed it looks for a stored token and, when there is none,
navigates to the login view.  It is advisory: the view has already been
produced by then, the gate only decides where the visitor goes next.
"""

import logging

from reset_web.app.core.navigation import ADMIN_PATH, LOGIN_PATH, Navigator
from reset_web.app.core.session import SessionStore

logger = logging.getLogger(__name__)


class AuthGate:
    def __init__(self, session_store: SessionStore, navigator: Navigator) -> None:
        self.session_store = session_store
        self.navigator = navigator
        self.rendered = False

    def on_mount(self) -> bool:
        """Return ``True`` if the visitor may stay on the admin view."""
        self.rendered = True
        if self.session_store.is_authenticated():
            return True
        logger.info("No admin session, redirecting to %s", LOGIN_PATH)
        self.navigator.push(LOGIN_PATH)
        return False


def login_redirect(session_store: SessionStore, navigator: Navigator) -> bool:
    """Send an already authenticated visitor from the login view to the admin."""
    if session_store.is_authenticated():
        navigator.push(ADMIN_PATH)
        return True
    return False
