"""
Session storage.

The admin session is an opaque bearer token plus a minimal user record
(``id``, ``name``, ``email``, ``role``).  Both values live in a
key/value storage under two fixed keys, ``admin_token`` and
``user_data``, mirroring what a browser keeps in local storage.  The
presence of the token key is the only thing the auth gate looks at.

Two implementations are provided:

* :class:`MemorySessionStore` keeps the values in a dictionary.
* :class:`FileSessionStore` persists them to a JSON file so that a
  session survives restarts of the web front.

Consumers must not cache the token: any component may clear the
session (for example after a 401) and everybody else has to notice on
their next read.
"""

from __future__ import annotations

import json
import logging
import threading
from pathlib import Path
from typing import Any, Dict, Optional

logger = logging.getLogger(__name__)

TOKEN_KEY = "admin_token"
USER_KEY = "user_data"
# Older builds stored the token under this key as well; it is removed
# whenever the session is cleared.
LEGACY_TOKEN_KEY = "auth_token"


class SessionStore:
    """Key/value session storage with token and user accessors."""

    def get_item(self, key: str) -> Optional[str]:
        raise NotImplementedError

    def set_item(self, key: str, value: str) -> None:
        raise NotImplementedError

    def remove_item(self, key: str) -> None:
        raise NotImplementedError

    def get_token(self) -> Optional[str]:
        return self.get_item(TOKEN_KEY) or None

    def set_token(self, token: str) -> None:
        self.set_item(TOKEN_KEY, token)

    def get_user(self) -> Optional[Dict[str, Any]]:
        """Return the stored user record, dropping it if it is corrupt."""
        raw = self.get_item(USER_KEY)
        if not raw:
            return None
        try:
            user = json.loads(raw)
        except ValueError:
            logger.warning("Discarding unreadable user record from session storage")
            self.remove_item(USER_KEY)
            return None
        return user if isinstance(user, dict) else None

    def set_user(self, user: Dict[str, Any]) -> None:
        self.set_item(USER_KEY, json.dumps(user, ensure_ascii=False))

    def clear(self) -> None:
        for key in (TOKEN_KEY, LEGACY_TOKEN_KEY, USER_KEY):
            self.remove_item(key)

    def is_authenticated(self) -> bool:
        return self.get_token() is not None


class MemorySessionStore(SessionStore):
    """Session storage held in process memory."""

    def __init__(self, initial: Optional[Dict[str, str]] = None) -> None:
        self._data: Dict[str, str] = dict(initial or {})
        self._lock = threading.Lock()

    def get_item(self, key: str) -> Optional[str]:
        with self._lock:
            return self._data.get(key)

    def set_item(self, key: str, value: str) -> None:
        with self._lock:
            self._data[key] = value

    def remove_item(self, key: str) -> None:
        with self._lock:
            self._data.pop(key, None)


class FileSessionStore(SessionStore):
    """Session storage persisted to a JSON file.

    The file is re-read on every access so that several processes (or a
    user deleting the file) are observed immediately.  Writes go through
    a temporary file and an atomic rename.
    """

    def __init__(self, path: str) -> None:
        self.path = Path(path)
        self._lock = threading.Lock()

    def _load(self) -> Dict[str, str]:
        if not self.path.exists():
            return {}
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, ValueError) as exc:
            logger.warning("Session file %s unreadable (%s); starting empty", self.path, exc)
            return {}
        return data if isinstance(data, dict) else {}

    def _save(self, data: Dict[str, str]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        tmp_path = self.path.with_suffix(self.path.suffix + ".tmp")
        with open(tmp_path, "w", encoding="utf-8") as f:
            json.dump(data, f, ensure_ascii=False, indent=2)
        tmp_path.replace(self.path)

    def get_item(self, key: str) -> Optional[str]:
        with self._lock:
            return self._load().get(key)

    def set_item(self, key: str, value: str) -> None:
        with self._lock:
            data = self._load()
            data[key] = value
            self._save(data)

    def remove_item(self, key: str) -> None:
        with self._lock:
            data = self._load()
            if key in data:
                del data[key]
                self._save(data)


def build_session_store(session_file: str = "") -> SessionStore:
    """Return a file backed store when a path is configured, else memory."""
    if session_file:
        return FileSessionStore(session_file)
    return MemorySessionStore()
