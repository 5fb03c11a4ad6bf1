"""
Generic state containers for backend resources.

A :class:`ResourceStore` bridges the gateway client and the screens.  It
fetches its collection as soon as it is created and exposes three
pieces of state:

``items``
    The last successfully fetched (or fallback) collection.
``loading``
    ``True`` until the current fetch settles.
``error``
    ``None`` or a human readable message describing the last failure.

:meth:`ResourceStore.refetch` re-issues the read call and replaces the
state in place.  Two concurrent refetches are not coordinated: whichever
response arrives last wins.  Once a store is unmounted, responses that
arrive afterwards are dropped.

A :class:`ResourceManagement` object wraps the mutations of a resource.
Each mutation returns the affected entity (``True`` for deletes) on
success and ``None``/``False`` on failure, recording the failure in
``error``.  Mutations never touch a store: the caller either merges the
returned entity (:meth:`ResourceStore.merge`), drops it
(:meth:`ResourceStore.discard`) or invalidates the whole collection
(:meth:`ResourceStore.refetch`).
"""

from __future__ import annotations

import logging
import threading
from typing import Callable, Generic, List, Optional, TypeVar

from pydantic import ValidationError

from reset_web.app.core.exceptions import ApiError, UnauthorizedError
from reset_web.client.api_client import ResetAPI

logger = logging.getLogger(__name__)

T = TypeVar("T")
R = TypeVar("R")

SESSION_EXPIRED_MESSAGE = "Sesión expirada. Redirigiendo al login..."
INVALID_RESPONSE_MESSAGE = "Respuesta inválida del servidor"


class ResourceStore(Generic[T]):
    """Fetch-on-mount collection with ``items``/``loading``/``error`` state."""

    #: Default message when the failure carries no usable text.
    error_message = "Error al cargar datos"

    def __init__(self, api: ResetAPI, *, auto_fetch: bool = True) -> None:
        self.api = api
        self.items: List[T] = []
        self.loading = True
        self.error: Optional[str] = None
        self.mounted = True
        self._lock = threading.RLock()
        if auto_fetch:
            self.mount()

    # Subclasses implement the read call and, optionally, a fallback.
    def _fetch(self) -> List[T]:
        raise NotImplementedError

    def _fallback(self) -> List[T]:
        return []

    def refetch(self) -> List[T]:
        """Re-issue the read call and replace the state with its outcome."""
        with self._lock:
            self.loading = True
            self.error = None
        try:
            items = self._fetch()
        except (ApiError, ValidationError) as exc:
            message = exc.message if isinstance(exc, ApiError) else INVALID_RESPONSE_MESSAGE
            logger.error("%s: %s", self.error_message, message)
            with self._lock:
                if not self.mounted:
                    return list(self.items)
                self.error = message or self.error_message
                self.items = self._fallback()
                self.loading = False
                return list(self.items)
        with self._lock:
            if not self.mounted:
                logger.debug("Dropping response for unmounted %s", type(self).__name__)
                return list(self.items)
            self.items = list(items)
            self.loading = False
            return list(self.items)

    def mount(self) -> List[T]:
        with self._lock:
            self.mounted = True
        return self.refetch()

    def unmount(self) -> None:
        with self._lock:
            self.mounted = False

    def get(self, item_id: str) -> Optional[T]:
        with self._lock:
            for item in self.items:
                if getattr(item, "id", None) == item_id:
                    return item
        return None

    def merge(self, item: T) -> None:
        """Replace the item with the same id, or append it."""
        with self._lock:
            item_id = getattr(item, "id", None)
            for index, existing in enumerate(self.items):
                if getattr(existing, "id", None) == item_id:
                    self.items[index] = item
                    return
            self.items.append(item)

    def discard(self, item_id: str) -> None:
        with self._lock:
            self.items = [i for i in self.items if getattr(i, "id", None) != item_id]


class ResourceManagement:
    """Mutation wrapper exposing ``loading`` and ``error`` state."""

    def __init__(self, api: ResetAPI) -> None:
        self.api = api
        self.loading = False
        self.error: Optional[str] = None

    def _run(self, failure_message: str, call: Callable[[], R]) -> Optional[R]:
        """Run a mutation and translate failures into ``error``.

        Returns the call's result, or ``None`` when it failed.  A 401 has
        already cleared the session and redirected by the time it reaches
        this point.
        """
        self.loading = True
        self.error = None
        try:
            return call()
        except UnauthorizedError:
            self.error = SESSION_EXPIRED_MESSAGE
            return None
        except ApiError as exc:
            logger.error("%s: %s", failure_message, exc.message)
            self.error = exc.detail or exc.message or failure_message
            return None
        except ValidationError:
            logger.error("%s: %s", failure_message, INVALID_RESPONSE_MESSAGE)
            self.error = INVALID_RESPONSE_MESSAGE
            return None
        finally:
            self.loading = False

    def _succeeds(self, failure_message: str, call: Callable[[], object]) -> bool:
        """Run a mutation whose result carries no data (deletes, reorders)."""

        def _call() -> bool:
            call()
            return True

        return self._run(failure_message, _call) is True
