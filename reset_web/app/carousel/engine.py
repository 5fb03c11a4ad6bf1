"""
Home page carousel state machine.

States
------
``idle-static``
    Showing the built-in slides.  This is the state before :meth:`mount`
    and whenever the backend returns no active slide.
``loading``
    Entered once by :meth:`CarouselEngine.mount` until the first fetch
    settles.  Background refreshes never re-enter it.
``idle-remote``
    Showing the slides returned by the backend.

While mounted the engine owns two periodic tasks: autoplay, which
advances ``active_index`` to ``(i + 1) % n``, and a background refresh
through the slide store.  Manual navigation (:meth:`next`,
:meth:`previous`, :meth:`go_to`) does not reset the autoplay timer.  The
autoplay timer is restarted only when the number of slides changes,
and no timer runs while there is nothing to show.  :meth:`unmount`
cancels both tasks; after it returns no timer touches the engine.
"""

from __future__ import annotations

import logging
import threading
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel

from reset_web.app.carousel.slides import STATIC_SLIDES, Slide, SlideView, resolve_slides
from reset_web.app.core.scheduler import PeriodicTask, Scheduler
from reset_web.app.stores.carousel import CarouselSlidesStore

logger = logging.getLogger(__name__)

LOADING_MESSAGE = "Cargando slides desde base de datos..."


class CarouselState(str, Enum):
    LOADING = "loading"
    IDLE_STATIC = "idle-static"
    IDLE_REMOTE = "idle-remote"


class IndicatorView(BaseModel):
    index: int
    active: bool


class CarouselView(BaseModel):
    state: CarouselState
    active_index: int
    message: Optional[str] = None
    slides: List[SlideView] = []
    indicators: List[IndicatorView] = []


class CarouselEngine:
    """Drives the rotating hero section of the home page.

    Parameters
    ----------
    store:
        Store reading the active slides.  It is mounted and unmounted
        together with the engine.
    scheduler:
        Source of periodic tasks; tests pass a manual implementation.
    autoplay_seconds, refresh_seconds:
        Timer intervals.
    """

    def __init__(
        self,
        store: CarouselSlidesStore,
        scheduler: Optional[Scheduler] = None,
        autoplay_seconds: float = 5,
        refresh_seconds: float = 30,
    ) -> None:
        self.store = store
        self.scheduler = scheduler or Scheduler()
        self.autoplay_seconds = autoplay_seconds
        self.refresh_seconds = refresh_seconds
        self.state = CarouselState.IDLE_STATIC
        self.active_index = 0
        self.slides: List[Slide] = list(STATIC_SLIDES)
        self.mounted = False
        self._autoplay: Optional[PeriodicTask] = None
        self._refresh: Optional[PeriodicTask] = None
        self._lock = threading.RLock()

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------
    def mount(self) -> None:
        with self._lock:
            if self.mounted:
                return
            self.mounted = True
            self.state = CarouselState.LOADING
        self.store.mount()
        self._apply_store()
        with self._lock:
            if self.mounted and self._refresh is None:
                self._refresh = self.scheduler.every(self.refresh_seconds, self.refresh, name="carousel-refresh")

    def unmount(self) -> None:
        with self._lock:
            self.mounted = False
            tasks = [t for t in (self._autoplay, self._refresh) if t is not None]
            self._autoplay = self._refresh = None
        for task in tasks:
            task.cancel()
        self.store.unmount()

    def refresh(self) -> None:
        """Re-read the slides in the background."""
        self.store.refetch()
        if self.store.error:
            logger.warning("Carousel refresh failed: %s", self.store.error)
        self._apply_store()

    def _apply_store(self) -> None:
        with self._lock:
            if not self.mounted:
                return
            previous_count = len(self.slides)
            self.slides = resolve_slides(self.store.items)
            self.state = CarouselState.IDLE_REMOTE if self.store.items else CarouselState.IDLE_STATIC
            if self.active_index >= len(self.slides):
                self.active_index = 0
            if self._autoplay is not None and len(self.slides) == previous_count:
                return
            stale, self._autoplay = self._autoplay, None
        # Cancel outside the lock: cancel() waits for a running _advance.
        if stale is not None:
            stale.cancel()
        self._start_autoplay()

    def _start_autoplay(self) -> None:
        with self._lock:
            if not self.mounted or not self.slides or self._autoplay is not None:
                return
            self._autoplay = self.scheduler.every(self.autoplay_seconds, self._advance, name="carousel-autoplay")

    def _advance(self) -> None:
        with self._lock:
            if not self.mounted or self.state is CarouselState.LOADING:
                return
            self._step(1)

    # ------------------------------------------------------------------
    # Navigation
    # ------------------------------------------------------------------
    def _step(self, delta: int) -> None:
        count = len(self.slides)
        if count:
            self.active_index = (self.active_index + delta) % count

    def next(self) -> int:
        with self._lock:
            self._step(1)
            return self.active_index

    def previous(self) -> int:
        with self._lock:
            self._step(-1)
            return self.active_index

    def go_to(self, index: int) -> int:
        with self._lock:
            if self.slides:
                self.active_index = index % len(self.slides)
            return self.active_index

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------
    def render(self) -> CarouselView:
        with self._lock:
            if self.state is CarouselState.LOADING:
                return CarouselView(state=self.state, active_index=self.active_index, message=LOADING_MESSAGE)
            return CarouselView(
                state=self.state,
                active_index=self.active_index,
                slides=[s.render(i, i == self.active_index) for i, s in enumerate(self.slides)],
                indicators=[IndicatorView(index=i, active=i == self.active_index) for i in range(len(self.slides))],
            )
