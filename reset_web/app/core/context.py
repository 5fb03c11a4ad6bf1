"""
Object graph of the running site.

:class:`SiteContainer` owns the long-lived pieces: the session storage,
the shared HTTP session, the scheduler and the home page carousel.
Every incoming request gets a :class:`PageContext`, the equivalent of
one page being mounted in a browser: it has its own navigator and its
own gateway client wired to that navigator, and it unmounts the stores
it created when the request is finished.
"""

from __future__ import annotations

import logging
from typing import List, Optional

import requests

from reset_web.app.carousel.engine import CarouselEngine
from reset_web.app.core.config import Settings, settings as default_settings
from reset_web.app.core.exceptions import NavigationRequired
from reset_web.app.core.navigation import Navigator
from reset_web.app.core.scheduler import Scheduler
from reset_web.app.core.session import SessionStore, build_session_store
from reset_web.app.stores.carousel import CarouselSlidesStore
from reset_web.client.api_client import ResetAPI

logger = logging.getLogger(__name__)


class PageContext:
    """Per-request navigator, gateway client and mounted components."""

    def __init__(self, container: "SiteContainer", location: str) -> None:
        self.container = container
        self.location = location
        self.navigator = Navigator(location)
        self.api = container.build_api(self.navigator)
        self._mounted: List[object] = []

    @property
    def session_store(self) -> SessionStore:
        return self.container.session_store

    def mount(self, component):
        """Track a store or screen so it is unmounted with the page."""
        self._mounted.append(component)
        return component

    def check_navigation(self) -> None:
        """Raise :class:`NavigationRequired` if something asked to leave the page.

        Navigations requested by the site's background tasks count too.
        """
        pending = self.navigator.take_pending() or self.container.navigator.take_pending()
        if pending and pending != self.location:
            raise NavigationRequired(pending)

    def close(self) -> None:
        for component in reversed(self._mounted):
            component.unmount()
        self._mounted.clear()


class SiteContainer:
    def __init__(
        self,
        config: Optional[Settings] = None,
        *,
        session_store: Optional[SessionStore] = None,
        http: Optional[requests.Session] = None,
        scheduler: Optional[Scheduler] = None,
    ) -> None:
        self.settings = config or default_settings
        self.session_store = session_store or build_session_store(self.settings.session_file)
        self.http = http or requests.Session()
        self.scheduler = scheduler or Scheduler()
        # Background work (the carousel refresh) has no page of its own; a
        # 401 there is delivered to the next page that is rendered.
        self.navigator = Navigator()
        slides = CarouselSlidesStore(self.build_api(self.navigator), active_only=True, auto_fetch=False)
        self.carousel = CarouselEngine(
            slides,
            scheduler=self.scheduler,
            autoplay_seconds=self.settings.carousel_autoplay_seconds,
            refresh_seconds=self.settings.carousel_refresh_seconds,
        )

    def build_api(self, navigator: Navigator) -> ResetAPI:
        return ResetAPI(
            base_url=self.settings.api_url,
            session_store=self.session_store,
            api_prefix=self.settings.api_prefix,
            on_unauthorized=navigator.redirect_to_login,
            http=self.http,
            timeout=self.settings.request_timeout,
        )

    def page(self, location: str) -> PageContext:
        return PageContext(self, location)

    def start(self) -> None:
        logger.info("Starting site against backend %s", self.settings.api_url)
        self.carousel.mount()

    def stop(self) -> None:
        self.carousel.unmount()
        logger.info("Site stopped")
