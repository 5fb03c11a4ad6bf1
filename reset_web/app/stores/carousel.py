"""
State containers for carousel slides.

Slides read from the backend have their ``image_url`` turned into an
absolute URL against the backend origin and are kept sorted by
``order``.  Unlike the catalog stores there is no local fallback: a
failed read leaves an empty list and the carousel engine decides what
to show instead.
"""

from typing import List, Optional

from reset_web.app.core.images import get_full_image_url
from reset_web.app.schemas.carousel import (
    CarouselSlide,
    CarouselSlideCreate,
    CarouselSlideUpdate,
    SlideOrder,
)
from reset_web.app.stores.resource_store import ResourceManagement, ResourceStore
from reset_web.client.api_client import ResetAPI


def normalize_slide(slide: CarouselSlide, origin: str) -> CarouselSlide:
    return slide.model_copy(update={"image_url": get_full_image_url(slide.image_url, origin)})


class CarouselSlidesStore(ResourceStore[CarouselSlide]):
    error_message = "Error al cargar slides del carrusel"

    def __init__(self, api: ResetAPI, *, active_only: bool = False, auto_fetch: bool = True) -> None:
        self.active_only = active_only
        super().__init__(api, auto_fetch=auto_fetch)

    def _fetch(self) -> List[CarouselSlide]:
        slides = self.api.list_active_slides() if self.active_only else self.api.list_slides()
        origin = self.api.base_url
        # sorted() is stable, equal orders keep the backend's sequence
        return sorted((normalize_slide(s, origin) for s in slides), key=lambda s: s.order)


class CarouselManagement(ResourceManagement):
    """Slide mutations.  Returned slides carry absolute image URLs."""

    def _normalized(self, slide: Optional[CarouselSlide]) -> Optional[CarouselSlide]:
        if slide is None:
            return None
        return normalize_slide(slide, self.api.base_url)

    def create_slide(self, payload: CarouselSlideCreate) -> Optional[CarouselSlide]:
        return self._normalized(self._run("Error al crear slide", lambda: self.api.create_slide(payload)))

    def update_slide(self, slide_id: str, payload: CarouselSlideUpdate) -> Optional[CarouselSlide]:
        return self._normalized(
            self._run("Error al actualizar slide", lambda: self.api.update_slide(slide_id, payload))
        )

    def toggle_slide(self, slide_id: str) -> Optional[CarouselSlide]:
        return self._normalized(self._run("Error al cambiar estado del slide", lambda: self.api.toggle_slide(slide_id)))

    def delete_slide(self, slide_id: str) -> bool:
        return self._succeeds("Error al eliminar slide", lambda: self.api.delete_slide(slide_id))

    def reorder_slides(self, orders: List[SlideOrder]) -> bool:
        return self._succeeds("Error al reordenar slides", lambda: self.api.reorder_slides(orders))
