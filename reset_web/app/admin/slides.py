"""
Carousel slide administration.

Reordering works on a local copy of the loaded list: the moved slide is
removed from its position and reinserted at the target, then the
complete sequence is submitted with ``order`` set to the 1-based
position of every slide.  The backend treats the batch as a full
replacement of the ordering.  Every successful mutation refetches the
list.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Sequence

from reset_web.app.admin.forms import SlideForm
from reset_web.app.admin.listing import status_label
from reset_web.app.schemas.carousel import CarouselSlide, SlideOrder
from reset_web.app.stores.carousel import CarouselManagement, CarouselSlidesStore

logger = logging.getLogger(__name__)

UP = "up"
DOWN = "down"


def reorder_sequence(slide_ids: Sequence[str], from_index: int, to_index: int) -> List[SlideOrder]:
    """Move one id and number the resulting sequence ``1..N``."""
    ids = list(slide_ids)
    if not (0 <= from_index < len(ids)) or not (0 <= to_index < len(ids)):
        raise IndexError("slide position out of range")
    moved = ids.pop(from_index)
    ids.insert(to_index, moved)
    return [SlideOrder(id=slide_id, order=position) for position, slide_id in enumerate(ids, start=1)]


class SlideAdminList:
    def __init__(self, store: CarouselSlidesStore, management: CarouselManagement) -> None:
        self.store = store
        self.management = management
        self.form: Optional[SlideForm] = None
        self.error: Optional[str] = None

    @property
    def slides(self) -> List[CarouselSlide]:
        return list(self.store.items)

    @property
    def loading(self) -> bool:
        return self.store.loading or self.management.loading

    def unmount(self) -> None:
        self.store.unmount()

    def index_of(self, slide_id: str) -> int:
        for index, slide in enumerate(self.slides):
            if slide.id == slide_id:
                return index
        raise KeyError(slide_id)

    def rows(self) -> List[Dict[str, Any]]:
        slides = self.slides
        last = len(slides) - 1
        return [
            {
                "id": slide.id,
                "position": index + 1,
                "order": slide.order,
                "title": slide.title,
                "description": slide.description,
                "image_url": slide.image_url,
                "show_button": slide.show_button,
                "button_text": slide.button_text,
                "button_link": slide.button_link,
                "is_active": slide.is_active,
                "status": status_label(slide.is_active),
                "can_move_up": index > 0,
                "can_move_down": index < last,
            }
            for index, slide in enumerate(slides)
        ]

    # ------------------------------------------------------------------
    # Reordering
    # ------------------------------------------------------------------
    def move(self, slide_id: str, direction: str) -> bool:
        """Swap a slide with its neighbour; a no-op at either end."""
        if direction not in (UP, DOWN):
            raise ValueError(f"Unknown direction: {direction}")
        index = self.index_of(slide_id)
        target = index - 1 if direction == UP else index + 1
        if target < 0 or target >= len(self.slides):
            return False
        return self.move_to(slide_id, target + 1)

    def move_to(self, slide_id: str, position: int) -> bool:
        """Reinsert a slide at ``position`` (1-based) and submit the sequence."""
        slides = self.slides
        orders = reorder_sequence([s.id for s in slides], self.index_of(slide_id), position - 1)
        if not self.management.reorder_slides(orders):
            self.error = self.management.error
            return False
        logger.info("Reordered carousel: %s", ", ".join(o.id for o in orders))
        self.error = None
        self.store.refetch()
        return True

    # ------------------------------------------------------------------
    # Single slide actions
    # ------------------------------------------------------------------
    def toggle_active(self, slide_id: str) -> Optional[CarouselSlide]:
        result = self.management.toggle_slide(slide_id)
        return self._after_mutation(result)

    def delete(self, slide_id: str) -> bool:
        ok = self.management.delete_slide(slide_id)
        self._after_mutation(ok or None)
        return ok

    def _after_mutation(self, result):
        if result is None:
            self.error = self.management.error
            return None
        self.error = None
        self.store.refetch()
        return result

    # ------------------------------------------------------------------
    # Create / edit
    # ------------------------------------------------------------------
    def open_create(self) -> SlideForm:
        self.form = SlideForm()
        return self.form

    def open_edit(self, slide: CarouselSlide) -> SlideForm:
        self.form = SlideForm(slide)
        return self.form

    def close_form(self) -> None:
        self.form = None

    def submit(self) -> Optional[CarouselSlide]:
        if self.form is None:
            raise RuntimeError("No form is open")
        form = self.form
        if form.is_editing:
            result = self.management.update_slide(form.slide_id, form.to_update())
        else:
            result = self.management.create_slide(form.to_create())
        if self._after_mutation(result) is None:
            return None
        self.form = None
        return result
