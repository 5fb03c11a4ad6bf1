"""Admin views for the home page carousel slides."""

from typing import Any, Dict

from fastapi import APIRouter, Depends, HTTPException, status

from reset_web.app.admin.slides import SlideAdminList
from reset_web.app.api.deps import require_admin
from reset_web.app.core.context import PageContext
from reset_web.app.schemas.admin import MoveRequest, MoveToRequest, SlideFormIn
from reset_web.app.stores.carousel import CarouselManagement, CarouselSlidesStore

router = APIRouter()


def _load(page: PageContext) -> SlideAdminList:
    slides = page.mount(SlideAdminList(CarouselSlidesStore(page.api), CarouselManagement(page.api)))
    page.check_navigation()
    return slides


def _listing(slides: SlideAdminList) -> Dict[str, Any]:
    return {"items": slides.rows(), "count": len(slides.slides), "error": slides.store.error}


def _settle(page: PageContext, slides: SlideAdminList, ok: bool) -> Dict[str, Any]:
    page.check_navigation()
    if not ok:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=slides.error or "Operación fallida")
    return _listing(slides)


def _find(slides: SlideAdminList, slide_id: str):
    slide = slides.store.get(slide_id)
    if slide is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Slide no encontrado")
    return slide


@router.get("")
def list_slides(page: PageContext = Depends(require_admin)):
    return _listing(_load(page))


@router.post("", status_code=status.HTTP_201_CREATED)
def create_slide(body: SlideFormIn, page: PageContext = Depends(require_admin)):
    slides = _load(page)
    slides.open_create().set(**body.model_dump(exclude_unset=True, exclude_none=True))
    return _settle(page, slides, slides.submit() is not None)


@router.put("/{slide_id}")
def update_slide(slide_id: str, body: SlideFormIn, page: PageContext = Depends(require_admin)):
    slides = _load(page)
    slides.open_edit(_find(slides, slide_id)).set(**body.model_dump(exclude_unset=True, exclude_none=True))
    return _settle(page, slides, slides.submit() is not None)


@router.post("/{slide_id}/toggle")
def toggle_slide(slide_id: str, page: PageContext = Depends(require_admin)):
    slides = _load(page)
    _find(slides, slide_id)
    return _settle(page, slides, slides.toggle_active(slide_id) is not None)


@router.post("/{slide_id}/move")
def move_slide(slide_id: str, body: MoveRequest, page: PageContext = Depends(require_admin)):
    slides = _load(page)
    _find(slides, slide_id)
    index = slides.index_of(slide_id)
    if (body.direction == "up" and index == 0) or (body.direction == "down" and index == len(slides.slides) - 1):
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="El slide no se puede mover en esa dirección")
    return _settle(page, slides, slides.move(slide_id, body.direction))


@router.post("/{slide_id}/move-to")
def move_slide_to(slide_id: str, body: MoveToRequest, page: PageContext = Depends(require_admin)):
    slides = _load(page)
    _find(slides, slide_id)
    if body.position > len(slides.slides):
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Posición fuera de rango")
    return _settle(page, slides, slides.move_to(slide_id, body.position))


@router.delete("/{slide_id}")
def delete_slide(slide_id: str, confirm: bool = False, page: PageContext = Depends(require_admin)):
    slides = _load(page)
    _find(slides, slide_id)
    if not confirm:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail="¿Estás seguro de que quieres eliminar este slide?",
        )
    return _settle(page, slides, slides.delete(slide_id))
