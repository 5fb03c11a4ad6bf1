"""
Admin CRUD views for services and products.

Both resources expose the same routes; :func:`build_router` wires a
screen factory to them.  Deleting requires ``?confirm=true``: without
it the view answers ``409`` with the confirmation prompt and nothing is
sent to the backend.
"""

from typing import Any, Callable, Dict, Type

from fastapi import APIRouter, Body, Depends, HTTPException, status
from pydantic import BaseModel

from reset_web.app.admin.screens import CatalogScreen, ProductsScreen, ServicesScreen
from reset_web.app.api.deps import require_admin
from reset_web.app.core.context import PageContext
from reset_web.app.schemas.admin import ProductFormIn, ServiceFormIn
from reset_web.app.stores.products import ProductManagement, ProductsStore
from reset_web.app.stores.services import ServiceManagement, ServicesStore

ScreenFactory = Callable[[PageContext], CatalogScreen]


def services_screen(page: PageContext) -> ServicesScreen:
    return page.mount(ServicesScreen(ServicesStore(page.api), ServiceManagement(page.api)))


def products_screen(page: PageContext) -> ProductsScreen:
    return page.mount(ProductsScreen(ProductsStore(page.api), ProductManagement(page.api)))


def _failure(screen: CatalogScreen) -> HTTPException:
    return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=screen.error or "Operación fallida")


def _listing(screen: CatalogScreen) -> Dict[str, Any]:
    return {
        "items": screen.rows(),
        "count": len(screen.visible_items()),
        "stats": screen.stats().model_dump(),
        "search": screen.search,
        "sort_by": screen.sort_by,
        "sort_keys": list(screen.sort_keys),
        "error": screen.store.error,
    }


def build_router(make_screen: ScreenFactory, body_model: Type[BaseModel], noun: str) -> APIRouter:
    router = APIRouter()

    def load(page: PageContext):
        screen = make_screen(page)
        page.check_navigation()
        return screen

    def find(screen: CatalogScreen, item_id: str):
        item = screen.store.get(item_id)
        if item is None:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"{noun} no encontrado")
        return item

    @router.get("")
    def list_items(search: str = "", sort_by: str = "name", page: PageContext = Depends(require_admin)):
        screen = load(page)
        screen.set_search(search)
        try:
            screen.set_sort(sort_by)
        except ValueError as exc:
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc))
        return _listing(screen)

    @router.post("", status_code=status.HTTP_201_CREATED)
    def create_item(body: body_model = Body(...), page: PageContext = Depends(require_admin)):  # type: ignore[valid-type]
        screen = load(page)
        screen.open_create().set(**body.model_dump(exclude_unset=True, exclude_none=True))
        result = screen.submit()
        page.check_navigation()
        if result is None:
            raise _failure(screen)
        return screen.row(result)

    @router.put("/{item_id}")
    def update_item(item_id: str, body: body_model = Body(...), page: PageContext = Depends(require_admin)):  # type: ignore[valid-type]
        screen = load(page)
        screen.open_edit(find(screen, item_id)).set(**body.model_dump(exclude_unset=True, exclude_none=True))
        result = screen.submit()
        page.check_navigation()
        if result is None:
            raise _failure(screen)
        return screen.row(result)

    @router.post("/{item_id}/toggle")
    def toggle_item(item_id: str, page: PageContext = Depends(require_admin)):
        screen = load(page)
        result = screen.toggle_active(find(screen, item_id))
        page.check_navigation()
        if result is None:
            raise _failure(screen)
        return screen.row(result)

    @router.delete("/{item_id}")
    def delete_item(item_id: str, confirm: bool = False, page: PageContext = Depends(require_admin)):
        screen = load(page)
        item = find(screen, item_id)
        screen.request_delete(item)
        if not confirm:
            raise HTTPException(
                status_code=status.HTTP_409_CONFLICT,
                detail=(
                    "¿Estás seguro? Esta acción no se puede deshacer. "
                    f'Se eliminará permanentemente el {noun.lower()} "{item.name}".'
                ),
            )
        deleted = screen.confirm_delete()
        page.check_navigation()
        if not deleted:
            raise _failure(screen)
        return {"success": True, "id": item_id}

    return router


services_router = build_router(services_screen, ServiceFormIn, "Servicio")
products_router = build_router(products_screen, ProductFormIn, "Producto")
