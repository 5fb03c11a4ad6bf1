"""
Public marketing pages.

Every view answers with a JSON view model: the home page (carousel,
highlighted services, WhatsApp shortcuts), the services and products
catalogs with their filters, the contact form and the WhatsApp link
builder.  A 401 from the backend on any of them ends in a redirect to
the login view, as on the admin pages.
"""

from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Depends, Query, status
from fastapi.responses import JSONResponse

from reset_web.app.admin.listing import (
    ALL_CATEGORIES,
    PRICE_RANGES,
    SORT_NAME,
    filter_catalog,
    format_duration,
    format_price,
)
from reset_web.app.api.deps import get_container, get_page
from reset_web.app.carousel.engine import CarouselView
from reset_web.app.core.context import PageContext, SiteContainer
from reset_web.app.core.whatsapp import QUICK_MESSAGES, whatsapp_link
from reset_web.app.schemas.admin import ContactFormIn
from reset_web.app.schemas.product import Product
from reset_web.app.schemas.service import Service
from reset_web.app.stores.contact import ContactForm
from reset_web.app.stores.products import ProductsStore
from reset_web.app.stores.services import ServicesStore

router = APIRouter()


def _service_card(service: Service) -> Dict[str, Any]:
    return {
        "id": service.id,
        "name": service.name,
        "description": service.description,
        "category": service.category,
        "icon": service.icon,
        "price": format_price(service.price),
        "duration": format_duration(service.estimated_duration),
        "features": service.features,
    }


def _product_card(product: Product) -> Dict[str, Any]:
    return {
        "id": product.id,
        "name": product.name,
        "description": product.description,
        "category": product.category,
        "icon": product.icon,
        "image": product.image,
        "price": format_price(product.price),
        "stock": product.stock,
        "stock_status": product.stock_status.value,
        "features": product.features,
    }


def _categories(items: List[Any]) -> List[str]:
    return [ALL_CATEGORIES] + sorted({item.category for item in items})


def _whatsapp(phone: str, message: Optional[str] = None) -> Dict[str, Any]:
    return {
        "phone": phone,
        "link": whatsapp_link(phone, message),
        "quick_messages": [
            {"title": q.title, "message": q.message, "link": whatsapp_link(phone, q.message)}
            for q in QUICK_MESSAGES
        ],
    }


@router.get("/")
def home(
    page: PageContext = Depends(get_page),
    container: SiteContainer = Depends(get_container),
) -> Dict[str, Any]:
    services = page.mount(ServicesStore(page.api))
    page.check_navigation()
    return {
        "carousel": container.carousel.render().model_dump(mode="json"),
        "services": [_service_card(s) for s in services.active_items()],
        "services_error": services.error,
        "whatsapp": _whatsapp(container.settings.whatsapp_phone),
    }


@router.post("/carousel/next", response_model=CarouselView)
def carousel_next(container: SiteContainer = Depends(get_container)) -> CarouselView:
    container.carousel.next()
    return container.carousel.render()


@router.post("/carousel/previous", response_model=CarouselView)
def carousel_previous(container: SiteContainer = Depends(get_container)) -> CarouselView:
    container.carousel.previous()
    return container.carousel.render()


@router.post("/carousel/go/{index}", response_model=CarouselView)
def carousel_go_to(index: int, container: SiteContainer = Depends(get_container)) -> CarouselView:
    container.carousel.go_to(index)
    return container.carousel.render()


@router.get("/servicios")
def services_catalog(
    search: str = "",
    category: str = ALL_CATEGORIES,
    sort_by: str = SORT_NAME,
    page: PageContext = Depends(get_page),
) -> Dict[str, Any]:
    store = page.mount(ServicesStore(page.api))
    page.check_navigation()
    active = store.active_items()
    items = filter_catalog(active, search=search, category=category, sort_by=sort_by)
    return {
        "items": [_service_card(s) for s in items],
        "count": len(items),
        "categories": _categories(active),
        "error": store.error,
    }


@router.get("/productos")
def products_catalog(
    search: str = "",
    category: str = ALL_CATEGORIES,
    price_range: str = Query(ALL_CATEGORIES, description="todos, " + ", ".join(PRICE_RANGES)),
    sort_by: str = SORT_NAME,
    page: PageContext = Depends(get_page),
) -> Dict[str, Any]:
    store = page.mount(ProductsStore(page.api))
    page.check_navigation()
    active = store.active_items()
    items = filter_catalog(active, search=search, category=category, price_range=price_range, sort_by=sort_by)
    return {
        "items": [_product_card(p) for p in items],
        "count": len(items),
        "categories": _categories(active),
        "price_ranges": [ALL_CATEGORIES] + list(PRICE_RANGES),
        "error": store.error,
    }


@router.post("/contacto")
def contact(body: ContactFormIn, page: PageContext = Depends(get_page)):
    form = ContactForm(page.api)
    sent = form.submit(body.name, body.phone, body.message)
    page.check_navigation()
    if sent:
        return {"success": True, "message": form.success}
    code = status.HTTP_400_BAD_REQUEST if not body.name.strip() or not body.phone.strip() else status.HTTP_502_BAD_GATEWAY
    return JSONResponse(status_code=code, content={"success": False, "message": form.error})


@router.get("/whatsapp")
def whatsapp(message: Optional[str] = None, container: SiteContainer = Depends(get_container)) -> Dict[str, Any]:
    return _whatsapp(container.settings.whatsapp_phone, message)


@router.get("/health")
def health() -> Dict[str, str]:
    return {"status": "ok"}
