"""Admin dashboard and icon catalog."""

from typing import Optional

from fastapi import APIRouter, Depends

from reset_web.app.admin.icons import DEFAULT_ICON, find_icons
from reset_web.app.admin.stats import dashboard_summary
from reset_web.app.api.deps import require_admin
from reset_web.app.core.context import PageContext
from reset_web.app.stores.products import ProductsStore
from reset_web.app.stores.services import ServicesStore

router = APIRouter()


@router.get("")
def dashboard(page: PageContext = Depends(require_admin)):
    services = page.mount(ServicesStore(page.api))
    products = page.mount(ProductsStore(page.api))
    page.check_navigation()
    return {
        "user": page.session_store.get_user(),
        "summary": dashboard_summary(services.items, products.items).model_dump(),
        "errors": [e for e in (services.error, products.error) if e],
    }


@router.get("/icons")
def icons(category: Optional[str] = None, search: str = "", page: PageContext = Depends(require_admin)):
    return {
        "default": DEFAULT_ICON,
        "items": [
            {"name": o.name, "category": o.category, "description": o.description}
            for o in find_icons(category, search)
        ],
    }
