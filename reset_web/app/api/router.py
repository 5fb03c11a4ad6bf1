"""
Top-level router of the web front.

Aggregates the public pages, the login views and the admin views.
Every router below ``/admin`` depends on the auth gate.
"""

from fastapi import APIRouter

from .endpoints import auth, carousel_admin, catalog_admin, dashboard, pages, uploads

router = APIRouter()

router.include_router(pages.router, tags=["pages"])
router.include_router(auth.router, tags=["auth"])
router.include_router(dashboard.router, prefix="/admin", tags=["admin"])
router.include_router(catalog_admin.services_router, prefix="/admin/services", tags=["admin-services"])
router.include_router(catalog_admin.products_router, prefix="/admin/products", tags=["admin-products"])
router.include_router(carousel_admin.router, prefix="/admin/carousel", tags=["admin-carousel"])
router.include_router(uploads.router, prefix="/admin/uploads", tags=["admin-uploads"])
