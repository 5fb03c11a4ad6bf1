"""
Admin list screens for services and products.

A screen combines a store (the loaded list), a management object (the
mutations) and the transient UI state: search term, sort key, the open
form and the item awaiting delete confirmation.

After a create or a delete the whole list is refetched.  An update
merges the entity returned by the backend into the loaded list, except
for :meth:`CatalogScreen.toggle_active`, which refetches.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Generic, List, Optional, Type, TypeVar, Union

from reset_web.app.admin.forms import ProductForm, ServiceForm
from reset_web.app.admin.listing import (
    SORT_CATEGORY,
    SORT_DURATION,
    SORT_NAME,
    SORT_PRICE_ASC,
    SORT_PRICE_DESC,
    SORT_STOCK,
    filter_items,
    format_duration,
    format_price,
    sort_items,
    status_label,
)
from reset_web.app.admin.stats import ProductStats, ServiceStats, product_stats, service_stats
from reset_web.app.schemas.product import Product, ProductUpdate
from reset_web.app.schemas.service import Service, ServiceUpdate
from reset_web.app.stores.products import ProductManagement, ProductsStore
from reset_web.app.stores.services import ServiceManagement, ServicesStore

logger = logging.getLogger(__name__)

T = TypeVar("T", Service, Product)
Form = Union[ServiceForm, ProductForm]


class CatalogScreen(Generic[T]):
    form_class: Type[Form]
    sort_keys: tuple = ()

    def __init__(self, store, management) -> None:
        self.store = store
        self.management = management
        self.search = ""
        self.sort_by = SORT_NAME
        self.form: Optional[Form] = None
        self.pending_delete: Optional[T] = None
        self.error: Optional[str] = None

    @property
    def loading(self) -> bool:
        return self.store.loading or self.management.loading

    def unmount(self) -> None:
        self.store.unmount()

    # ------------------------------------------------------------------
    # List view
    # ------------------------------------------------------------------
    def set_search(self, term: str) -> None:
        self.search = term or ""

    def set_sort(self, key: str) -> None:
        if key not in self.sort_keys:
            raise ValueError(f"Unknown sort key: {key}")
        self.sort_by = key

    def visible_items(self) -> List[T]:
        return sort_items(filter_items(self.store.items, self.search), self.sort_by)

    def rows(self) -> List[Dict[str, Any]]:
        return [self.row(item) for item in self.visible_items()]

    def row(self, item: T) -> Dict[str, Any]:
        return {
            "id": item.id,
            "name": item.name,
            "description": item.description,
            "category": item.category,
            "icon": item.icon,
            "price": item.price,
            "price_label": format_price(item.price),
            "features": list(item.features),
            "is_active": item.is_active,
            "status": status_label(item.is_active),
        }

    # ------------------------------------------------------------------
    # Create / edit
    # ------------------------------------------------------------------
    def open_create(self) -> Form:
        self.form = self.form_class()
        return self.form

    def open_edit(self, item: T) -> Form:
        self.form = self.form_class(item)
        return self.form

    def close_form(self) -> None:
        self.form = None

    def submit(self) -> Optional[T]:
        """Validate and send the open form.

        Raises :class:`FormValidationError` before any call is made when
        a required field is empty.  Returns the saved entity, or ``None``
        when the backend call failed (see ``error``).
        """
        if self.form is None:
            raise RuntimeError("No form is open")
        form = self.form
        if form.is_editing:
            result = self._update(form.entity_id, form.to_update())
            if result is not None:
                self.store.merge(result)
        else:
            result = self._create(form.to_create())
            if result is not None:
                self.store.refetch()
        if result is None:
            self.error = self.management.error
            return None
        self.error = None
        self.form = None
        return result

    # ------------------------------------------------------------------
    # Delete / toggle
    # ------------------------------------------------------------------
    def request_delete(self, item: T) -> None:
        self.pending_delete = item

    def cancel_delete(self) -> None:
        self.pending_delete = None

    def confirm_delete(self) -> bool:
        item = self.pending_delete
        if item is None:
            return False
        if not self._delete(item.id):
            self.error = self.management.error
            return False
        logger.info("Deleted %s %s", type(item).__name__.lower(), item.id)
        self.pending_delete = None
        self.error = None
        self.store.refetch()
        return True

    def toggle_active(self, item: T) -> Optional[T]:
        result = self._update(item.id, self._toggle_payload(item))
        if result is None:
            self.error = self.management.error
            return None
        self.store.refetch()
        return result

    # Resource specific calls.
    def _create(self, payload):
        raise NotImplementedError

    def _update(self, item_id: str, payload):
        raise NotImplementedError

    def _delete(self, item_id: str) -> bool:
        raise NotImplementedError

    def _toggle_payload(self, item: T):
        raise NotImplementedError


class ServicesScreen(CatalogScreen[Service]):
    form_class = ServiceForm
    sort_keys = (SORT_NAME, SORT_PRICE_ASC, SORT_PRICE_DESC, SORT_CATEGORY, SORT_DURATION)

    def __init__(self, store: ServicesStore, management: ServiceManagement) -> None:
        super().__init__(store, management)

    def row(self, item: Service) -> Dict[str, Any]:
        data = super().row(item)
        data["estimated_duration"] = item.estimated_duration
        data["duration_label"] = format_duration(item.estimated_duration)
        return data

    def stats(self) -> ServiceStats:
        return service_stats(self.store.items)

    def _create(self, payload):
        return self.management.create_service(payload)

    def _update(self, item_id, payload):
        return self.management.update_service(item_id, payload)

    def _delete(self, item_id):
        return self.management.delete_service(item_id)

    def _toggle_payload(self, item: Service) -> ServiceUpdate:
        return ServiceUpdate(is_active=not item.is_active)


class ProductsScreen(CatalogScreen[Product]):
    form_class = ProductForm
    sort_keys = (SORT_NAME, SORT_PRICE_ASC, SORT_PRICE_DESC, SORT_CATEGORY, SORT_STOCK)

    def __init__(self, store: ProductsStore, management: ProductManagement) -> None:
        super().__init__(store, management)

    def row(self, item: Product) -> Dict[str, Any]:
        data = super().row(item)
        data["image"] = item.image
        data["stock"] = item.stock
        data["stock_status"] = item.stock_status.value
        return data

    def stats(self) -> ProductStats:
        return product_stats(self.store.items)

    def _create(self, payload):
        return self.management.create_product(payload)

    def _update(self, item_id, payload):
        return self.management.update_product(item_id, payload)

    def _delete(self, item_id):
        return self.management.delete_product(item_id)

    def _toggle_payload(self, item: Product) -> ProductUpdate:
        return ProductUpdate(is_active=not item.is_active)
