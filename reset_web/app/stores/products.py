"""State containers for the products catalog."""

from typing import List, Optional

from reset_web.app.schemas.product import Product, ProductCreate, ProductUpdate
from reset_web.app.stores.fallback_data import default_products
from reset_web.app.stores.resource_store import ResourceManagement, ResourceStore


class ProductsStore(ResourceStore[Product]):
    """All products; the local catalog stands in when the backend fails."""

    error_message = "Error al cargar productos"

    def _fetch(self) -> List[Product]:
        return self.api.list_products()

    def _fallback(self) -> List[Product]:
        return default_products()

    def active_items(self) -> List[Product]:
        return [p for p in self.items if p.is_active]


class ProductManagement(ResourceManagement):
    def create_product(self, payload: ProductCreate) -> Optional[Product]:
        return self._run("Error al crear producto", lambda: self.api.create_product(payload))

    def update_product(self, product_id: str, payload: ProductUpdate) -> Optional[Product]:
        return self._run("Error al actualizar producto", lambda: self.api.update_product(product_id, payload))

    def delete_product(self, product_id: str) -> bool:
        return self._succeeds("Error al eliminar producto", lambda: self.api.delete_product(product_id))
