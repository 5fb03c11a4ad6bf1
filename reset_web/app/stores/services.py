"""State containers for the services catalog."""

from typing import List, Optional

from reset_web.app.schemas.service import Service, ServiceCreate, ServiceUpdate
from reset_web.app.stores.fallback_data import default_services
from reset_web.app.stores.resource_store import ResourceManagement, ResourceStore


class ServicesStore(ResourceStore[Service]):
    """All services; the local catalog stands in when the backend fails."""

    error_message = "Error al cargar servicios"

    def _fetch(self) -> List[Service]:
        return self.api.list_services()

    def _fallback(self) -> List[Service]:
        return default_services()

    def active_items(self) -> List[Service]:
        return [s for s in self.items if s.is_active]


class ServiceManagement(ResourceManagement):
    def create_service(self, payload: ServiceCreate) -> Optional[Service]:
        return self._run("Error al crear servicio", lambda: self.api.create_service(payload))

    def update_service(self, service_id: str, payload: ServiceUpdate) -> Optional[Service]:
        return self._run("Error al actualizar servicio", lambda: self.api.update_service(service_id, payload))

    def delete_service(self, service_id: str) -> bool:
        return self._succeeds("Error al eliminar servicio", lambda: self.api.delete_service(service_id))
