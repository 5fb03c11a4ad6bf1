"""
Modal forms for creating and editing catalog entries and slides.

A form is opened either blank (defaults) or pre-filled from an entity.
:meth:`validate` raises :class:`FormValidationError` when a required
field is empty; :meth:`to_create` / :meth:`to_update` build the payload
for the gateway.
"""

from __future__ import annotations

from typing import Dict, Iterable, List, Optional

from reset_web.app.admin.icons import DEFAULT_ICON
from reset_web.app.core.exceptions import FormValidationError
from reset_web.app.schemas.carousel import CarouselSlide, CarouselSlideCreate, CarouselSlideUpdate
from reset_web.app.schemas.product import Product, ProductCreate, ProductUpdate
from reset_web.app.schemas.service import Service, ServiceCreate, ServiceUpdate

REQUIRED_MESSAGE = "Este campo es obligatorio"

SERVICE_CATEGORIES = {
    "seguridad": "Seguridad",
    "climatizacion": "Climatización",
    "informatica": "Informática",
    "mantenimiento": "Mantenimiento",
    "otros": "Otros",
}
PRODUCT_CATEGORIES = dict(SERVICE_CATEGORIES, accesorios="Accesorios")


class FeatureList:
    """Ordered set of feature strings."""

    def __init__(self, features: Optional[Iterable[str]] = None) -> None:
        self._items: List[str] = []
        for feature in features or []:
            self.add(feature)

    def add(self, feature: str) -> bool:
        """Append ``feature`` unless it is blank or already present."""
        value = feature.strip()
        if not value or value in self._items:
            return False
        self._items.append(value)
        return True

    def remove(self, feature: str) -> None:
        self._items = [f for f in self._items if f != feature]

    def as_list(self) -> List[str]:
        return list(self._items)

    def __iter__(self):
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __contains__(self, feature: object) -> bool:
        return feature in self._items


def _require(values: Dict[str, object], fields: Iterable[str]) -> None:
    errors = {f: REQUIRED_MESSAGE for f in fields if not str(values.get(f) or "").strip()}
    if errors:
        raise FormValidationError(errors)


class CatalogForm:
    """Fields shared by the service and product forms."""

    required_fields = ("name", "description", "category")

    def __init__(self) -> None:
        self.entity_id: Optional[str] = None
        self.name = ""
        self.description = ""
        self.price: float = 0
        self.category = ""
        self.icon = DEFAULT_ICON
        self.is_active = True
        self.features = FeatureList()

    @property
    def is_editing(self) -> bool:
        return self.entity_id is not None

    @property
    def title(self) -> str:
        raise NotImplementedError

    def set(self, **values: object) -> None:
        """Assign field values; ``features`` replaces the whole list."""
        for key, value in values.items():
            if key == "features":
                self.features = FeatureList(value or [])
            elif hasattr(self, key) and key != "entity_id":
                setattr(self, key, value)
            else:
                raise AttributeError(f"Unknown form field: {key}")

    def _values(self) -> Dict[str, object]:
        return {"name": self.name, "description": self.description, "category": self.category}

    def validate(self) -> None:
        _require(self._values(), self.required_fields)


class ServiceForm(CatalogForm):
    def __init__(self, service: Optional[Service] = None) -> None:
        super().__init__()
        self.estimated_duration = 60
        if service is not None:
            self.entity_id = service.id
            self.name = service.name
            self.description = service.description
            self.price = service.price
            self.category = service.category
            self.icon = service.icon or DEFAULT_ICON
            self.estimated_duration = service.estimated_duration
            self.features = FeatureList(service.features)
            self.is_active = service.is_active

    @property
    def title(self) -> str:
        return "Editar Servicio" if self.is_editing else "Crear Nuevo Servicio"

    def to_create(self) -> ServiceCreate:
        self.validate()
        return ServiceCreate(
            name=self.name.strip(),
            description=self.description.strip(),
            price=self.price,
            category=self.category,
            icon=self.icon,
            estimated_duration=self.estimated_duration,
            features=self.features.as_list(),
            is_active=self.is_active,
        )

    def to_update(self) -> ServiceUpdate:
        self.validate()
        return ServiceUpdate(
            name=self.name.strip(),
            description=self.description.strip(),
            price=self.price,
            category=self.category,
            icon=self.icon,
            estimated_duration=self.estimated_duration,
            features=self.features.as_list(),
            is_active=self.is_active,
        )


class ProductForm(CatalogForm):
    def __init__(self, product: Optional[Product] = None) -> None:
        super().__init__()
        self.stock = 0
        self.image = ""
        if product is not None:
            self.entity_id = product.id
            self.name = product.name
            self.description = product.description
            self.price = product.price
            self.category = product.category
            self.icon = product.icon or DEFAULT_ICON
            self.stock = product.stock
            self.image = product.image or ""
            self.features = FeatureList(product.features)
            self.is_active = product.is_active

    @property
    def title(self) -> str:
        return "Editar Producto" if self.is_editing else "Crear Nuevo Producto"

    def to_create(self) -> ProductCreate:
        self.validate()
        return ProductCreate(
            name=self.name.strip(),
            description=self.description.strip(),
            price=self.price,
            category=self.category,
            icon=self.icon,
            image=self.image or None,
            stock=self.stock,
            features=self.features.as_list(),
            is_active=self.is_active,
        )

    def to_update(self) -> ProductUpdate:
        self.validate()
        return ProductUpdate(
            name=self.name.strip(),
            description=self.description.strip(),
            price=self.price,
            category=self.category,
            icon=self.icon,
            image=self.image or None,
            stock=self.stock,
            features=self.features.as_list(),
            is_active=self.is_active,
        )


class SlideForm:
    """Create/edit form for a carousel slide.  Only the title is required."""

    def __init__(self, slide: Optional[CarouselSlide] = None) -> None:
        self.slide_id = slide.id if slide else None
        self.title = slide.title if slide else ""
        self.description = slide.description if slide else ""
        self.image_url = slide.image_url if slide else ""
        self.button_text = (slide.button_text or "") if slide else ""
        self.button_link = (slide.button_link or "") if slide else ""
        self.show_button = slide.show_button if slide else False
        self.is_active = slide.is_active if slide else True

    @property
    def is_editing(self) -> bool:
        return self.slide_id is not None

    def set(self, **values: object) -> None:
        for key, value in values.items():
            if key == "slide_id" or not hasattr(self, key):
                raise AttributeError(f"Unknown form field: {key}")
            setattr(self, key, value)

    def validate(self) -> None:
        _require({"title": self.title}, ("title",))

    def _fields(self) -> Dict[str, object]:
        return {
            "title": self.title.strip(),
            "description": self.description.strip(),
            "image_url": self.image_url,
            "button_text": self.button_text.strip() or None,
            "button_link": self.button_link.strip() or None,
            "show_button": self.show_button,
            "is_active": self.is_active,
        }

    def to_create(self, order: Optional[int] = None) -> CarouselSlideCreate:
        self.validate()
        return CarouselSlideCreate(order=order, **self._fields())

    def to_update(self) -> CarouselSlideUpdate:
        self.validate()
        return CarouselSlideUpdate(**self._fields())
