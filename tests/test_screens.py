"""
Tests for the admin forms and the services/products list screens.
"""
import pytest

from conftest import product_payload, service_payload
from reset_web.app.admin.forms import FeatureList, ProductForm, ServiceForm, SlideForm
from reset_web.app.admin.screens import ProductsScreen, ServicesScreen
from reset_web.app.core.exceptions import FormValidationError
from reset_web.app.schemas.service import Service
from reset_web.app.stores.products import ProductManagement, ProductsStore
from reset_web.app.stores.services import ServiceManagement, ServicesStore


@pytest.fixture
def services_screen(api):
    return ServicesScreen(ServicesStore(api, auto_fetch=False), ServiceManagement(api))


@pytest.fixture
def products_screen(api):
    return ProductsScreen(ProductsStore(api, auto_fetch=False), ProductManagement(api))


def test_feature_list_is_an_ordered_set():
    features = FeatureList(["WiFi", "HD"])

    assert features.add(" 4K ") is True
    assert features.add("HD") is False
    assert features.add("   ") is False
    features.remove("WiFi")
    features.remove("not there")

    assert features.as_list() == ["HD", "4K"]
    assert "4K" in features
    assert len(features) == 2


def test_service_form_defaults_and_prefill():
    blank = ServiceForm()
    assert (blank.icon, blank.estimated_duration, blank.is_active, blank.is_editing) == ("monitor", 60, True, False)
    assert blank.title == "Crear Nuevo Servicio"

    service = Service.model_validate(service_payload("4", icon=None, features=["A", "B"], is_active=False))
    form = ServiceForm(service)
    assert form.is_editing and form.entity_id == "4"
    assert form.icon == "monitor"
    assert form.features.as_list() == ["A", "B"]
    assert form.to_update().is_active is False
    assert form.title == "Editar Servicio"


def test_form_requires_name_description_category():
    form = ProductForm()
    form.set(name="Sensor", description="  ")

    with pytest.raises(FormValidationError) as excinfo:
        form.to_create()

    assert set(excinfo.value.errors) == {"description", "category"}


def test_form_rejects_unknown_fields():
    with pytest.raises(AttributeError):
        ServiceForm().set(colour="red")


def test_slide_form_requires_title():
    form = SlideForm()
    with pytest.raises(FormValidationError):
        form.to_create()
    form.set(title="Promo", button_text="  ")
    assert form.to_create().button_text is None


def test_submit_invalid_form_makes_no_call(services_screen, http):
    services_screen.open_create().set(name="Solo nombre")

    with pytest.raises(FormValidationError):
        services_screen.submit()

    assert http.calls == []
    assert services_screen.form is not None


def test_create_product_with_zero_stock(products_screen, http):
    """A new product without stock shows "Sin stock" and bumps the aggregate."""
    http.add("GET", "/products", payload=[product_payload("1", stock=12)])
    http.add("GET", "/products", payload=[product_payload("1", stock=12), product_payload("2", name="Sirena", stock=0)])
    http.add("POST", "/products", payload=product_payload("2", name="Sirena", stock=0))
    products_screen.store.mount()
    before = products_screen.stats().out_of_stock

    form = products_screen.open_create()
    form.set(name="Sirena", description="Sirena exterior", category="seguridad", stock=0)
    created = products_screen.submit()

    assert created.id == "2"
    assert products_screen.form is None
    assert http.calls_to("POST", "/products")[0].json["stock"] == 0
    row = next(r for r in products_screen.rows() if r["id"] == "2")
    assert row["stock_status"] == "Sin stock"
    assert products_screen.stats().out_of_stock == before + 1


def test_toggle_service_then_refetch_shows_inactive(services_screen, http):
    http.add("GET", "/services", payload=[service_payload("1", is_active=True)])
    http.add("GET", "/services", payload=[service_payload("1", is_active=False)])
    http.add("PUT", "/services/1", payload=service_payload("1", is_active=False))
    services_screen.store.mount()

    services_screen.toggle_active(services_screen.store.items[0])

    assert http.calls_to("PUT", "/services/1")[0].json == {"is_active": False}
    assert services_screen.rows()[0]["status"] == "Inactivo"


def test_edit_merges_returned_entity(services_screen, http):
    http.add("GET", "/services", payload=[service_payload("1"), service_payload("2")])
    http.add("PUT", "/services/2", payload=service_payload("2", name="Cambiado", price=500))
    services_screen.store.mount()

    services_screen.open_edit(services_screen.store.get("2")).set(name="Cambiado", price=500)
    services_screen.submit()

    assert len(http.calls_to("GET", "/services")) == 1
    assert services_screen.store.get("2").name == "Cambiado"


def test_delete_needs_confirmation(services_screen, http):
    http.add("GET", "/services", payload=[service_payload("1"), service_payload("2")])
    http.add("GET", "/services", payload=[service_payload("2")])
    http.add("DELETE", "/services/1", 204)
    services_screen.store.mount()

    services_screen.request_delete(services_screen.store.get("1"))
    assert http.calls_to("DELETE", "/services/1") == []
    services_screen.cancel_delete()
    assert services_screen.confirm_delete() is False

    services_screen.request_delete(services_screen.store.get("1"))
    assert services_screen.confirm_delete() is True
    assert [s.id for s in services_screen.store.items] == ["2"]
    assert services_screen.pending_delete is None


def test_failed_delete_leaves_list_untouched(services_screen, http):
    http.add("GET", "/services", payload=[service_payload("1")])
    http.add("DELETE", "/services/1", 500)
    services_screen.store.mount()

    services_screen.request_delete(services_screen.store.get("1"))

    assert services_screen.confirm_delete() is False
    assert services_screen.error
    assert [s.id for s in services_screen.store.items] == ["1"]
    assert len(http.calls_to("GET", "/services")) == 1


def test_stats_use_unfiltered_list(products_screen, http):
    http.add(
        "GET",
        "/products",
        payload=[
            product_payload("1", price=100, stock=2, category="seguridad"),
            product_payload("2", price=50, stock=0, category="climatizacion", is_active=False),
        ],
    )
    products_screen.store.mount()
    products_screen.set_search("no existe")

    stats = products_screen.stats()

    assert products_screen.visible_items() == []
    assert stats.total == 2
    assert (stats.active, stats.inactive) == (1, 1)
    assert (stats.out_of_stock, stats.low_stock) == (1, 1)
    assert stats.total_stock == 2
    assert stats.inventory_value == 200
    assert stats.categories == 2


def test_screen_search_and_sort(services_screen, http):
    http.add(
        "GET",
        "/services",
        payload=[
            service_payload("1", name="Redes", price=300, category="informatica"),
            service_payload("2", name="Alarmas", price=150, category="seguridad"),
            service_payload("3", name="Cámaras", price=200, category="seguridad"),
        ],
    )
    services_screen.store.mount()

    services_screen.set_search("SEGUR")
    assert [s.name for s in services_screen.visible_items()] == ["Alarmas", "Cámaras"]

    services_screen.set_search("")
    services_screen.set_sort("price-desc")
    assert [s.name for s in services_screen.visible_items()] == ["Redes", "Cámaras", "Alarmas"]

    with pytest.raises(ValueError):
        services_screen.set_sort("stock")


def test_service_rows_format_values(services_screen, http):
    http.add("GET", "/services", payload=[service_payload("1", price=1500, estimated_duration=90)])
    services_screen.store.mount()

    row = services_screen.rows()[0]

    assert row["price_label"] == "$ 1.500"
    assert row["duration_label"] == "1h 30m"
    assert row["status"] == "Activo"


def test_create_service_inactive(services_screen, http):
    http.add("GET", "/services", payload=[])
    http.add("GET", "/services", payload=[service_payload("5", is_active=False)])
    http.add("POST", "/services", payload=service_payload("5", is_active=False))
    services_screen.store.mount()

    services_screen.open_create().set(name="Redes", description="Cableado", category="informatica", is_active=False)
    services_screen.submit()

    assert http.calls_to("POST", "/services")[0].json["is_active"] is False
    assert services_screen.rows()[0]["status"] == "Inactivo"


def test_new_product_defaults_to_active(products_screen):
    form = products_screen.open_create()
    form.set(name="Sensor", description="PIR", category="seguridad")

    assert form.to_create().is_active is True
