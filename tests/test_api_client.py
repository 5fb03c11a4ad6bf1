"""
Tests for the gateway client.
"""
import pytest

from conftest import BASE_URL, product_payload, service_payload, slide_payload
from reset_web.app.core.exceptions import ClientError, NetworkError, ServerError, UnauthorizedError
from reset_web.app.schemas.carousel import SlideOrder
from reset_web.app.schemas.contact import ContactRequest
from reset_web.app.schemas.service import ServiceCreate, ServiceUpdate
from reset_web.client.api_client import GENERIC_SERVER_ERROR


def test_login_is_form_encoded_and_stores_session(api, http, session_store):
    """Login posts username/password as a form and keeps token and user."""
    http.add(
        "POST",
        "/auth/login",
        payload={
            "access_token": "abc123",
            "token_type": "bearer",
            "user": {"id": 7, "name": "Ana", "email": "ana@reset.mx", "role": "admin"},
        },
    )

    result = api.login("ana@reset.mx", "secreto")

    call = http.calls_to("POST", "/auth/login")[0]
    assert call.data == {"username": "ana@reset.mx", "password": "secreto"}
    assert call.json is None
    assert result.access_token == "abc123"
    assert session_store.get_token() == "abc123"
    assert session_store.get_user() == {"id": "7", "name": "Ana", "email": "ana@reset.mx", "role": "admin"}


def test_login_accepts_camel_case_token(api, http, session_store):
    http.add("POST", "/auth/login", payload={"accessToken": "xyz"})
    api.login("a@b.c", "pw")
    assert session_store.get_token() == "xyz"
    assert session_store.get_user() is None


def test_token_is_read_on_every_request(api, http, session_store):
    """The bearer header follows the session store, it is never cached."""
    http.add("GET", "/services", payload=[])

    api.list_services()
    session_store.set_token("t1")
    api.list_services()
    session_store.set_token("t2")
    api.list_services()
    session_store.clear()
    api.list_services()

    headers = [c.headers.get("Authorization") for c in http.calls]
    assert headers == [None, "Bearer t1", "Bearer t2", None]


def test_unauthorized_clears_session_and_redirects(api, http, session_store, navigator):
    """Any 401 wipes token and user and navigates to /login."""
    session_store.set_token("stale")
    session_store.set_user({"id": "1", "name": "Ana", "email": "a@b.c", "role": "admin"})
    http.add("GET", "/products", 401, {"detail": "Token expirado"})

    with pytest.raises(UnauthorizedError) as excinfo:
        api.list_products()

    assert excinfo.value.status_code == 401
    assert session_store.get_token() is None
    assert session_store.get_user() is None
    assert navigator.location == "/login"
    assert navigator.take_pending() == "/login"


def test_failed_login_with_stale_token_also_redirects(api, http, session_store, navigator):
    session_store.set_token("stale")
    http.add("POST", "/auth/login", 401, {"detail": "Credenciales incorrectas"})

    with pytest.raises(UnauthorizedError):
        api.login("a@b.c", "mal")

    assert session_store.get_token() is None
    assert navigator.location == "/login"


def test_client_error_carries_server_detail(api, http):
    http.add("POST", "/services", 400, {"detail": "El nombre ya existe"})

    with pytest.raises(ClientError) as excinfo:
        api.create_service(ServiceCreate(name="Dup", description="d", category="otros"))

    assert excinfo.value.status_code == 400
    assert excinfo.value.detail == "El nombre ya existe"
    assert excinfo.value.message == "El nombre ya existe"


def test_validation_error_list_is_flattened(api, http):
    http.add("PUT", "/services/1", 422, {"detail": [{"msg": "field required"}, {"msg": "value is not a number"}]})

    with pytest.raises(ClientError) as excinfo:
        api.update_service("1", ServiceUpdate(price=10))

    assert excinfo.value.detail == "field required; value is not a number"


def test_server_error_uses_generic_message(api, http):
    http.add("GET", "/services", 503, {"detail": "database down"})

    with pytest.raises(ServerError) as excinfo:
        api.list_services()

    assert excinfo.value.message == GENERIC_SERVER_ERROR
    assert excinfo.value.status_code == 503


def test_network_failure_is_not_retried(api, http):
    with pytest.raises(NetworkError):
        api.list_services()
    assert len(http.calls) == 1


def test_list_envelope_is_unwrapped(api, http):
    http.add("GET", "/products", payload={"items": [product_payload("1"), product_payload("2")], "total": 2})

    products = api.list_products()

    assert [p.id for p in products] == ["1", "2"]


def test_mongo_style_ids_are_accepted(api, http):
    slide = slide_payload("s1")
    slide["_id"] = slide.pop("id")
    http.add("GET", "/carousel/slides/active", payload=[slide])

    slides = api.list_active_slides()

    assert slides[0].id == "s1"


def test_update_sends_only_provided_fields(api, http):
    http.add("PUT", "/services/1", payload=service_payload("1", is_active=False))

    result = api.update_service("1", ServiceUpdate(is_active=False))

    assert http.calls[0].json == {"is_active": False}
    assert result.is_active is False


def test_list_slides_passes_active_only_flag(api, http):
    http.add("GET", "/carousel/slides", payload=[])

    api.list_slides()
    api.list_slides(active_only=True)

    assert [c.params for c in http.calls] == [{"active_only": "false"}, {"active_only": "true"}]


def test_toggle_uses_patch(api, http):
    http.add("PATCH", "/carousel/slides/s1/toggle", payload=slide_payload("s1", is_active=False))

    slide = api.toggle_slide("s1")

    assert slide.is_active is False


def test_reorder_sends_full_sequence(api, http):
    http.add("POST", "/carousel/slides/reorder", payload={"message": "ok"})

    api.reorder_slides([SlideOrder(id="b", order=1), SlideOrder(id="a", order=2)])

    assert http.calls[0].json == [{"id": "b", "order": 1}, {"id": "a", "order": 2}]


def test_upload_is_multipart(api, http):
    http.add(
        "POST",
        "/uploads/upload-image",
        payload={"success": True, "filename": "x.png", "url": "/uploads/x.png", "size": 4},
    )

    result = api.upload_image("x.png", b"\x89PNG", "image/png")

    call = http.calls[0]
    assert call.json is None
    assert call.files == {"file": ("x.png", b"\x89PNG", "image/png")}
    assert result.url == "/uploads/x.png"


def test_delete_with_empty_body_returns_none(api, http):
    http.add("DELETE", "/products/3", 204)
    assert api.delete_product("3") is None


def test_logout_clears_session_even_when_backend_fails(api, http, session_store):
    session_store.set_token("abc")
    http.add("POST", "/auth/logout", 500)

    api.logout()

    assert session_store.get_token() is None


def test_contact_omits_empty_message(api, http):
    http.add("POST", "/contact/contact", payload={"success": True, "message": "ok"})

    api.submit_contact(ContactRequest(name="Luis", phone="9931234567"))

    assert http.calls[0].json == {"name": "Luis", "phone": "9931234567"}


def test_urls_use_origin_and_prefix(api):
    assert api.url_for("/services") == BASE_URL + "/api/v1/services"


def test_single_entity_reads(api, http):
    http.add("GET", "/services/4", payload=service_payload("4", name="Redes"))
    http.add("GET", "/products/9", payload=product_payload("9", stock=3))
    http.add("GET", "/carousel/slides/s2", payload=slide_payload("s2", order=2))

    assert api.get_service("4").name == "Redes"
    assert api.get_product("9").stock == 3
    assert api.get_slide("s2").order == 2
    assert [(c.method, c.path) for c in http.calls] == [
        ("GET", "/services/4"),
        ("GET", "/products/9"),
        ("GET", "/carousel/slides/s2"),
    ]


def test_category_lists(api, http):
    http.add("GET", "/services/categories", payload=["seguridad", "climatizacion"])
    http.add("GET", "/products/categories", payload={"categories": ["seguridad", "accesorios"]})

    assert api.list_service_categories() == ["seguridad", "climatizacion"]
    assert api.list_product_categories() == ["seguridad", "accesorios"]
