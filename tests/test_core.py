"""
Tests for session storage, timers, the auth gate and small helpers.
"""
import json
import threading
import time

import pytest

from reset_web.app.admin.gate import AuthGate, login_redirect
from reset_web.app.core.exceptions import UploadValidationError
from reset_web.app.core.images import (
    INVALID_TYPE_MESSAGE,
    MAX_IMAGE_SIZE,
    TOO_LARGE_MESSAGE,
    get_full_image_url,
    validate_image_upload,
)
from reset_web.app.core.navigation import Navigator
from reset_web.app.core.scheduler import PeriodicTask, Scheduler
from reset_web.app.core.session import (
    LEGACY_TOKEN_KEY,
    TOKEN_KEY,
    USER_KEY,
    FileSessionStore,
    MemorySessionStore,
    build_session_store,
)
from reset_web.app.core.whatsapp import DEFAULT_MESSAGE, whatsapp_link


def test_gate_redirects_without_token(session_store, navigator):
    gate = AuthGate(session_store, navigator)

    assert gate.on_mount() is False
    assert gate.rendered is True
    assert navigator.location == "/login"


def test_gate_lets_authenticated_visitor_stay(session_store, navigator):
    session_store.set_token("abc")

    assert AuthGate(session_store, navigator).on_mount() is True
    assert navigator.location == "/admin"
    assert navigator.take_pending() is None


def test_login_view_redirects_when_authenticated(session_store):
    navigator = Navigator("/login")
    assert login_redirect(session_store, navigator) is False

    session_store.set_token("abc")
    assert login_redirect(session_store, navigator) is True
    assert navigator.location == "/admin"


def test_file_session_survives_new_instance(tmp_path):
    path = tmp_path / "session.json"
    FileSessionStore(str(path)).set_token("persisted")

    store = FileSessionStore(str(path))

    assert store.get_token() == "persisted"
    assert json.loads(path.read_text(encoding="utf-8"))[TOKEN_KEY] == "persisted"


def test_clear_removes_token_user_and_legacy_key(tmp_path):
    store = FileSessionStore(str(tmp_path / "session.json"))
    store.set_token("abc")
    store.set_item(LEGACY_TOKEN_KEY, "old")
    store.set_user({"id": "1", "name": "Ana", "email": "a@b.c", "role": "admin"})

    store.clear()

    assert store.get_token() is None
    assert store.get_item(LEGACY_TOKEN_KEY) is None
    assert store.get_user() is None


def test_corrupt_user_record_is_dropped():
    store = MemorySessionStore({USER_KEY: "{not json", TOKEN_KEY: "abc"})

    assert store.get_user() is None
    assert store.get_item(USER_KEY) is None
    assert store.get_token() == "abc"


def test_unreadable_session_file_starts_empty(tmp_path):
    path = tmp_path / "session.json"
    path.write_text("garbage", encoding="utf-8")

    assert FileSessionStore(str(path)).get_token() is None


def test_build_session_store(tmp_path):
    assert isinstance(build_session_store(""), MemorySessionStore)
    assert isinstance(build_session_store(str(tmp_path / "s.json")), FileSessionStore)


def test_periodic_task_runs_until_cancelled():
    ticks = []
    fired = threading.Event()

    def tick():
        ticks.append(1)
        if len(ticks) >= 2:
            fired.set()

    task = Scheduler().every(0.01, tick, name="test-tick")
    assert fired.wait(2)
    task.cancel()
    count = len(ticks)
    time.sleep(0.05)

    assert task.active is False
    assert len(ticks) == count


def test_periodic_task_survives_failing_callback():
    calls = []
    done = threading.Event()

    def flaky():
        calls.append(1)
        if len(calls) == 1:
            raise RuntimeError("boom")
        done.set()

    task = Scheduler().every(0.01, flaky)
    try:
        assert done.wait(2)
    finally:
        task.cancel()


def test_periodic_task_rejects_non_positive_interval():
    with pytest.raises(ValueError):
        PeriodicTask(0, lambda: None)


def test_whatsapp_link_strips_phone_and_encodes_message():
    link = whatsapp_link("+52 1 993 208 1792", "Hola, ¿precio?")

    assert link.startswith("https://wa.me/5219932081792?text=")
    assert link.endswith("Hola%2C%20%C2%BFprecio%3F")


def test_whatsapp_link_default_message():
    assert whatsapp_link("123") == whatsapp_link("123", DEFAULT_MESSAGE)


@pytest.mark.parametrize(
    "url,expected",
    [
        ("/uploads/a.jpg", "http://backend.test/uploads/a.jpg"),
        ("uploads/a.jpg", "http://backend.test/uploads/a.jpg"),
        ("https://cdn.example.com/a.jpg", "https://cdn.example.com/a.jpg"),
        ("", ""),
        (None, ""),
    ],
)
def test_full_image_url(url, expected):
    assert get_full_image_url(url, "http://backend.test/") == expected


def test_upload_validation():
    validate_image_upload("image/png", MAX_IMAGE_SIZE)

    with pytest.raises(UploadValidationError) as excinfo:
        validate_image_upload("application/pdf", 10)
    assert str(excinfo.value) == INVALID_TYPE_MESSAGE

    with pytest.raises(UploadValidationError) as excinfo:
        validate_image_upload("image/webp", MAX_IMAGE_SIZE + 1)
    assert str(excinfo.value) == TOO_LARGE_MESSAGE


def test_is_authenticated_follows_token(session_store):
    assert session_store.is_authenticated() is False
    session_store.set_token("abc")
    assert session_store.is_authenticated() is True
    session_store.clear()
    assert session_store.is_authenticated() is False
