"""
Shared fixtures for all tests.

The backend is replaced by :class:`FakeHttp`, a stand-in for
``requests.Session`` that answers from a route table with real
``requests.Response`` objects.  Timers are driven by
:class:`ManualScheduler`, which only runs a periodic callback when a
test fires it.
"""
import json
from types import SimpleNamespace

import pytest
import requests
from fastapi.testclient import TestClient

from reset_web.app.core.config import Settings
from reset_web.app.core.context import SiteContainer
from reset_web.app.core.navigation import Navigator
from reset_web.app.core.session import MemorySessionStore
from reset_web.client.api_client import ResetAPI

BASE_URL = "http://backend.test"
API_PREFIX = "/api/v1"


def make_response(status_code=200, payload=None, url=""):
    """Build a ``requests.Response`` carrying ``payload`` as JSON."""
    response = requests.Response()
    response.status_code = status_code
    response.url = url
    response.encoding = "utf-8"
    if payload is None:
        response._content = b""
    else:
        response._content = json.dumps(payload).encode("utf-8")
        response.headers["Content-Type"] = "application/json"
    return response


class FakeHttp:
    """Route table keyed by ``(method, path)``, path relative to the API prefix.

    Responses queued for a route are consumed in order; the last one
    keeps answering.  A payload may be a callable, evaluated when the
    request arrives.  Unknown routes raise ``ConnectionError``.
    """

    def __init__(self):
        self.routes = {}
        self.calls = []

    def add(self, method, path, status_code=200, payload=None):
        self.routes.setdefault((method.upper(), path), []).append((status_code, payload))

    def set(self, method, path, status_code=200, payload=None):
        self.routes[(method.upper(), path)] = [(status_code, payload)]

    def request(self, method, url, params=None, json=None, data=None, files=None, headers=None, timeout=None):
        prefix = BASE_URL + API_PREFIX
        path = url[len(prefix):] if url.startswith(prefix) else url
        self.calls.append(
            SimpleNamespace(
                method=method.upper(),
                path=path,
                params=params,
                json=json,
                data=data,
                files=files,
                headers=dict(headers or {}),
            )
        )
        queue = self.routes.get((method.upper(), path))
        if not queue:
            raise requests.ConnectionError(f"no route for {method} {path}")
        status_code, payload = queue[0] if len(queue) == 1 else queue.pop(0)
        if callable(payload):
            payload = payload()
        return make_response(status_code, payload, url)

    def calls_to(self, method, path):
        return [c for c in self.calls if c.method == method.upper() and c.path == path]


class ManualTask:
    def __init__(self, interval, callback, name):
        self.interval = interval
        self.callback = callback
        self.name = name
        self.cancelled = False

    @property
    def active(self):
        return not self.cancelled

    def cancel(self):
        self.cancelled = True


class ManualScheduler:
    def __init__(self):
        self.tasks = []

    def every(self, interval, callback, name="periodic-task"):
        task = ManualTask(interval, callback, name)
        self.tasks.append(task)
        return task

    def active(self, name):
        return [t for t in self.tasks if t.name == name and t.active]

    def fire(self, name, times=1):
        for _ in range(times):
            for task in self.active(name):
                task.callback()


def service_payload(service_id="1", **overrides):
    data = {
        "id": service_id,
        "name": f"Servicio {service_id}",
        "description": "Instalación y mantenimiento",
        "price": 100,
        "category": "seguridad",
        "icon": "shield",
        "is_active": True,
        "estimated_duration": 60,
        "features": ["Garantía"],
        "created_at": "2024-01-01T00:00:00",
    }
    data.update(overrides)
    return data


def product_payload(product_id="1", **overrides):
    data = {
        "id": product_id,
        "name": f"Producto {product_id}",
        "description": "Equipo profesional",
        "price": 250,
        "category": "seguridad",
        "icon": "camera",
        "image": None,
        "is_active": True,
        "stock": 10,
        "features": [],
        "created_at": "2024-01-01T00:00:00",
    }
    data.update(overrides)
    return data


def slide_payload(slide_id="s1", order=1, **overrides):
    data = {
        "id": slide_id,
        "title": f"Slide {slide_id}",
        "description": "Descripción",
        "image_url": f"/uploads/{slide_id}.jpg",
        "button_text": None,
        "button_link": None,
        "show_button": False,
        "order": order,
        "is_active": True,
    }
    data.update(overrides)
    return data


@pytest.fixture
def http():
    return FakeHttp()


@pytest.fixture
def session_store():
    return MemorySessionStore()


@pytest.fixture
def navigator():
    return Navigator("/admin")


@pytest.fixture
def api(http, session_store, navigator):
    return ResetAPI(
        base_url=BASE_URL,
        session_store=session_store,
        api_prefix=API_PREFIX,
        on_unauthorized=navigator.redirect_to_login,
        http=http,
    )


@pytest.fixture
def scheduler():
    return ManualScheduler()


@pytest.fixture
def container(http, session_store, scheduler):
    config = Settings(api_url=BASE_URL, api_prefix=API_PREFIX, session_file="", whatsapp_phone="+52 1 993 208 1792")
    return SiteContainer(config, session_store=session_store, http=http, scheduler=scheduler)


@pytest.fixture
def client(container):
    """FastAPI test client wired to the fake backend."""
    from reset_web.app.main import create_app

    app = create_app(container)
    with TestClient(app) as test_client:
        yield test_client
