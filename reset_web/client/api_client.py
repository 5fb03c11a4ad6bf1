"""RESET backend API client.

This module defines the single point of outbound HTTP communication
with the REST backend that stores services, products and carousel
slides.  The client uses the ``requests`` library internally.

The client exposes high-level methods for every operation the site and
the admin console need:

* authentication – :meth:`ResetAPI.login`, :meth:`ResetAPI.logout`,
  :meth:`ResetAPI.get_current_user`;
* services and products – list, get, create, update, delete and list
  categories;
* carousel slides – list (all or active only), get, create, update,
  toggle, delete and reorder;
* uploads – upload, list and delete images;
* contact – submit the minimal lead form.

Authentication is read from an injected :class:`SessionStore` on every
request; the token is never cached by the client.  Any ``401`` answer
clears the session and invokes the ``on_unauthorized`` callback (the
site uses it to navigate to the login view) before
:class:`UnauthorizedError` is raised to the caller.

Failures are never retried.  They surface as subclasses of
:class:`ApiError`: :class:`NetworkError` when no response arrived,
:class:`ClientError` for 4xx answers (carrying the server's ``detail``)
and :class:`ServerError` for 5xx answers.
"""

from __future__ import annotations

import logging
from typing import Any, BinaryIO, Callable, Dict, List, Optional, Union

import requests

from reset_web.app.core.exceptions import (
    ApiError,
    ClientError,
    NetworkError,
    ServerError,
    UnauthorizedError,
)
from reset_web.app.core.session import SessionStore
from reset_web.app.schemas.auth import LoginResponse, SessionUser
from reset_web.app.schemas.carousel import (
    CarouselSlide,
    CarouselSlideCreate,
    CarouselSlideUpdate,
    SlideOrder,
)
from reset_web.app.schemas.contact import ContactRequest, ContactResponse
from reset_web.app.schemas.product import Product, ProductCreate, ProductUpdate
from reset_web.app.schemas.service import Service, ServiceCreate, ServiceUpdate
from reset_web.app.schemas.upload import UploadedImage, UploadResult


logger = logging.getLogger(__name__)

GENERIC_SERVER_ERROR = "Error del servidor. Intenta de nuevo más tarde."

Payload = Union[Dict[str, Any], List[Any], None]


class ResetAPI:
    """Client for the RESET REST backend.

    Args:
        base_url: Origin of the backend, e.g. ``https://api.example.com``.
        session_store: Where the bearer token and user record live.
        api_prefix: Path prefix of the backend routes (``/api/v1``).
        on_unauthorized: Called after the session has been cleared
            because the backend answered ``401``.
        http: Optional ``requests`` session.  If not supplied a session
            is created automatically.
        timeout: Per-request timeout in seconds.
    """

    def __init__(
        self,
        *,
        base_url: str,
        session_store: SessionStore,
        api_prefix: str = "/api/v1",
        on_unauthorized: Optional[Callable[[], None]] = None,
        http: Optional[requests.Session] = None,
        timeout: float = 30,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.api_prefix = "/" + api_prefix.strip("/") if api_prefix.strip("/") else ""
        self.session_store = session_store
        self.on_unauthorized = on_unauthorized
        self.http = http or requests.Session()
        self.timeout = timeout

    # ------------------------------------------------------------------
    # Low level HTTP helpers
    # ------------------------------------------------------------------
    def url_for(self, path: str) -> str:
        return f"{self.base_url}{self.api_prefix}{path}"

    def _auth_headers(self) -> Dict[str, str]:
        headers: Dict[str, str] = {}
        token = self.session_store.get_token()
        if token:
            headers["Authorization"] = f"Bearer {token}"
        return headers

    def _request(
        self,
        method: str,
        path: str,
        *,
        params: Dict[str, Any] | None = None,
        json_body: Any | None = None,
        form: Dict[str, Any] | None = None,
        files: Dict[str, Any] | None = None,
    ) -> Any:
        """Perform an HTTP request against the backend.

        Args:
            method: HTTP method (``GET``, ``POST``, ``PATCH``, ``DELETE``, ...).
            path: Path relative to the API prefix (e.g. ``/services``).
            params: Query parameters.
            json_body: JSON body (mutations).
            form: Form-encoded body (login).
            files: Multipart files (uploads).
        Returns:
            The parsed JSON response, or ``None`` for empty bodies.
        Raises:
            ApiError: a subclass describing the failure.
        """
        url = self.url_for(path)
        try:
            logger.debug("Sending %s request to %s", method, url)
            response = self.http.request(
                method=method,
                url=url,
                params=params,
                json=json_body,
                data=form,
                files=files,
                headers=self._auth_headers(),
                timeout=self.timeout,
            )
        except requests.RequestException as exc:
            logger.error("API request %s %s failed: %s", method, path, exc)
            raise NetworkError(f"No se pudo conectar con el servidor: {exc}") from exc

        if response.status_code == 401:
            self._handle_unauthorized()
            detail = self._error_detail(response)
            raise UnauthorizedError(detail or "Sesión expirada", status_code=401, detail=detail)

        try:
            response.raise_for_status()
        except requests.HTTPError as exc:
            status = response.status_code
            detail = self._error_detail(response)
            logger.error("API request %s %s failed (%s): %s", method, path, status, detail or exc)
            if status >= 500:
                raise ServerError(GENERIC_SERVER_ERROR, status_code=status, detail=detail) from exc
            raise ClientError(detail or str(exc), status_code=status, detail=detail) from exc

        if not response.content:
            return None
        try:
            return response.json()
        except ValueError as exc:
            logger.error("API request %s %s returned a non JSON body", method, path)
            raise ServerError(GENERIC_SERVER_ERROR, status_code=response.status_code) from exc

    @staticmethod
    def _error_detail(response: requests.Response) -> Optional[str]:
        """Extract the server's ``detail``/``message`` from an error body."""
        try:
            err_json = response.json()
        except ValueError:
            return response.text or None
        if isinstance(err_json, dict):
            detail = err_json.get("detail") or err_json.get("message")
            if isinstance(detail, list):
                # FastAPI validation errors: a list of {loc, msg, type}.
                msgs = [d.get("msg", str(d)) if isinstance(d, dict) else str(d) for d in detail]
                return "; ".join(msgs)
            if detail:
                return str(detail)
        return str(err_json) if err_json else None

    def _handle_unauthorized(self) -> None:
        logger.warning("Backend answered 401; clearing session")
        self.session_store.clear()
        if self.on_unauthorized is not None:
            self.on_unauthorized()

    @staticmethod
    def _extract_list(data: Any, *keys: str) -> List[Any]:
        """Return the list payload, unwrapping a dictionary envelope."""
        if isinstance(data, list):
            return data
        if isinstance(data, dict):
            for key in keys + ("items", "data"):
                if key in data and isinstance(data[key], list):
                    return data[key]
        return []

    @staticmethod
    def _dump(payload: Any, partial: bool = False) -> Payload:
        """Serialise a payload model; partial updates omit empty fields."""
        if hasattr(payload, "model_dump"):
            return payload.model_dump(exclude_none=partial)
        return payload

    # ------------------------------------------------------------------
    # Auth operations
    # ------------------------------------------------------------------
    def login(self, email: str, password: str) -> LoginResponse:
        """Authenticate and store the session.

        The backend expects a form-encoded ``username``/``password`` pair.
        On success the token (and the user record when present) are
        written to the session store.
        """
        data = self._request("POST", "/auth/login", form={"username": email, "password": password})
        result = LoginResponse.model_validate(data or {})
        self.session_store.set_token(result.access_token)
        if result.user is not None:
            self.session_store.set_user(result.user.model_dump())
        logger.info("Logged in as %s", email)
        return result

    def logout(self) -> None:
        """Tell the backend and always clear the local session."""
        try:
            self._request("POST", "/auth/logout")
        except ApiError as exc:
            logger.info("Backend logout failed (%s); clearing session anyway", exc)
        finally:
            self.session_store.clear()

    def get_current_user(self) -> SessionUser:
        data = self._request("GET", "/auth/me")
        return SessionUser.model_validate(data or {})

    # ------------------------------------------------------------------
    # Service operations
    # ------------------------------------------------------------------
    def list_services(self, *, category: Optional[str] = None, is_active: Optional[bool] = None) -> List[Service]:
        params = {k: v for k, v in {"category": category, "is_active": is_active}.items() if v is not None}
        data = self._request("GET", "/services", params=params or None)
        return [Service.model_validate(item) for item in self._extract_list(data, "services")]

    def get_service(self, service_id: str) -> Service:
        return Service.model_validate(self._request("GET", f"/services/{service_id}"))

    def create_service(self, payload: ServiceCreate) -> Service:
        return Service.model_validate(self._request("POST", "/services", json_body=self._dump(payload)))

    def update_service(self, service_id: str, payload: ServiceUpdate) -> Service:
        data = self._request("PUT", f"/services/{service_id}", json_body=self._dump(payload, partial=True))
        return Service.model_validate(data)

    def delete_service(self, service_id: str) -> None:
        self._request("DELETE", f"/services/{service_id}")

    def list_service_categories(self) -> List[str]:
        return [str(c) for c in self._extract_list(self._request("GET", "/services/categories"), "categories")]

    # ------------------------------------------------------------------
    # Product operations
    # ------------------------------------------------------------------
    def list_products(self, *, category: Optional[str] = None, is_active: Optional[bool] = None) -> List[Product]:
        params = {k: v for k, v in {"category": category, "is_active": is_active}.items() if v is not None}
        data = self._request("GET", "/products", params=params or None)
        return [Product.model_validate(item) for item in self._extract_list(data, "products")]

    def get_product(self, product_id: str) -> Product:
        return Product.model_validate(self._request("GET", f"/products/{product_id}"))

    def create_product(self, payload: ProductCreate) -> Product:
        return Product.model_validate(self._request("POST", "/products", json_body=self._dump(payload)))

    def update_product(self, product_id: str, payload: ProductUpdate) -> Product:
        data = self._request("PUT", f"/products/{product_id}", json_body=self._dump(payload, partial=True))
        return Product.model_validate(data)

    def delete_product(self, product_id: str) -> None:
        self._request("DELETE", f"/products/{product_id}")

    def list_product_categories(self) -> List[str]:
        return [str(c) for c in self._extract_list(self._request("GET", "/products/categories"), "categories")]

    # ------------------------------------------------------------------
    # Carousel operations
    # ------------------------------------------------------------------
    def list_slides(self, active_only: bool = False) -> List[CarouselSlide]:
        """Return every slide (admin) or only active ones."""
        data = self._request("GET", "/carousel/slides", params={"active_only": str(active_only).lower()})
        return [CarouselSlide.model_validate(item) for item in self._extract_list(data, "slides")]

    def list_active_slides(self) -> List[CarouselSlide]:
        """Return the active slides for the public home page."""
        data = self._request("GET", "/carousel/slides/active")
        return [CarouselSlide.model_validate(item) for item in self._extract_list(data, "slides")]

    def get_slide(self, slide_id: str) -> CarouselSlide:
        return CarouselSlide.model_validate(self._request("GET", f"/carousel/slides/{slide_id}"))

    def create_slide(self, payload: CarouselSlideCreate) -> CarouselSlide:
        data = self._request("POST", "/carousel/slides", json_body=self._dump(payload))
        return CarouselSlide.model_validate(data)

    def update_slide(self, slide_id: str, payload: CarouselSlideUpdate) -> CarouselSlide:
        data = self._request("PUT", f"/carousel/slides/{slide_id}", json_body=self._dump(payload, partial=True))
        return CarouselSlide.model_validate(data)

    def toggle_slide(self, slide_id: str) -> CarouselSlide:
        return CarouselSlide.model_validate(self._request("PATCH", f"/carousel/slides/{slide_id}/toggle"))

    def delete_slide(self, slide_id: str) -> None:
        self._request("DELETE", f"/carousel/slides/{slide_id}")

    def reorder_slides(self, orders: List[SlideOrder]) -> None:
        """Replace the ordering of every listed slide."""
        body = [o.model_dump() for o in orders]
        self._request("POST", "/carousel/slides/reorder", json_body=body)

    # ------------------------------------------------------------------
    # Upload operations
    # ------------------------------------------------------------------
    def upload_image(self, filename: str, content: Union[bytes, BinaryIO], content_type: str) -> UploadResult:
        """Upload an image as multipart form data (field ``file``)."""
        files = {"file": (filename, content, content_type)}
        return UploadResult.model_validate(self._request("POST", "/uploads/upload-image", files=files))

    def list_images(self) -> List[UploadedImage]:
        data = self._request("GET", "/uploads/images")
        return [UploadedImage.model_validate(item) for item in self._extract_list(data, "images")]

    def delete_image(self, filename: str) -> Dict[str, Any]:
        return self._request("DELETE", f"/uploads/images/{filename}") or {}

    # ------------------------------------------------------------------
    # Contact operations
    # ------------------------------------------------------------------
    def submit_contact(self, payload: ContactRequest) -> ContactResponse:
        data = self._request("POST", "/contact/contact", json_body=payload.model_dump(exclude_none=True))
        return ContactResponse.model_validate(data or {})
