"""State for the minimal contact (lead) form on the home page."""

import logging
from typing import Optional

from reset_web.app.core.exceptions import ApiError
from reset_web.app.schemas.contact import ContactRequest
from reset_web.client.api_client import ResetAPI

logger = logging.getLogger(__name__)

SUCCESS_MESSAGE = "Enviado. Te contactaremos pronto."
FAILURE_MESSAGE = "No se pudo enviar. Intenta más tarde."
MISSING_FIELDS_MESSAGE = "Nombre y teléfono son obligatorios."


class ContactForm:
    """Name and phone are required; the message is optional."""

    def __init__(self, api: ResetAPI) -> None:
        self.api = api
        self.sending = False
        self.success: Optional[str] = None
        self.error: Optional[str] = None

    def submit(self, name: str, phone: str, message: str = "") -> bool:
        self.success = None
        self.error = None
        name, phone, message = name.strip(), phone.strip(), (message or "").strip()
        if not name or not phone:
            self.error = MISSING_FIELDS_MESSAGE
            return False
        self.sending = True
        try:
            self.api.submit_contact(ContactRequest(name=name, phone=phone, message=message or None))
        except ApiError as exc:
            logger.error("Contact form failed: %s", exc.message)
            self.error = exc.detail or FAILURE_MESSAGE
            return False
        finally:
            self.sending = False
        self.success = SUCCESS_MESSAGE
        return True
