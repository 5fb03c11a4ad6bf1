"""WhatsApp deep links for the floating contact button."""

import re
from dataclasses import dataclass
from typing import List, Optional
from urllib.parse import quote

DEFAULT_MESSAGE = "¡Hola! Me gustaría solicitar información sobre sus servicios."


@dataclass(frozen=True)
class QuickMessage:
    title: str
    message: str


QUICK_MESSAGES: List[QuickMessage] = [
    QuickMessage("Consulta General", "¡Hola! Me gustaría obtener más información sobre sus servicios."),
    QuickMessage("Solicitar Cotización", "Hola, necesito una cotización para un servicio. ¿Podrían ayudarme?"),
    QuickMessage("Servicio de Emergencia", "¡Urgente! Necesito asistencia técnica inmediata. ¿Están disponibles?"),
    QuickMessage("Soporte Técnico", "Hola, tengo un problema técnico y necesito soporte. ¿Pueden ayudarme?"),
]


def whatsapp_link(phone: str, message: Optional[str] = None) -> str:
    """Build a ``wa.me`` link; non-digits are stripped from ``phone``."""
    digits = re.sub(r"\D", "", phone)
    text = quote(message or DEFAULT_MESSAGE, safe="")
    return f"https://wa.me/{digits}?text={text}"
