"""
Slide variants shown by the home page carousel.

A slide is either a :class:`StaticSlide` from the built-in fallback list
or a :class:`RemoteSlide` wrapping a backend record.  The variant is
resolved once, when a fetch completes, and each variant knows how to
render itself into a :class:`SlideView`.

Call-to-action rules: remote slides show buttons only when
``show_button`` is set; the primary button uses the slide's own text and
link when both are present and the default copy otherwise.  Static
slides always show the default buttons.
"""

from dataclasses import dataclass
from typing import List, Optional, Union

from pydantic import BaseModel

from reset_web.app.schemas.carousel import CarouselSlide
from reset_web.app.stores.fallback_data import PLACEHOLDER_IMAGE

DEFAULT_PRIMARY_TEXT = "Ver Servicios"
SECONDARY_TEXT = "Solicitar Cotización"
MISSING_IMAGE = "/placeholder.svg"


class ButtonView(BaseModel):
    text: str
    link: Optional[str] = None


class SlideView(BaseModel):
    key: str
    src: str
    alt: str
    title: str
    description: str
    active: bool
    opacity: float
    primary_button: Optional[ButtonView] = None
    secondary_button: Optional[ButtonView] = None


def _default_buttons() -> tuple:
    return ButtonView(text=DEFAULT_PRIMARY_TEXT), ButtonView(text=SECONDARY_TEXT)


@dataclass(frozen=True)
class StaticSlide:
    src: str
    alt: str
    title: str
    description: str

    def render(self, index: int, active: bool) -> SlideView:
        primary, secondary = _default_buttons()
        return SlideView(
            key=f"static-{index}",
            src=self.src or MISSING_IMAGE,
            alt=self.alt,
            title=self.title,
            description=self.description,
            active=active,
            opacity=1.0 if active else 0.0,
            primary_button=primary,
            secondary_button=secondary,
        )


@dataclass(frozen=True)
class RemoteSlide:
    slide: CarouselSlide

    def render(self, index: int, active: bool) -> SlideView:
        slide = self.slide
        primary = secondary = None
        if slide.show_button:
            if slide.button_text and slide.button_link:
                primary = ButtonView(text=slide.button_text, link=slide.button_link)
                secondary = ButtonView(text=SECONDARY_TEXT)
            else:
                primary, secondary = _default_buttons()
        return SlideView(
            key=slide.id,
            src=slide.image_url or MISSING_IMAGE,
            alt=slide.title,
            title=slide.title,
            description=slide.description,
            active=active,
            opacity=1.0 if active else 0.0,
            primary_button=primary,
            secondary_button=secondary,
        )


Slide = Union[StaticSlide, RemoteSlide]

STATIC_SLIDES: List[StaticSlide] = [
    StaticSlide(
        src=PLACEHOLDER_IMAGE,
        alt="Instalación profesional de cámaras de seguridad",
        title="Sistemas de Seguridad Profesional",
        description="Protege tu hogar y negocio con nuestras cámaras de última tecnología",
    ),
    StaticSlide(
        src=PLACEHOLDER_IMAGE,
        alt="Servicios de informática especializada",
        title="Servicios de Informática",
        description="Soporte técnico, reparación de equipos y soluciones IT integrales",
    ),
    StaticSlide(
        src=PLACEHOLDER_IMAGE,
        alt="Instalación y mantenimiento de aires acondicionados",
        title="Climatización Profesional",
        description="Instalación, mantenimiento y reparación de sistemas de climatización",
    ),
]


def resolve_slides(remote: List[CarouselSlide]) -> List[Slide]:
    """A non-empty remote list replaces the static slides entirely."""
    if remote:
        return [RemoteSlide(s) for s in remote]
    return list(STATIC_SLIDES)
