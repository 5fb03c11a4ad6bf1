"""
Pydantic models for home page carousel slides.

The ``order`` field defines the display sequence.  Reordering always
submits the complete sequence as :class:`SlideOrder` pairs numbered
contiguously from 1.
"""

from typing import Optional

from pydantic import BaseModel, Field

from .common import BackendRecord


class CarouselSlideBase(BaseModel):
    title: str = Field(..., examples=["Sistemas de Seguridad Profesional"])
    description: str = Field("", examples=["Protege tu hogar y negocio"])
    image_url: Optional[str] = Field("", examples=["/uploads/slide-1.jpg"])
    button_text: Optional[str] = None
    button_link: Optional[str] = None
    show_button: bool = False


class CarouselSlideCreate(CarouselSlideBase):
    """Schema for creating a slide."""

    order: Optional[int] = None
    is_active: bool = True


class CarouselSlideUpdate(BaseModel):
    """Schema for updating a slide; only provided values are sent."""

    title: Optional[str] = None
    description: Optional[str] = None
    image_url: Optional[str] = None
    button_text: Optional[str] = None
    button_link: Optional[str] = None
    show_button: Optional[bool] = None
    order: Optional[int] = None
    is_active: Optional[bool] = None


class CarouselSlide(BackendRecord, CarouselSlideBase):
    """Schema for a slide read from the backend."""

    order: int = 0
    is_active: bool = True
    created_at: Optional[str] = None
    updated_at: Optional[str] = None


class SlideOrder(BaseModel):
    """One entry of a reorder request."""

    id: str
    order: int = Field(..., ge=1)
