"""
Request bodies accepted by the web front.

Every field is optional: a body only carries the fields the visitor
filled in, and the screen's form decides what is missing.  Endpoints
read them with ``model_dump(exclude_unset=True)``.
"""

from typing import List, Optional

from pydantic import BaseModel, Field


class ServiceFormIn(BaseModel):
    name: Optional[str] = None
    description: Optional[str] = None
    price: Optional[float] = Field(None, ge=0)
    category: Optional[str] = None
    icon: Optional[str] = None
    estimated_duration: Optional[int] = Field(None, gt=0)
    features: Optional[List[str]] = None
    is_active: Optional[bool] = None


class ProductFormIn(BaseModel):
    name: Optional[str] = None
    description: Optional[str] = None
    price: Optional[float] = Field(None, ge=0)
    category: Optional[str] = None
    icon: Optional[str] = None
    image: Optional[str] = None
    stock: Optional[int] = Field(None, ge=0)
    features: Optional[List[str]] = None
    is_active: Optional[bool] = None


class SlideFormIn(BaseModel):
    title: Optional[str] = None
    description: Optional[str] = None
    image_url: Optional[str] = None
    button_text: Optional[str] = None
    button_link: Optional[str] = None
    show_button: Optional[bool] = None
    is_active: Optional[bool] = None


class MoveRequest(BaseModel):
    direction: str = Field(..., pattern="^(up|down)$")


class MoveToRequest(BaseModel):
    position: int = Field(..., ge=1)


class ContactFormIn(BaseModel):
    name: str = ""
    phone: str = ""
    message: str = ""
