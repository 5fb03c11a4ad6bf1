"""
Pydantic models for services offered by the business.

A service has a symbolic icon name instead of an image, an estimated
duration in minutes and an ordered list of feature strings.  New services
are created active unless the form switched ``is_active`` off; later
changes go through ``ServiceUpdate``.
"""

from typing import List, Optional

from pydantic import BaseModel, Field

from .common import BackendRecord


class ServiceBase(BaseModel):
    name: str = Field(..., examples=["Sistemas de Seguridad"])
    description: str = Field("", examples=["Cámaras IP, CCTV, alarmas y control de acceso"])
    price: float = Field(0, ge=0, examples=[299])
    category: str = Field(..., examples=["seguridad"])
    icon: Optional[str] = Field(None, examples=["shield"])
    estimated_duration: int = Field(60, examples=[120], description="Estimated duration in minutes")
    features: List[str] = Field(default_factory=list)


class ServiceCreate(ServiceBase):
    """Schema for creating a new service."""

    estimated_duration: int = Field(60, gt=0)
    is_active: bool = True


class ServiceUpdate(BaseModel):
    """Schema for updating a service.

    All fields are optional; only provided values are sent.
    """

    name: Optional[str] = None
    description: Optional[str] = None
    price: Optional[float] = Field(None, ge=0)
    category: Optional[str] = None
    icon: Optional[str] = None
    is_active: Optional[bool] = None
    estimated_duration: Optional[int] = Field(None, gt=0)
    features: Optional[List[str]] = None


class Service(BackendRecord, ServiceBase):
    """Schema for a service read from the backend."""

    is_active: bool = True
    created_at: Optional[str] = None
