"""Pydantic models for the minimal contact (lead) form."""

from typing import Optional

from pydantic import BaseModel, Field


class ContactRequest(BaseModel):
    name: str = Field(..., min_length=1, examples=["María Pérez"])
    phone: str = Field(..., min_length=1, examples=["993 208 1792"])
    message: Optional[str] = None


class ContactResponse(BaseModel):
    success: bool = True
    message: Optional[str] = None
