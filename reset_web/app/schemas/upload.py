"""Pydantic models for image uploads."""

from typing import Optional

from pydantic import BaseModel


class UploadResult(BaseModel):
    success: bool
    filename: str
    url: str
    size: int = 0


class UploadedImage(BaseModel):
    filename: str
    url: str
    size: int = 0
    created: Optional[float] = None
