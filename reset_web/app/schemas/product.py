"""
Pydantic models for catalog products.

Products differ from services by an optional image URL and a stock
count.  The stock count drives a derived status used by the catalog and
the admin list (see :func:`stock_status`).
"""

from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, Field

from .common import BackendRecord

LOW_STOCK_THRESHOLD = 5


class StockStatus(str, Enum):
    """Stock availability labels shown next to a product."""

    OUT_OF_STOCK = "Sin stock"
    LOW_STOCK = "Stock bajo"
    IN_STOCK = "En stock"


def stock_status(stock: int) -> StockStatus:
    """Map a stock count to its availability label.

    ``0`` is out of stock, ``1``–``4`` is low stock and anything from
    :data:`LOW_STOCK_THRESHOLD` upwards is in stock.
    """
    if stock <= 0:
        return StockStatus.OUT_OF_STOCK
    if stock < LOW_STOCK_THRESHOLD:
        return StockStatus.LOW_STOCK
    return StockStatus.IN_STOCK


class ProductBase(BaseModel):
    name: str = Field(..., examples=["Cámara IP 4K"])
    description: str = Field("", examples=["Cámara de seguridad con resolución 4K"])
    price: float = Field(0, ge=0, examples=[299])
    category: str = Field(..., examples=["seguridad"])
    icon: Optional[str] = Field(None, examples=["camera"])
    image: Optional[str] = Field(None, description="URL of the uploaded product image")
    stock: int = Field(0, ge=0, examples=[15])
    features: List[str] = Field(default_factory=list)


class ProductCreate(ProductBase):
    """Schema for creating a new product."""

    is_active: bool = True


class ProductUpdate(BaseModel):
    """Schema for updating a product; only provided values are sent."""

    name: Optional[str] = None
    description: Optional[str] = None
    price: Optional[float] = Field(None, ge=0)
    category: Optional[str] = None
    icon: Optional[str] = None
    image: Optional[str] = None
    is_active: Optional[bool] = None
    stock: Optional[int] = Field(None, ge=0)
    features: Optional[List[str]] = None


class Product(BackendRecord, ProductBase):
    """Schema for a product read from the backend."""

    is_active: bool = True
    created_at: Optional[str] = None

    @property
    def stock_status(self) -> StockStatus:
        return stock_status(self.stock)
