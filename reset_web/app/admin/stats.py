"""Aggregate figures shown above the admin lists and on the dashboard.

Always computed from the full loaded list, never from the filtered view.
"""

from typing import List

from pydantic import BaseModel

from reset_web.app.schemas.product import Product, StockStatus
from reset_web.app.schemas.service import Service


class ServiceStats(BaseModel):
    total: int
    active: int
    inactive: int
    average_price: float
    categories: int


class ProductStats(BaseModel):
    total: int
    active: int
    inactive: int
    out_of_stock: int
    low_stock: int
    total_stock: int
    inventory_value: float
    average_price: float
    categories: int


class DashboardSummary(BaseModel):
    total_services: int
    total_products: int
    services: ServiceStats
    products: ProductStats


def _average(values: List[float]) -> float:
    return round(sum(values) / len(values), 2) if values else 0.0


def service_stats(services: List[Service]) -> ServiceStats:
    active = sum(1 for s in services if s.is_active)
    return ServiceStats(
        total=len(services),
        active=active,
        inactive=len(services) - active,
        average_price=_average([s.price for s in services]),
        categories=len({s.category for s in services}),
    )


def product_stats(products: List[Product]) -> ProductStats:
    active = sum(1 for p in products if p.is_active)
    return ProductStats(
        total=len(products),
        active=active,
        inactive=len(products) - active,
        out_of_stock=sum(1 for p in products if p.stock_status is StockStatus.OUT_OF_STOCK),
        low_stock=sum(1 for p in products if p.stock_status is StockStatus.LOW_STOCK),
        total_stock=sum(p.stock for p in products),
        inventory_value=sum(p.price * p.stock for p in products),
        average_price=_average([p.price for p in products]),
        categories=len({p.category for p in products}),
    )


def dashboard_summary(services: List[Service], products: List[Product]) -> DashboardSummary:
    return DashboardSummary(
        total_services=len(services),
        total_products=len(products),
        services=service_stats(services),
        products=product_stats(products),
    )
