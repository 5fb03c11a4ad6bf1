"""
Search, filter, sort and formatting helpers for catalog lists.

Used both by the admin screens and by the public ``/servicios`` and
``/productos`` pages.  All functions return new lists and never mutate
their input.
"""

from __future__ import annotations

import unicodedata
from typing import Callable, Dict, Iterable, List, Optional, Tuple, TypeVar

T = TypeVar("T")

ALL_CATEGORIES = "todos"

SORT_NAME = "name"
SORT_PRICE_ASC = "price-asc"
SORT_PRICE_DESC = "price-desc"
SORT_CATEGORY = "category"
SORT_STOCK = "stock"
SORT_DURATION = "duration"

# Product price ranges, in pesos.
PRICE_RANGES: Dict[str, Tuple[Optional[float], Optional[float]]] = {
    "0-100": (None, 100_000),
    "100-500": (100_000, 500_000),
    "500-1000": (500_000, 1_000_000),
    "1000+": (1_000_000, None),
}


def collation_key(text: Optional[str]) -> Tuple[str, str]:
    """Sort key comparing text the way a Spanish reader expects.

    Accents and case are ignored first; the raw value breaks ties so the
    ordering is total.
    """
    raw = text or ""
    folded = unicodedata.normalize("NFKD", raw)
    folded = "".join(ch for ch in folded if not unicodedata.combining(ch))
    return folded.casefold(), raw


def matches_search(item: object, term: str, fields: Iterable[str] = ("name", "description", "category")) -> bool:
    needle = term.strip().lower()
    if not needle:
        return True
    return any(needle in str(getattr(item, f, "") or "").lower() for f in fields)


def filter_items(items: Iterable[T], term: str) -> List[T]:
    """Case-insensitive substring match over name, description and category."""
    return [item for item in items if matches_search(item, term)]


_SORT_KEYS: Dict[str, Tuple[Callable[[object], object], bool]] = {
    SORT_NAME: (lambda i: collation_key(getattr(i, "name", "")), False),
    SORT_PRICE_ASC: (lambda i: getattr(i, "price", 0), False),
    SORT_PRICE_DESC: (lambda i: getattr(i, "price", 0), True),
    SORT_CATEGORY: (lambda i: collation_key(getattr(i, "category", "")), False),
    SORT_STOCK: (lambda i: getattr(i, "stock", 0), True),
    SORT_DURATION: (lambda i: getattr(i, "estimated_duration", 0), False),
}

SORT_KEYS = tuple(_SORT_KEYS)


def sort_items(items: Iterable[T], key: str = SORT_NAME) -> List[T]:
    """Stable sort by one of :data:`SORT_KEYS`; unknown keys keep the order.

    ``stock`` sorts highest first, like ``price-desc``.
    """
    items = list(items)
    if key not in _SORT_KEYS:
        return items
    func, reverse = _SORT_KEYS[key]
    # reverse=True keeps equal elements in their original order
    return sorted(items, key=func, reverse=reverse)


def in_price_range(price: float, price_range: str) -> bool:
    bounds = PRICE_RANGES.get(price_range)
    if bounds is None:
        return True
    low, high = bounds
    if low is not None and price <= low:
        return False
    if high is not None and price > high:
        return False
    return True


def filter_catalog(
    items: Iterable[T],
    *,
    search: str = "",
    category: str = ALL_CATEGORIES,
    price_range: str = ALL_CATEGORIES,
    sort_by: str = SORT_NAME,
) -> List[T]:
    """Public catalog view: search name and description, category, price."""
    selected = [
        item
        for item in items
        if matches_search(item, search, fields=("name", "description"))
        and (category == ALL_CATEGORIES or getattr(item, "category", None) == category)
        and in_price_range(getattr(item, "price", 0), price_range)
    ]
    return sort_items(selected, sort_by)


def format_price(price: float) -> str:
    """Colombian pesos without decimals, e.g. ``$ 1.250.000``."""
    whole = f"{round(price):,}".replace(",", ".")
    return f"$ {whole}"


def format_duration(minutes: int) -> str:
    hours, rest = divmod(int(minutes), 60)
    if not hours:
        return f"{rest}m"
    if not rest:
        return f"{hours}h"
    return f"{hours}h {rest}m"


def status_label(is_active: bool) -> str:
    return "Activo" if is_active else "Inactivo"
