"""
================================================================================
Fixture Records
================================================================================

Immutable typed inputs consumed by page objects and workflows.

================================================================================
"""

from __future__ import annotations

from dataclasses import dataclass, fields
from enum import Enum
from typing import List, Optional


class Category(str, Enum):
    """Storefront product categories (values are the visible labels)."""
    PHONES = "Phones"
    LAPTOPS = "Laptops"
    MONITORS = "Monitors"


@dataclass(frozen=True)
class Credentials:
    username: str
    password: str

    def __repr__(self) -> str:
        return f"Credentials(username={self.username!r}, password='***')"


@dataclass(frozen=True)
class ProductInfo:
    name: str
    category: Category
    price: float
    description: Optional[str] = None


@dataclass(frozen=True)
class CheckoutInfo:
    """Order form values. All fields are required by the order modal."""
    name: str
    country: str
    city: str
    credit_card: str
    month: str
    year: str

    def missing_fields(self) -> List[str]:
        """Names of fields that are empty or whitespace-only."""
        return [
            f.name for f in fields(self)
            if not str(getattr(self, f.name) or "").strip()
        ]


@dataclass(frozen=True)
class CartLineItem:
    """One row of the rendered cart table (observed, never stored)."""
    name: str
    price: float


@dataclass(frozen=True)
class OrderConfirmation:
    """Values read from the purchase confirmation dialog."""
    message: str
    order_id: str
    amount: int


__all__ = [
    "Category",
    "Credentials",
    "ProductInfo",
    "CheckoutInfo",
    "CartLineItem",
    "OrderConfirmation",
]
