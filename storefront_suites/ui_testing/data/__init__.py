"""Fixture data for the storefront scenarios."""

from .checkout_data import ANNA_VN, CHECKOUT_DATA, JOHN_DOE
from .models import (
    CartLineItem,
    Category,
    CheckoutInfo,
    Credentials,
    OrderConfirmation,
    ProductInfo,
)
from .products import PRODUCTS
from .users import load_users, valid_user

__all__ = [
    "ANNA_VN",
    "CHECKOUT_DATA",
    "JOHN_DOE",
    "CartLineItem",
    "Category",
    "CheckoutInfo",
    "Credentials",
    "OrderConfirmation",
    "ProductInfo",
    "PRODUCTS",
    "load_users",
    "valid_user",
]
