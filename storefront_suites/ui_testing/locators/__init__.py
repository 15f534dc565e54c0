"""
================================================================================
Locator Sets
================================================================================

Declarative selector definitions, one module per page family.

Each key may declare a "short" (CSS) and a "structural" (XPath) variant;
the registry picks the one matching `ui.selector_dialect`. Keys used on
every page live in COMMON_LOCATORS and are injected into each page's
registry.

================================================================================
"""

from .cart_locators import CART_LOCATORS
from .checkout_locators import CHECKOUT_LOCATORS
from .common_locators import COMMON_LOCATORS
from .home_locators import HOME_LOCATORS
from .login_locators import LOGIN_LOCATORS
from .product_detail_locators import PRODUCT_DETAIL_LOCATORS

__all__ = [
    "CART_LOCATORS",
    "CHECKOUT_LOCATORS",
    "COMMON_LOCATORS",
    "HOME_LOCATORS",
    "LOGIN_LOCATORS",
    "PRODUCT_DETAIL_LOCATORS",
]
