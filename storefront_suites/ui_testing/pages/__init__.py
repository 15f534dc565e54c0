"""
================================================================================
Page Objects
================================================================================

Page Object Model implementations for the storefront pages.

Each page class encapsulates:
    - Its locator set (the navbar set is injected by StorefrontPage)
    - Business-level actions followed by the wait proving the next state
    - Typed reads of rendered content

Author: Automation Team
License: MIT
================================================================================
"""

from .cart_page import CartPage
from .checkout_page import CheckoutPage
from .home_page import HomePage
from .login_page import LoginPage
from .product_detail_page import ProductDetailPage
from .storefront_page import StorefrontPage

__all__ = [
    "CartPage",
    "CheckoutPage",
    "HomePage",
    "LoginPage",
    "ProductDetailPage",
    "StorefrontPage",
]
