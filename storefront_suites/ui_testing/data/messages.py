"""Texts rendered by the storefront that scenarios verify."""

PRODUCT_ADDED = "Product added"
CHECKOUT_SUCCESS = "Thank you for your purchase!"
WELCOME_PREFIX = "Welcome"
