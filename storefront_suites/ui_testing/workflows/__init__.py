"""
Multi-page workflows built on the page objects.

    cart_convergence - drive the cart to empty by first-item removal
    session          - authenticated session setup and cart preconditions

Import the submodules directly; page objects depend on cart_convergence.
"""
