"""
Grocer shopping-list package.

The package tracks grocery, wishlist and cart items, turns the cart into
immutable orders, and persists everything to a local key-value store.
"""

__all__ = ["__version__"]

__version__ = "0.1.0"
