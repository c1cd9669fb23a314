"""
PATH: products/models/__init__.py

Products models export surface.
"""

from .product import Product, ProductQuerySet

__all__ = [
    "Product",
    "ProductQuerySet",
]
