# products/serializers/__init__.py

from .product import ProductInputSerializer, ProductSerializer

__all__ = [
    "ProductSerializer",
    "ProductInputSerializer",
]
