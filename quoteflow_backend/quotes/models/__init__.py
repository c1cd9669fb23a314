"""
PATH: quotes/models/__init__.py

Quote request models export surface.
"""

from .quote_request import QuoteRequest, QuoteRequestQuerySet
from .quote_request_item import QuoteRequestItem

__all__ = [
    "QuoteRequest",
    "QuoteRequestQuerySet",
    "QuoteRequestItem",
]
