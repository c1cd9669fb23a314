# quotes/serializers/__init__.py

from .quote_request import (
    DashboardStatsSerializer,
    QuoteItemInputSerializer,
    QuoteLineSerializer,
    QuoteRequestDetailSerializer,
    QuoteRequestSerializer,
    QuoteStatusUpdateSerializer,
    QuoteSubmitSerializer,
)

__all__ = [
    "QuoteItemInputSerializer",
    "QuoteSubmitSerializer",
    "QuoteStatusUpdateSerializer",
    "QuoteRequestSerializer",
    "QuoteLineSerializer",
    "QuoteRequestDetailSerializer",
    "DashboardStatsSerializer",
]
