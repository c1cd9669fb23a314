# quotes/views/__init__.py

from .dashboard import DashboardStatsView
from .quote_request import PublicWriteThrottle, QuoteRequestViewSet

__all__ = [
    "QuoteRequestViewSet",
    "PublicWriteThrottle",
    "DashboardStatsView",
]
