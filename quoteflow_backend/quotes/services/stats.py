# quotes/services/stats.py

"""
DASHBOARD STATS

Counts for the merchant dashboard header. All figures are scoped to the
merchant; status counts come from one grouped query.
"""

from __future__ import annotations

from django.db.models import Count

from products.models import Product
from quotes.models import QuoteRequest


def dashboard_stats(merchant) -> dict:
    requests = QuoteRequest.objects.owned_by(merchant)

    by_status = {
        row["status"]: row["n"]
        for row in requests.order_by().values("status").annotate(n=Count("id"))
    }

    return {
        "total_products": Product.objects.owned_by(merchant).count(),
        "total_requests": sum(by_status.values()),
        "pending_requests": by_status.get(QuoteRequest.STATUS_PENDING, 0),
        "processed_requests": by_status.get(QuoteRequest.STATUS_PROCESSED, 0),
        "rejected_requests": by_status.get(QuoteRequest.STATUS_REJECTED, 0),
    }
