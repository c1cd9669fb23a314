# quotes/urls.py

"""
QUOTES URLS

Mounted at /api/quote-requests/:
    /api/quote-requests/        POST (public), GET (merchant)
    /api/quote-requests/<id>/   GET, PUT, PATCH (merchant)
"""

from django.urls import include, path
from rest_framework.routers import SimpleRouter

from quotes.views import QuoteRequestViewSet

router = SimpleRouter()
router.register(r"", QuoteRequestViewSet, basename="quote-requests")

urlpatterns = [
    path("", include(router.urls)),
]
