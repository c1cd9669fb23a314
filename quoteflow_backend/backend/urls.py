# backend/urls.py
"""
PROJECT URLS

All API routes live under /api/

Public (AllowAny) endpoints used by the storefront:
- POST /api/quote-requests/
- GET  /api/stores/<store_name>/  (+ alias /api/public/stores/<store_name>/)
- GET  /api/stores/check-availability/

Operational maturity:
- /api/health/ (AllowAny) checks DB connectivity.

Security hardening:
- Django admin path is configurable via ADMIN_PATH.
"""

from __future__ import annotations

from django.conf import settings
from django.conf.urls.static import static
from django.contrib import admin
from django.db import connections
from django.db.utils import OperationalError
from django.urls import include, path
from django.views.generic import RedirectView
from drf_spectacular.utils import extend_schema
from drf_spectacular.views import SpectacularAPIView, SpectacularSwaggerView
from rest_framework.decorators import (
    api_view,
    authentication_classes,
    permission_classes,
)
from rest_framework.permissions import AllowAny
from rest_framework.response import Response


# ------------------ API ROOT (PUBLIC) ------------------
@extend_schema(
    responses={
        200: {
            "type": "object",
            "properties": {
                "message": {"type": "string"},
                "auth": {"type": "object"},
                "docs": {"type": "object"},
                "modules": {"type": "object"},
            },
        }
    },
)
@api_view(["GET"])
@authentication_classes([])
@permission_classes([AllowAny])
def api_root(request):
    return Response(
        {
            "message": "QuoteFlow Backend API is running",
            "auth": {
                "signup": "/api/auth/signup/",
                "login": "/api/auth/login/",
                "me": "/api/auth/me/",
            },
            "docs": {
                "swagger": "/api/docs/",
                "schema": "/api/schema/",
            },
            "modules": {
                "products": "/api/products/",
                "quote_requests": "/api/quote-requests/",
                "dashboard": "/api/dashboard/stats/",
                "stores": "/api/stores/",
                "public": "/api/public/stores/",
            },
        }
    )


# ------------------ HEALTH CHECK (PUBLIC) ------------------
@extend_schema(
    responses={
        200: {
            "type": "object",
            "properties": {
                "status": {"type": "string"},
                "db": {"type": "string"},
            },
        },
        503: {
            "type": "object",
            "properties": {
                "status": {"type": "string"},
                "db": {"type": "string"},
                "error": {"type": "string"},
            },
        },
    },
)
@api_view(["GET"])
@authentication_classes([])
@permission_classes([AllowAny])
def health_check(request):
    """
    Minimal operational endpoint:
    - Confirms app is responding
    - Confirms DB connection + simple query works
    """
    try:
        with connections["default"].cursor() as cursor:
            cursor.execute("SELECT 1;")
            cursor.fetchone()
    except OperationalError as e:
        return Response(
            {"status": "degraded", "db": "down", "error": str(e)}, status=503
        )
    return Response({"status": "ok", "db": "ok"})


# ------------------ ADMIN PATH (HARDENED) ------------------
# In production set ADMIN_PATH to something non-obvious (keep the trailing slash).
ADMIN_PATH = getattr(settings, "ADMIN_PATH", "admin/")
if not ADMIN_PATH.endswith("/"):
    ADMIN_PATH = f"{ADMIN_PATH}/"


# ------------------ API ROUTES (ALL UNDER /api/) ------------------
api_urlpatterns = [
    # Health check / root
    path("", api_root, name="api-root"),
    path("health/", health_check, name="health-check"),
    # OpenAPI / Swagger
    path("schema/", SpectacularAPIView.as_view(), name="schema"),
    path("docs/", SpectacularSwaggerView.as_view(url_name="schema"), name="swagger-ui"),
    # Merchant auth
    path("auth/", include("merchants.urls")),
    # Merchant-scoped modules
    path("products/", include("products.urls")),
    path("quote-requests/", include("quotes.urls")),
    path("dashboard/", include("quotes.dashboard_urls")),
    # Storefront (mixed public + merchant)
    path("stores/", include("storefront.urls")),
    # PUBLIC ONLINE STORE (AllowAny)
    path("public/", include("storefront.public_urls")),
]

urlpatterns = [
    path(ADMIN_PATH, admin.site.urls),
    # Root convenience: visiting / takes you to Swagger docs
    path("", RedirectView.as_view(url="/api/docs/", permanent=False), name="root"),
    path("api/", include(api_urlpatterns)),
]

# Product images (local FileSystemStorage). Production serves MEDIA_ROOT from the web tier.
if settings.DEBUG:
    urlpatterns += static(settings.MEDIA_URL, document_root=settings.MEDIA_ROOT)
