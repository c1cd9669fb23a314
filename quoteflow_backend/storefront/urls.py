# storefront/urls.py

from django.urls import path

from storefront.views import (
    StoreDetailView,
    StoreNameAvailabilityView,
    StoreNameUpdateView,
)

# Fixed paths must come before the <store_name> catch-all.
urlpatterns = [
    path(
        "check-availability/",
        StoreNameAvailabilityView.as_view(),
        name="store-name-availability",
    ),
    path("update-name/", StoreNameUpdateView.as_view(), name="store-name-update"),
    path("<str:store_name>/", StoreDetailView.as_view(), name="store-detail"),
]
