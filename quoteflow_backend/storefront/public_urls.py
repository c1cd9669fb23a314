# storefront/public_urls.py

from django.urls import path

from storefront.views import StoreDetailView

urlpatterns = [
    path("stores/<str:store_name>/", StoreDetailView.as_view(), name="public-store-detail"),
]
