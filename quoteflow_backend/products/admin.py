# products/admin.py
"""
=====================================================
PATH: products/admin.py
=====================================================

Read-mostly catalog view for support staff.
Merchants manage their own products through the API.
"""

from django.contrib import admin

from products.models import Product


@admin.register(Product)
class ProductAdmin(admin.ModelAdmin):
    list_display = (
        "name",
        "merchant",
        "price",
        "min_quantity",
        "shipping_charges",
        "gst_amount",
        "created_at",
    )
    list_filter = ("created_at",)
    search_fields = ("name", "merchant__email", "merchant__store_name")
    ordering = ("-created_at",)
    readonly_fields = ("created_at", "updated_at")
    list_select_related = ("merchant",)
