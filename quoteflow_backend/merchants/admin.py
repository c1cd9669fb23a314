# merchants/admin.py

"""
MERCHANTS ADMIN REGISTRATION

Registers the Merchant account model in Django Admin:
- inspect accounts and claimed store names
- set is_staff / is_superuser for support staff
"""

from __future__ import annotations

from django.contrib import admin
from django.contrib.auth.admin import UserAdmin as DjangoUserAdmin

from merchants.models import Merchant


@admin.register(Merchant)
class MerchantAdmin(DjangoUserAdmin):
    ordering = ("email",)
    list_display = ("email", "name", "store_name", "is_staff", "is_active", "created_at")
    list_filter = ("is_staff", "is_active", "is_superuser")
    search_fields = ("email", "name", "store_name")
    readonly_fields = ("created_at", "updated_at", "last_login")

    fieldsets = (
        (None, {"fields": ("email", "password")}),
        ("Store", {"fields": ("name", "store_name")}),
        (
            "Permissions",
            {
                "fields": (
                    "is_active",
                    "is_staff",
                    "is_superuser",
                    "groups",
                    "user_permissions",
                )
            },
        ),
        ("Dates", {"fields": ("created_at", "updated_at", "last_login")}),
    )

    add_fieldsets = (
        (
            None,
            {
                "classes": ("wide",),
                "fields": (
                    "email",
                    "name",
                    "password1",
                    "password2",
                    "is_staff",
                    "is_active",
                ),
            },
        ),
    )
