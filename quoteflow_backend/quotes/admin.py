# quotes/admin.py

"""
QUOTES ADMIN

Support view of submitted quote requests. Items are shown inline and are
read-only: they are only ever written by the public submit flow.
"""

from django.contrib import admin

from quotes.models import QuoteRequest, QuoteRequestItem


class QuoteRequestItemInline(admin.TabularInline):
    model = QuoteRequestItem
    extra = 0
    can_delete = False
    fields = ("product", "product_name", "quantity", "created_at")
    readonly_fields = fields

    def has_add_permission(self, request, obj=None):
        return False


@admin.register(QuoteRequest)
class QuoteRequestAdmin(admin.ModelAdmin):
    list_display = (
        "customer_name",
        "customer_email",
        "merchant",
        "status",
        "created_at",
    )
    list_filter = ("status", "created_at")
    search_fields = ("customer_name", "customer_email", "merchant__email")
    ordering = ("-created_at",)
    readonly_fields = ("created_at", "updated_at")
    list_select_related = ("merchant",)

    inlines = [QuoteRequestItemInline]
