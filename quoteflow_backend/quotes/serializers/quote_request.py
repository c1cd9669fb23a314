# quotes/serializers/quote_request.py

"""
QUOTE REQUEST SERIALIZERS

Input serializers check transport shape only (types, email format).
Business rules (merchant exists, product ownership, empty-after-filtering)
live in quotes.services.quote_workflow.
"""

from rest_framework import serializers

from products.serializers import ProductSerializer
from quotes.models import QuoteRequest
from quotes.services.quote_workflow import MAX_QUANTITY


# -----------------------------
# Input serializers
# -----------------------------


class QuoteItemInputSerializer(serializers.Serializer):
    product_id = serializers.CharField(required=False, allow_blank=True, allow_null=True)
    quantity = serializers.IntegerField(
        required=False, allow_null=True, max_value=MAX_QUANTITY
    )


class QuoteSubmitSerializer(serializers.Serializer):
    merchant_id = serializers.CharField()

    customer_name = serializers.CharField(
        required=False, allow_blank=True, default="", max_length=255
    )
    customer_email = serializers.EmailField(
        required=False, allow_blank=True, default="", max_length=254
    )
    customer_phone = serializers.CharField(
        required=False, allow_blank=True, default="", max_length=40
    )
    message = serializers.CharField(required=False, allow_blank=True, default="")

    items = QuoteItemInputSerializer(many=True, required=False, default=list)


class QuoteStatusUpdateSerializer(serializers.Serializer):
    status = serializers.CharField(required=False, allow_blank=True, default="")


# -----------------------------
# Output serializers
# -----------------------------


class QuoteRequestSerializer(serializers.ModelSerializer):
    merchant_id = serializers.UUIDField(read_only=True)

    class Meta:
        model = QuoteRequest
        fields = [
            "id",
            "merchant_id",
            "customer_name",
            "customer_email",
            "customer_phone",
            "message",
            "status",
            "created_at",
            "updated_at",
        ]
        read_only_fields = fields


class QuoteLineSerializer(serializers.Serializer):
    """
    One item joined to the LIVE product row.
    product + subtotal are null when the product has since been deleted.
    """

    id = serializers.UUIDField(source="item.id")
    product_id = serializers.UUIDField(source="item.product_id", allow_null=True)
    product_name = serializers.CharField(source="item.product_name")
    quantity = serializers.IntegerField(source="item.quantity")
    created_at = serializers.DateTimeField(source="item.created_at")
    product = serializers.SerializerMethodField()
    subtotal = serializers.DecimalField(max_digits=None, decimal_places=2, allow_null=True)

    def get_product(self, line) -> dict | None:
        product = line.item.product
        if product is None:
            return None
        return ProductSerializer(product, context=self.context).data


class QuoteRequestDetailSerializer(serializers.Serializer):
    request = QuoteRequestSerializer(source="quote_request")
    items = QuoteLineSerializer(source="lines", many=True)
    total = serializers.DecimalField(max_digits=None, decimal_places=2)


class DashboardStatsSerializer(serializers.Serializer):
    total_products = serializers.IntegerField()
    total_requests = serializers.IntegerField()
    pending_requests = serializers.IntegerField()
    processed_requests = serializers.IntegerField()
    rejected_requests = serializers.IntegerField()
