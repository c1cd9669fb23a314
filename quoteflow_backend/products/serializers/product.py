# products/serializers/product.py

"""
PRODUCT SERIALIZERS

- ProductSerializer: canonical output for the merchant dashboard and the
  public storefront. image is resolved to a URL here; the row keeps only
  the storage name.
- ProductInputSerializer: documents the accepted request body (multipart or
  JSON). Field rules are enforced by products.services.catalog.
"""

from rest_framework import serializers

from products.models import Product
from products.services.images import image_url


class ProductSerializer(serializers.ModelSerializer):
    merchant_id = serializers.UUIDField(read_only=True)
    image_url = serializers.SerializerMethodField()

    class Meta:
        model = Product
        fields = [
            "id",
            "merchant_id",
            "name",
            "description",
            "image_url",
            "price",
            "min_quantity",
            "shipping_charges",
            "gst_amount",
            "delivery_time",
            "created_at",
            "updated_at",
        ]
        read_only_fields = fields

    def get_image_url(self, obj) -> str | None:
        return image_url(obj.image, request=self.context.get("request"))


class ProductInputSerializer(serializers.Serializer):
    name = serializers.CharField()
    description = serializers.CharField(required=False, allow_blank=True)
    price = serializers.DecimalField(max_digits=12, decimal_places=2)
    min_quantity = serializers.IntegerField(required=False, min_value=1)
    shipping_charges = serializers.DecimalField(
        max_digits=12, decimal_places=2, required=False
    )
    gst_amount = serializers.DecimalField(max_digits=12, decimal_places=2, required=False)
    delivery_time = serializers.CharField(required=False, allow_blank=True)
    image = serializers.FileField(required=False)
