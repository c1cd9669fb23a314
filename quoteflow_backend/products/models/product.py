# products/models/product.py

import uuid
from decimal import Decimal

from django.conf import settings
from django.db import models


class ProductQuerySet(models.QuerySet):
    def owned_by(self, merchant):
        """
        Tenant scope. Every merchant-facing lookup goes through here, so a
        product owned by someone else is indistinguishable from a missing one.
        """
        merchant_id = getattr(merchant, "pk", merchant)
        return self.filter(merchant_id=merchant_id)


class Product(models.Model):
    """
    A catalog entry listed on a merchant's storefront.

    PRICING MODEL (IMPORTANT):
    - price is per unit
    - shipping_charges and gst_amount are flat per line, not per unit
    - quotes read these LIVE from the product row (no snapshot)
    """

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)

    merchant = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="products",
    )

    name = models.CharField(max_length=255, db_index=True)
    description = models.TextField(blank=True, default="")

    # Opaque storage name (default_storage); resolved to a URL on output.
    image = models.CharField(max_length=255, blank=True, default="")

    price = models.DecimalField(max_digits=12, decimal_places=2)
    min_quantity = models.PositiveIntegerField(default=1)
    shipping_charges = models.DecimalField(
        max_digits=12, decimal_places=2, default=Decimal("0.00")
    )
    gst_amount = models.DecimalField(
        max_digits=12, decimal_places=2, default=Decimal("0.00")
    )
    delivery_time = models.CharField(max_length=255, blank=True, default="")

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    objects = ProductQuerySet.as_manager()

    class Meta:
        ordering = ["-created_at"]
        indexes = [
            models.Index(fields=["merchant", "-created_at"], name="products_merchant_recent_idx"),
        ]

    def __str__(self):
        return f"{self.name} ({self.price})"
