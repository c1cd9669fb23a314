# quotes/models/quote_request_item.py

import uuid

from django.db import models


class QuoteRequestItem(models.Model):
    """
    One requested product line.

    Pricing is NOT stored here: price / shipping / GST are read from the
    live product row. product_name is captured at submission so the line
    stays readable if the merchant later deletes the product (product -> NULL).
    """

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)

    quote_request = models.ForeignKey(
        "quotes.QuoteRequest",
        on_delete=models.CASCADE,
        related_name="items",
    )

    product = models.ForeignKey(
        "products.Product",
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="quote_items",
    )
    product_name = models.CharField(max_length=255, blank=True, default="")

    quantity = models.PositiveIntegerField()

    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ["created_at"]

    def __str__(self):
        return f"{self.product_name or self.product_id} x {self.quantity}"
