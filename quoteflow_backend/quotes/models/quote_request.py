# quotes/models/quote_request.py

import uuid

from django.conf import settings
from django.db import models


class QuoteRequestQuerySet(models.QuerySet):
    def owned_by(self, merchant):
        merchant_id = getattr(merchant, "pk", merchant)
        return self.filter(merchant_id=merchant_id)


class QuoteRequest(models.Model):
    """
    An anonymous visitor's request for a price quote from one merchant.

    Key rules:
    - Created PENDING by the public submit endpoint, together with its items
      in one transaction (a request never exists without items)
    - The merchant moves it freely between pending / processed / rejected
    """

    STATUS_PENDING = "pending"
    STATUS_PROCESSED = "processed"
    STATUS_REJECTED = "rejected"

    STATUS_CHOICES = [
        (STATUS_PENDING, "Pending"),
        (STATUS_PROCESSED, "Processed"),
        (STATUS_REJECTED, "Rejected"),
    ]

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)

    merchant = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="quote_requests",
    )

    customer_name = models.CharField(max_length=255)
    customer_email = models.EmailField()
    customer_phone = models.CharField(max_length=40, blank=True, default="")
    message = models.TextField(blank=True, default="")

    status = models.CharField(
        max_length=16, choices=STATUS_CHOICES, default=STATUS_PENDING
    )

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    objects = QuoteRequestQuerySet.as_manager()

    class Meta:
        ordering = ["-created_at"]
        indexes = [
            models.Index(fields=["merchant", "-created_at"], name="quotes_merchant_recent_idx"),
            models.Index(fields=["merchant", "status"], name="quotes_merchant_status_idx"),
        ]

    def __str__(self):
        return f"{self.customer_name} <{self.customer_email}> | {self.status}"
