# quotes/services/quote_workflow.py

"""
QUOTE WORKFLOW (APPLICATION SERVICE)

Operations:
- submit_quote_request   (public, atomic multi-row insert)
- list_quote_requests    (merchant-scoped, optional status filter)
- get_quote_request_detail (items joined to LIVE product pricing)
- update_status          (idempotent overwrite, gated by can_transition)

Atomicity law:
- The request row and all of its items are written in ONE transaction.
- One bad product id (unknown, or owned by another merchant) rolls back
  everything and surfaces as a single ValidationError.
- A request that would end up with zero items is never committed.
"""

from __future__ import annotations

import logging
import uuid
from dataclasses import dataclass, field
from decimal import Decimal

from django.contrib.auth import get_user_model
from django.db import transaction

from common.exceptions import NotFound, ValidationError
from products.models import Product
from quotes.models import QuoteRequest, QuoteRequestItem
from quotes.services.status import (
    INITIAL_STATUS,
    can_transition,
    parse_status_filter,
    require_status,
)

logger = logging.getLogger(__name__)

# PositiveIntegerField upper bound.
MAX_QUANTITY = 2147483647


@dataclass
class QuoteLine:
    item: QuoteRequestItem
    subtotal: Decimal | None


@dataclass
class QuoteDetail:
    quote_request: QuoteRequest
    lines: list[QuoteLine] = field(default_factory=list)
    total: Decimal = Decimal("0.00")


# -----------------------------
# Helpers
# -----------------------------


def _as_uuid(value):
    try:
        return uuid.UUID(str(value))
    except (TypeError, ValueError, AttributeError):
        return None


def _to_int_qty(value) -> int:
    if isinstance(value, bool):
        raise ValidationError("quantity must be a whole number", field="items")
    if value is None or value == "":
        return 0
    if isinstance(value, int):
        qty = value
    else:
        try:
            qty = int(str(value).strip())
        except ValueError:
            raise ValidationError("quantity must be a whole number", field="items")

    if qty > MAX_QUANTITY:
        raise ValidationError(f"quantity cannot exceed {MAX_QUANTITY}", field="items")
    return qty


def line_subtotal(product: Product | None, quantity: int) -> Decimal | None:
    """
    price * quantity + shipping_charges + gst_amount.
    Shipping and GST are flat per line. None when the product is gone.
    """
    if product is None:
        return None
    return (
        product.price * quantity
        + product.shipping_charges
        + product.gst_amount
    )


def _owned_request(merchant, request_id) -> QuoteRequest:
    pk = _as_uuid(request_id)
    quote_request = None
    if pk is not None:
        quote_request = QuoteRequest.objects.owned_by(merchant).filter(pk=pk).first()

    if quote_request is None:
        raise NotFound("Quote request not found")
    return quote_request


# -----------------------------
# Operations
# -----------------------------


def submit_quote_request(merchant_id, customer, items) -> QuoteRequest:
    """
    Create a pending quote request with its items for merchant_id.

    customer: {"name", "email", "phone"?, "message"?}
    items:    [{"product_id", "quantity"}, ...]
    """
    Merchant = get_user_model()

    pk = _as_uuid(merchant_id)
    merchant = Merchant.objects.filter(pk=pk, is_active=True).first() if pk else None
    if merchant is None:
        raise NotFound("Merchant not found")

    customer = customer or {}
    name = (customer.get("name") or "").strip()
    email = (customer.get("email") or "").strip()
    if not name:
        raise ValidationError(
            "Customer name and customer email are required", field="customer_name"
        )
    if not email:
        raise ValidationError(
            "Customer name and customer email are required", field="customer_email"
        )

    phone = (customer.get("phone") or "").strip()
    for field_name, value in (
        ("customer_name", name),
        ("customer_email", email),
        ("customer_phone", phone),
    ):
        max_length = QuoteRequest._meta.get_field(field_name).max_length
        if len(value) > max_length:
            raise ValidationError(
                f"{field_name} cannot exceed {max_length} characters", field=field_name
            )

    if not items or not isinstance(items, (list, tuple)):
        raise ValidationError("At least one product is required", field="items")

    with transaction.atomic():
        quote_request = QuoteRequest.objects.create(
            merchant=merchant,
            customer_name=name,
            customer_email=email,
            customer_phone=phone,
            message=(customer.get("message") or "").strip(),
            status=INITIAL_STATUS,
        )

        owned_products = Product.objects.owned_by(merchant)
        inserted = 0

        for entry in items:
            if not isinstance(entry, dict):
                raise ValidationError("Each item must be an object", field="items")
            raw_product_id = entry.get("product_id")
            quantity = _to_int_qty(entry.get("quantity"))

            if not raw_product_id or quantity <= 0:
                continue

            product_pk = _as_uuid(raw_product_id)
            product = owned_products.filter(pk=product_pk).first() if product_pk else None
            if product is None:
                # Raising inside atomic() rolls back the request row too.
                raise ValidationError(f"Invalid product ID: {raw_product_id}", field="items")

            QuoteRequestItem.objects.create(
                quote_request=quote_request,
                product=product,
                product_name=product.name,
                quantity=quantity,
            )
            inserted += 1

        if inserted == 0:
            raise ValidationError("At least one product is required", field="items")

    logger.info(
        "Quote request submitted: %s (merchant=%s, items=%s)",
        quote_request.id,
        merchant.pk,
        inserted,
    )
    return quote_request


def list_quote_requests(merchant, status=None):
    status = parse_status_filter(status)

    qs = QuoteRequest.objects.owned_by(merchant)
    if status:
        qs = qs.filter(status=status)
    return qs.order_by("-created_at")


def get_quote_request_detail(merchant, request_id) -> QuoteDetail:
    quote_request = _owned_request(merchant, request_id)

    detail = QuoteDetail(quote_request=quote_request)
    total = Decimal("0.00")

    for item in quote_request.items.select_related("product").order_by("created_at"):
        subtotal = line_subtotal(item.product, item.quantity)
        if subtotal is not None:
            total += subtotal
        detail.lines.append(QuoteLine(item=item, subtotal=subtotal))

    detail.total = total
    return detail


def update_status(merchant, request_id, new_status) -> QuoteRequest:
    new_status = require_status(new_status)
    quote_request = _owned_request(merchant, request_id)

    if not can_transition(quote_request.status, new_status):
        raise ValidationError(
            f"Cannot move from {quote_request.status} to {new_status}", field="status"
        )

    quote_request.status = new_status
    quote_request.save(update_fields=["status", "updated_at"])

    logger.info("Quote request %s -> %s", quote_request.id, new_status)
    return quote_request
