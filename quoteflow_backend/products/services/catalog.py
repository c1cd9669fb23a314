# products/services/catalog.py

"""
CATALOG SERVICE (merchant-scoped product CRUD)

Rules:
- Every lookup goes through Product.objects.owned_by(merchant):
  a foreign id is NotFound, exactly like a missing one.
- name + price are required on create and full update; partial updates
  validate only the fields they carry.
- price / shipping_charges / gst_amount: finite decimals >= 0
- min_quantity: whole number >= 1
- Nothing is written when validation fails.
- Replaced / deleted images are released best-effort AFTER the row change.
"""

from __future__ import annotations

import logging
import uuid
from decimal import Decimal, InvalidOperation, ROUND_HALF_UP

from django.db import transaction

from common.exceptions import NotFound, ValidationError
from products.models import Product
from products.services.images import release_image, store_image

logger = logging.getLogger(__name__)

TWOPLACES = Decimal("0.01")
MAX_MONEY = Decimal("9999999999.99")
# PositiveIntegerField upper bound.
MAX_QUANTITY = 2147483647

MONEY_FIELDS = ("price", "shipping_charges", "gst_amount")
TEXT_FIELDS = ("name", "description", "delivery_time")

FIELD_LABELS = {
    "price": "price",
    "shipping_charges": "shipping charges",
    "gst_amount": "GST amount",
    "min_quantity": "minimum quantity",
}


def _is_blank(value) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def _parse_money(value, field: str) -> Decimal:
    if isinstance(value, bool):
        raise ValidationError(f"Invalid {FIELD_LABELS[field]}", field=field)

    try:
        amount = Decimal(str(value).strip())
    except (InvalidOperation, ValueError):
        raise ValidationError(f"Invalid {FIELD_LABELS[field]}", field=field)

    if not amount.is_finite() or amount < 0 or amount > MAX_MONEY:
        raise ValidationError(f"Invalid {FIELD_LABELS[field]}", field=field)

    return amount.quantize(TWOPLACES, rounding=ROUND_HALF_UP)


def _parse_min_quantity(value) -> int:
    if isinstance(value, bool):
        raise ValidationError("Invalid minimum quantity", field="min_quantity")

    try:
        qty = int(str(value).strip())
    except (TypeError, ValueError):
        raise ValidationError("Invalid minimum quantity", field="min_quantity")

    if qty < 1 or qty > MAX_QUANTITY:
        raise ValidationError("Invalid minimum quantity", field="min_quantity")
    return qty


def _clean_fields(fields, *, partial: bool) -> dict:
    """
    Turn raw request fields into model values.

    Full mode: name + price required, omitted optionals fall back to defaults.
    Partial mode: only supplied keys are returned.
    """
    fields = fields or {}
    cleaned = {}

    if not partial:
        if _is_blank(fields.get("name")):
            raise ValidationError("Name and price are required", field="name")
        if _is_blank(fields.get("price")):
            raise ValidationError("Name and price are required", field="price")

    for key in TEXT_FIELDS:
        if key not in fields:
            if not partial:
                cleaned[key] = ""
            continue
        value = fields.get(key)
        value = "" if value is None else str(value).strip()

        max_length = Product._meta.get_field(key).max_length
        if max_length is not None and len(value) > max_length:
            raise ValidationError(
                f"{key} cannot exceed {max_length} characters", field=key
            )
        cleaned[key] = value

    if partial and "name" in cleaned and not cleaned["name"]:
        raise ValidationError("Name cannot be empty", field="name")

    for key in MONEY_FIELDS:
        if key not in fields:
            if not partial and key != "price":
                cleaned[key] = Decimal("0.00")
            continue
        value = fields.get(key)
        if _is_blank(value):
            if key == "price":
                raise ValidationError("Name and price are required", field="price")
            cleaned[key] = Decimal("0.00")
            continue
        cleaned[key] = _parse_money(value, key)

    value = fields.get("min_quantity")
    if "min_quantity" in fields and not _is_blank(value):
        cleaned["min_quantity"] = _parse_min_quantity(value)
    elif not partial:
        cleaned["min_quantity"] = 1

    return cleaned


def _owned_product(merchant, product_id) -> Product:
    try:
        pk = uuid.UUID(str(product_id))
    except ValueError:
        raise NotFound("Product not found")

    product = Product.objects.owned_by(merchant).filter(pk=pk).first()
    if product is None:
        raise NotFound("Product not found")
    return product


def list_products(merchant):
    return Product.objects.owned_by(merchant).order_by("-created_at")


def get_product(merchant, product_id) -> Product:
    return _owned_product(merchant, product_id)


def create_product(merchant, fields, image=None) -> Product:
    values = _clean_fields(fields, partial=False)

    image_ref = store_image(image) if image is not None else ""

    try:
        product = Product.objects.create(merchant=merchant, image=image_ref, **values)
    except Exception:
        release_image(image_ref)
        raise

    logger.info("Product created: %s (merchant=%s)", product.id, merchant.pk)
    return product


def update_product(merchant, product_id, fields, image=None, *, partial=False) -> Product:
    product = _owned_product(merchant, product_id)
    values = _clean_fields(fields, partial=partial)

    old_image = product.image
    new_image = store_image(image) if image is not None else None

    for key, value in values.items():
        setattr(product, key, value)
    if new_image is not None:
        product.image = new_image

    try:
        with transaction.atomic():
            product.save()
    except Exception:
        release_image(new_image)
        raise

    if new_image is not None and old_image and old_image != new_image:
        release_image(old_image)

    logger.info("Product updated: %s (merchant=%s)", product.id, merchant.pk)
    return product


def delete_product(merchant, product_id) -> None:
    product = _owned_product(merchant, product_id)
    image_ref = product.image
    pk = product.pk

    product.delete()
    release_image(image_ref)

    logger.info("Product deleted: %s (merchant=%s)", pk, merchant.pk)
