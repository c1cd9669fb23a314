# storefront/services/storefront.py

"""
STOREFRONT SERVICE

Public store slug rules:
- allowed characters: letters, digits, dash, underscore
- stored and compared lower-cased
- unique across merchants (DB constraint; the pre-check is advisory only)
"""

from __future__ import annotations

import logging
import re

from django.contrib.auth import get_user_model
from django.db import IntegrityError, transaction

from common.exceptions import Conflict, NotFound, ValidationError
from products.models import Product

logger = logging.getLogger(__name__)

STORE_NAME_RE = re.compile(r"^[A-Za-z0-9_-]+$")
STORE_NAME_MAX_LENGTH = 64

# Fixed routes under /api/stores/ that would shadow a store page.
RESERVED_STORE_NAMES = frozenset({"check-availability", "update-name"})


def normalize_store_name(value) -> str:
    return (value or "").strip().lower()


def is_valid_store_name(value) -> bool:
    return (
        isinstance(value, str)
        and len(value) <= STORE_NAME_MAX_LENGTH
        and bool(STORE_NAME_RE.fullmatch(value))
    )


def resolve_store(slug):
    """
    Return (merchant, products) for a public store slug, products newest first.
    """
    Merchant = get_user_model()
    store_name = normalize_store_name(slug)

    merchant = None
    if store_name:
        merchant = Merchant.objects.filter(store_name=store_name, is_active=True).first()
    if merchant is None:
        raise NotFound("Store not found")

    products = Product.objects.owned_by(merchant).order_by("-created_at")
    return merchant, products


def check_store_name_available(candidate) -> bool:
    candidate = (candidate or "").strip() if isinstance(candidate, str) else candidate
    if not is_valid_store_name(candidate):
        return False
    if candidate.lower() in RESERVED_STORE_NAMES:
        return False

    Merchant = get_user_model()
    return not Merchant.objects.filter(store_name=candidate.lower()).exists()


def claim_store_name(merchant, candidate):
    candidate = (candidate or "").strip() if isinstance(candidate, str) else candidate
    if not candidate:
        raise ValidationError("Store name is required", field="store_name")
    if not is_valid_store_name(candidate):
        raise ValidationError(
            "Store name can only contain letters, numbers, dashes, and underscores",
            field="store_name",
        )

    store_name = candidate.lower()
    if store_name in RESERVED_STORE_NAMES:
        raise ValidationError("This store name is reserved", field="store_name")

    Merchant = get_user_model()

    if Merchant.objects.filter(store_name=store_name).exclude(pk=merchant.pk).exists():
        raise Conflict("Store name is already taken", field="store_name")

    previous = merchant.store_name
    merchant.store_name = store_name
    try:
        with transaction.atomic():
            merchant.save(update_fields=["store_name", "updated_at"])
    except IntegrityError:
        merchant.store_name = previous
        # Lost a concurrent claim on the unique constraint.
        raise Conflict("Store name is already taken", field="store_name")

    logger.info("Store name claimed: %s (merchant=%s)", store_name, merchant.pk)
    return merchant
