# merchants/services/auth.py

"""
MERCHANT AUTH SERVICE

Operations:
- register(name, email, password)   -> (token, merchant)
- authenticate(email, password)     -> (token, merchant)
- issue_credential(merchant)        -> signed JWT (ACCESS_TOKEN_LIFETIME, 7 days by default)
- resolve_credential(token)         -> merchant id (UUID)

Rules:
- Email is trimmed + lower-cased before any comparison.
- Passwords are stored as Django salted hashes, never plaintext.
- Login failures use ONE generic message (no "unknown email" vs "bad password" leak).
"""

from __future__ import annotations

import logging
import uuid

from django.contrib.auth import authenticate as django_authenticate
from django.db import IntegrityError, transaction
from rest_framework_simplejwt.exceptions import TokenError
from rest_framework_simplejwt.settings import api_settings
from rest_framework_simplejwt.tokens import AccessToken

from common.exceptions import Conflict, Unauthorized, ValidationError
from merchants.models import Merchant, normalize_merchant_email

logger = logging.getLogger(__name__)

INVALID_LOGIN_MESSAGE = "Invalid email or password"


def issue_credential(merchant: Merchant) -> str:
    return str(AccessToken.for_user(merchant))


def register(*, name, email, password) -> tuple[str, Merchant]:
    name = (name or "").strip()
    email = normalize_merchant_email(email)
    password = password or ""

    if not name:
        raise ValidationError("Name is required", field="name")
    if not email:
        raise ValidationError("Email is required", field="email")
    if not password:
        raise ValidationError("Password is required", field="password")

    if Merchant.objects.filter(email=email).exists():
        raise Conflict("Email already in use", field="email")

    try:
        # Savepoint: a lost race on the unique email must not poison an outer transaction.
        with transaction.atomic():
            merchant = Merchant.objects.create_user(
                email=email,
                password=password,
                name=name,
            )
    except IntegrityError:
        raise Conflict("Email already in use", field="email")

    logger.info("Merchant registered: %s", merchant.id)
    return issue_credential(merchant), merchant


def authenticate(*, email, password, request=None) -> tuple[str, Merchant]:
    email = normalize_merchant_email(email)
    if not email or not password:
        raise Unauthorized(INVALID_LOGIN_MESSAGE)

    merchant = django_authenticate(request, email=email, password=password)
    if merchant is None:
        raise Unauthorized(INVALID_LOGIN_MESSAGE)

    return issue_credential(merchant), merchant


def resolve_credential(token) -> uuid.UUID:
    """
    Validate a bearer token and return the merchant id it was issued for.

    Fails with Unauthorized when the token is malformed, badly signed,
    expired, or has no subject claim.
    """
    if not token or not isinstance(token, str):
        raise Unauthorized("Invalid or expired token")

    try:
        access = AccessToken(token)
    except TokenError:
        raise Unauthorized("Invalid or expired token")

    claim = access.get(api_settings.USER_ID_CLAIM)
    if not claim:
        raise Unauthorized("Invalid token claims")

    try:
        return uuid.UUID(str(claim))
    except ValueError:
        raise Unauthorized("Invalid token claims")
