"""
PATH: merchants/auth_backends.py

AUTH BACKEND: case-insensitive email login

Used by django.contrib.auth.authenticate() from:
- merchants.services.auth.authenticate (API login)
- Django admin login form (passes the email as "username")

Emails are stored lower-cased, so the identifier is normalized the same way
before lookup. Permission checks are inherited from ModelBackend.
"""

from __future__ import annotations

from django.contrib.auth.backends import ModelBackend

from merchants.models import Merchant, normalize_merchant_email


class EmailBackend(ModelBackend):
    def authenticate(self, request, email=None, password=None, **kwargs):
        identifier = normalize_merchant_email(email or kwargs.get("username"))
        if not identifier or password is None:
            return None

        try:
            merchant = Merchant.objects.get(email=identifier)
        except Merchant.DoesNotExist:
            # Run the hasher anyway so timing does not reveal unknown emails.
            Merchant().set_password(password)
            return None

        if merchant.check_password(password) and self.user_can_authenticate(merchant):
            return merchant

        return None
