# merchants/models.py

"""
MERCHANT ACCOUNT MODEL

The merchant is the tenant: it owns products and receives quote requests.
It doubles as Django's AUTH_USER_MODEL so admin + password hashing come for free.

Rules:
- email is the login identity, stored trimmed + lower-cased
- store_name is the public slug; NULL until claimed, unique once set, stored lower-cased
"""

from __future__ import annotations

import uuid

from django.contrib.auth.models import (
    AbstractBaseUser,
    BaseUserManager,
    PermissionsMixin,
)
from django.db import models


def normalize_merchant_email(email) -> str:
    return (email or "").strip().lower()


# ---------------- MERCHANT MANAGER ----------------
class MerchantManager(BaseUserManager):
    use_in_migrations = True

    def create_user(self, email=None, password=None, **extra_fields):
        email = normalize_merchant_email(email)
        if not email:
            raise ValueError("An email address is required")

        extra_fields.setdefault("is_active", True)

        merchant = self.model(email=email, **extra_fields)

        if password:
            merchant.set_password(password)
        else:
            merchant.set_unusable_password()

        merchant.save(using=self._db)
        return merchant

    def create_superuser(self, email, password=None, **extra_fields):
        if not password:
            raise ValueError("Superuser must have a password")

        extra_fields.setdefault("is_staff", True)
        extra_fields.setdefault("is_superuser", True)
        extra_fields.setdefault("is_active", True)

        if extra_fields.get("is_staff") is not True:
            raise ValueError("Superuser must have is_staff=True")
        if extra_fields.get("is_superuser") is not True:
            raise ValueError("Superuser must have is_superuser=True")

        return self.create_user(email=email, password=password, **extra_fields)


# ---------------- MERCHANT MODEL ----------------
class Merchant(AbstractBaseUser, PermissionsMixin):
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)

    name = models.CharField(max_length=255)
    email = models.EmailField(unique=True)

    store_name = models.CharField(
        max_length=64,
        unique=True,
        null=True,
        blank=True,
        help_text="Public store slug (letters, digits, dashes, underscores).",
    )

    is_active = models.BooleanField(default=True)
    is_staff = models.BooleanField(default=False)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    objects = MerchantManager()

    USERNAME_FIELD = "email"
    EMAIL_FIELD = "email"
    REQUIRED_FIELDS = ["name"]

    class Meta:
        ordering = ["-created_at"]

    def clean(self):
        super().clean()
        self.email = normalize_merchant_email(self.email)
        if self.store_name is not None:
            self.store_name = self.store_name.strip().lower() or None

    def __str__(self):
        return f"{self.name} <{self.email}>"
