# backend/settings/test.py
"""
PATH: backend/settings/test.py

TEST SETTINGS

- Dummy cache: throttle history is never stored, so rate limits never trip.
- Fast password hasher: signup/login tests stay quick.
- Throwaway media root: uploaded images never land in the project tree.
"""

from __future__ import annotations

import tempfile

from .dev import *  # noqa: F403

DEBUG = False

CACHES = {
    "default": {
        "BACKEND": "django.core.cache.backends.dummy.DummyCache",
    }
}

PASSWORD_HASHERS = [
    "django.contrib.auth.hashers.MD5PasswordHasher",
]

MEDIA_ROOT = tempfile.mkdtemp(prefix="quoteflow-test-media-")

LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "handlers": {"null": {"class": "logging.NullHandler"}},
    "root": {"handlers": ["null"], "level": "WARNING"},
}
