# merchants/authentication.py

"""
DRF AUTHENTICATION: Bearer JWT -> Merchant

Default authentication class for the API (REST_FRAMEWORK settings).

Flow:
- SimpleJWT parses "Authorization: Bearer <token>" (wrong scheme -> anonymous,
  malformed header -> 401)
- merchants.services.auth.resolve_credential validates the token and returns the merchant id
- the merchant must still exist and be active
"""

from __future__ import annotations

from rest_framework.exceptions import AuthenticationFailed
from rest_framework_simplejwt.authentication import JWTAuthentication

from common.exceptions import Unauthorized
from merchants.models import Merchant
from merchants.services.auth import resolve_credential


class MerchantJWTAuthentication(JWTAuthentication):
    def authenticate(self, request):
        header = self.get_header(request)
        if header is None:
            return None

        raw_token = self.get_raw_token(header)
        if raw_token is None:
            return None

        if isinstance(raw_token, bytes):
            raw_token = raw_token.decode("utf-8")

        try:
            merchant_id = resolve_credential(raw_token)
        except Unauthorized as exc:
            raise AuthenticationFailed(exc.message)

        merchant = Merchant.objects.filter(pk=merchant_id, is_active=True).first()
        if merchant is None:
            raise AuthenticationFailed("Invalid or expired token")

        return merchant, None
