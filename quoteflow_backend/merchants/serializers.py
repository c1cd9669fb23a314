# merchants/serializers.py

from django.contrib.auth.password_validation import validate_password
from rest_framework import serializers

from merchants.models import Merchant


# ---------------- SIGNUP (INPUT ONLY) ----------------
class SignupSerializer(serializers.Serializer):
    name = serializers.CharField(max_length=255)
    email = serializers.EmailField()
    password = serializers.CharField(
        write_only=True,
        validators=[validate_password],
        style={"input_type": "password"},
    )


# ---------------- LOGIN (INPUT ONLY) ----------------
class LoginSerializer(serializers.Serializer):
    """
    Input validation only.
    Authentication is handled by merchants.services.auth.
    """
    email = serializers.EmailField()
    password = serializers.CharField(
        write_only=True,
        style={"input_type": "password"},
    )


# ---------------- MERCHANT OUTPUT ----------------
class MerchantSerializer(serializers.ModelSerializer):
    """
    Public merchant profile. Never exposes the password hash.
    """
    class Meta:
        model = Merchant
        fields = [
            "id",
            "name",
            "email",
            "store_name",
            "created_at",
        ]
        read_only_fields = fields


class AuthResponseSerializer(serializers.Serializer):
    token = serializers.CharField()
    user = MerchantSerializer()
