"""Customer DRF serializers for API output.

The serializer operates at the Interface layer (API Views).
It renders Customer instances with the public camelCase field names.
Input validation lives in the Pydantic DTOs (``dtos.py``), which the
Service Layer receives.
"""

from __future__ import annotations

from django.utils import timezone
from rest_framework import serializers

from modules.customers.models import Customer


class CustomerSerializer(serializers.ModelSerializer):
    """Read-only serializer for the Customer resource."""

    fullName = serializers.CharField(source="full_name", read_only=True)
    phoneNumber = serializers.CharField(source="phone_number", read_only=True)
    createdAt = serializers.SerializerMethodField()

    class Meta:
        model = Customer
        fields = [
            "id",
            "fullName",
            "phoneNumber",
            "address",
            "createdAt",
        ]
        read_only_fields = fields

    def get_createdAt(self, obj: Customer) -> str:
        return timezone.localdate(obj.created_at).isoformat()
