"""Customer model with soft delete.

Business rules implemented:
- Full name, phone number and address are required (enforced by the
  request DTOs before the model is touched).
- A phone number belongs to at most one live customer (enforced at the
  service layer, so soft-deleted customers release their number).
- Soft delete via ``deleted_at`` (inherited from SoftDeleteModel).
- Phone number and address are personal data: ``__str__`` shows only the
  last digits of the phone number.
"""

from __future__ import annotations

from django.db import models

from modules.core.models import SoftDeleteModel


class Customer(SoftDeleteModel):
    """Customer aggregate root."""

    full_name = models.CharField(max_length=255)
    phone_number = models.CharField(max_length=32)
    address = models.TextField()

    class Meta:
        db_table = "customers"
        ordering = ["-created_at"]
        indexes = [
            models.Index(fields=["-created_at"], name="customers_created_idx"),
            models.Index(fields=["phone_number"], name="customers_phone_idx"),
        ]

    def __str__(self) -> str:
        suffix = self.phone_number[-4:] if self.phone_number else "????"
        return f"{self.full_name} (phone: ***{suffix})"
