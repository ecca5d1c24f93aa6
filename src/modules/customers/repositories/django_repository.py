"""Django ORM implementation of ``ICustomerRepository``.

Every read goes through ``Customer.objects.alive()``: a soft-deleted
customer cannot be fetched, listed or matched by phone number, and its
phone number becomes available again.  Missing rows come back as ``None``;
raising ``CustomerNotFound`` is left to the service.
"""

from __future__ import annotations

from typing import Any, Dict, Optional

import structlog
from django.core.exceptions import ValidationError
from django.db import models, transaction

from modules.customers.models import Customer
from modules.customers.repositories.interfaces import ICustomerRepository

logger = structlog.get_logger(__name__)


class CustomerDjangoRepository(ICustomerRepository):
    def get_by_id(self, id: str) -> Optional[Customer]:
        # A malformed UUID is just another id that matches nothing.
        try:
            return Customer.objects.alive().filter(id=id).first()
        except (ValueError, ValidationError):
            return None

    def list(
        self, filters: Optional[Dict[str, Any]] = None
    ) -> "models.QuerySet[Customer]":
        """Live customers narrowed by ORM look-ups such as
        ``{"full_name__icontains": "ivan", "created_at__date": date(2015, 9, 1)}``.
        """
        return Customer.objects.alive().filter(**(filters or {}))

    @transaction.atomic
    def save(self, entity: Customer) -> Customer:
        created = entity._state.adding
        entity.save()
        logger.info("customer.saved", customer_id=str(entity.id), created=created)
        return entity

    @transaction.atomic
    def delete(self, id: str) -> bool:
        customer = self.get_by_id(id)
        if customer is None:
            return False
        customer.delete()
        logger.info("customer.soft_deleted", customer_id=str(id))
        return True

    def get_by_phone_number(self, phone_number: str) -> Optional[Customer]:
        return Customer.objects.alive().filter(phone_number=phone_number).first()
