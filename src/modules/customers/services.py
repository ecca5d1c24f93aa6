"""Customer service layer (Use Cases).

Orchestrates business logic for the Customer aggregate, delegating
persistence to the injected ``ICustomerRepository``.

Business rules enforced here:
- A phone number belongs to at most one live customer.
- Soft delete via repository.
"""

from __future__ import annotations

from datetime import date
from typing import TYPE_CHECKING, Any, Dict, List, Optional

import structlog
from django.db import transaction

from modules.customers.exceptions import CustomerAlreadyExists, CustomerNotFound
from modules.customers.models import Customer

if TYPE_CHECKING:
    from modules.customers.dtos import (
        CreateCustomerDTO,
        PartiallyUpdateCustomerDTO,
        UpdateCustomerDTO,
    )
    from modules.customers.repositories.interfaces import ICustomerRepository

logger = structlog.get_logger(__name__)

_UPDATABLE_FIELDS = ("full_name", "phone_number", "address")


class CustomerService:
    """Application service for Customer use-cases.

    Receives an ``ICustomerRepository`` via constructor injection (DIP).
    """

    def __init__(self, repository: ICustomerRepository) -> None:
        self._repo = repository

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    @transaction.atomic
    def create_customer(self, dto: CreateCustomerDTO) -> Customer:
        """Create a new customer.

        Raises:
            CustomerAlreadyExists: if the phone number is already taken.
        """
        self._ensure_phone_number_available(dto.phone_number)

        customer = Customer(
            full_name=dto.full_name,
            phone_number=dto.phone_number,
            address=dto.address,
        )
        customer = self._repo.save(customer)
        logger.info("customer.created", customer_id=str(customer.id))
        return customer

    @transaction.atomic
    def update_customer(self, id: str, dto: UpdateCustomerDTO) -> Customer:
        """Replace every field of an existing customer.

        Raises:
            CustomerNotFound: if the customer does not exist.
            CustomerAlreadyExists: if the new phone number collides.
        """
        return self._apply(id, dto, partial=False)

    @transaction.atomic
    def partially_update_customer(
        self, id: str, dto: PartiallyUpdateCustomerDTO
    ) -> Customer:
        """Update only the fields supplied in ``dto``.

        Raises:
            CustomerNotFound: if the customer does not exist.
            CustomerAlreadyExists: if the new phone number collides.
        """
        return self._apply(id, dto, partial=True)

    @transaction.atomic
    def delete_customer(self, id: str) -> None:
        """Soft-delete a customer.

        Raises:
            CustomerNotFound: if the customer does not exist.
        """
        customer = self._repo.get_by_id(id)
        if not customer:
            raise CustomerNotFound()
        self._repo.delete(id)
        logger.info("customer.deleted", customer_id=str(id))

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def get_all_customers(self) -> List[Customer]:
        """Return every live customer."""
        return list(self._repo.list())

    def get_customers_with_filters(
        self,
        full_name: Optional[str] = None,
        phone_number: Optional[str] = None,
        created_at: Optional[date] = None,
    ) -> List[Customer]:
        """Return live customers matching every supplied filter.

        ``full_name`` matches case-insensitively as a substring,
        ``phone_number`` exactly and ``created_at`` by calendar day.
        """
        filters: Dict[str, Any] = {}
        if full_name:
            filters["full_name__icontains"] = full_name
        if phone_number:
            filters["phone_number"] = phone_number
        if created_at:
            filters["created_at__date"] = created_at
        return list(self._repo.list(filters))

    def get_customer(self, id: str) -> Customer:
        """Retrieve a single customer by ID.

        Raises:
            CustomerNotFound: if the customer does not exist.
        """
        customer = self._repo.get_by_id(id)
        if not customer:
            raise CustomerNotFound()
        logger.info("customer.retrieved", customer_id=str(id))
        return customer

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _apply(self, id: str, dto: Any, partial: bool) -> Customer:
        customer = self._repo.get_by_id(id)
        if not customer:
            raise CustomerNotFound()

        if dto.phone_number is not None and dto.phone_number != customer.phone_number:
            self._ensure_phone_number_available(dto.phone_number)

        for field in _UPDATABLE_FIELDS:
            value = getattr(dto, field)
            if value is not None or not partial:
                setattr(customer, field, value)

        customer = self._repo.save(customer)
        logger.info("customer.updated", customer_id=str(id), partial=partial)
        return customer

    def _ensure_phone_number_available(self, phone_number: str) -> None:
        if self._repo.get_by_phone_number(phone_number):
            logger.warning("customer.duplicate_phone_number")
            raise CustomerAlreadyExists("Phone number already registered.")
