"""Customer API views.

Exposes the ``CustomerService`` via HTTP using DRF ViewSets.
Domain faults are caught and translated into the status code of their
``FaultKind``; the view never swallows generic exceptions.
"""

from __future__ import annotations

from collections.abc import Mapping

import structlog
from django_filters.rest_framework import DjangoFilterBackend
from rest_framework import status
from rest_framework.filters import OrderingFilter
from rest_framework.mixins import ListModelMixin
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.viewsets import GenericViewSet

from modules.customers.dtos import (
    CreateCustomerDTO,
    PartiallyUpdateCustomerDTO,
    UpdateCustomerDTO,
    parse_request,
)
from modules.customers.filters import CustomerFilter
from modules.customers.models import Customer
from modules.customers.repositories.django_repository import CustomerDjangoRepository
from modules.customers.serializers import CustomerSerializer
from modules.customers.services import CustomerService
from shared.domain.faults import ConstraintViolation, DomainFault, ValidationFault

logger = structlog.get_logger(__name__)


def fault_response(fault: DomainFault) -> Response:
    """Render a domain fault as ``{"errors": [...]}`` with its status code."""
    if isinstance(fault, ValidationFault) and fault.violations:
        errors = [
            {
                "message": violation.message,
                "field": violation.field,
                "errorCode": fault.status_code,
            }
            for violation in fault.violations
        ]
    else:
        errors = [{"message": str(fault), "errorCode": fault.status_code}]
    logger.info("customer.request_rejected", kind=str(fault.kind), status_code=fault.status_code)
    return Response({"errors": errors}, status=fault.status_code)


class CustomerViewSet(ListModelMixin, GenericViewSet):
    """ViewSet for Customer CRUD operations.

    Uses ``CustomerService`` with ``CustomerDjangoRepository`` (DIP).
    Does **not** extend ``ModelViewSet``: all ORM access goes through
    the service/repository layer.
    """

    filterset_class = CustomerFilter
    filter_backends = [DjangoFilterBackend, OrderingFilter]
    ordering_fields = ["created_at", "id", "full_name"]
    ordering = ["-created_at", "-id"]
    queryset = Customer.objects.alive()
    serializer_class = CustomerSerializer

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self._service = CustomerService(repository=CustomerDjangoRepository())

    # ------------------------------------------------------------------
    # List / Retrieve
    # ------------------------------------------------------------------

    def get_queryset(self):
        return CustomerDjangoRepository().list()

    def retrieve(self, request: Request, pk: str | None = None) -> Response:
        """GET /api/v1/customers/{pk}/"""
        try:
            customer = self._service.get_customer(pk)
        except DomainFault as fault:
            return fault_response(fault)
        return Response(CustomerSerializer(customer).data)

    # ------------------------------------------------------------------
    # Create / Update / Destroy
    # ------------------------------------------------------------------

    def create(self, request: Request) -> Response:
        """POST /api/v1/customers/"""
        try:
            dto = parse_request(CreateCustomerDTO, self._payload(request))
            customer = self._service.create_customer(dto)
        except DomainFault as fault:
            return fault_response(fault)
        return Response(CustomerSerializer(customer).data, status=status.HTTP_201_CREATED)

    def update(self, request: Request, pk: str | None = None) -> Response:
        """PUT /api/v1/customers/{pk}/"""
        try:
            dto = parse_request(UpdateCustomerDTO, self._payload(request))
            customer = self._service.update_customer(pk, dto)
        except DomainFault as fault:
            return fault_response(fault)
        return Response(CustomerSerializer(customer).data)

    def partial_update(self, request: Request, pk: str | None = None) -> Response:
        """PATCH /api/v1/customers/{pk}/"""
        try:
            dto = parse_request(PartiallyUpdateCustomerDTO, self._payload(request))
            customer = self._service.partially_update_customer(pk, dto)
        except DomainFault as fault:
            return fault_response(fault)
        return Response(CustomerSerializer(customer).data)

    def destroy(self, request: Request, pk: str | None = None) -> Response:
        """DELETE /api/v1/customers/{pk}/"""
        try:
            self._service.delete_customer(pk)
        except DomainFault as fault:
            return fault_response(fault)
        return Response(status=status.HTTP_204_NO_CONTENT)

    @staticmethod
    def _payload(request: Request) -> Mapping:
        data = request.data
        if not isinstance(data, Mapping):
            raise ValidationFault(
                [ConstraintViolation(field="", message="Request body must be a JSON object.")]
            )
        return data
