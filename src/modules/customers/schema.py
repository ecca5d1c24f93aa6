"""Customer GraphQL schema (graphene-django).

Resolvers are thin: they build request DTOs, call ``CustomerService`` and
let domain faults propagate to the execution engine, where the error
normalizer turns them into ``extensions.errorCode`` entries.

Request input fields are nullable on purpose so that missing values reach
DTO validation and come back as one error per violated field.
"""

from __future__ import annotations

import graphene
from django.utils import timezone
from graphene_django import DjangoObjectType

from modules.customers.dtos import (
    CreateCustomerDTO,
    PartiallyUpdateCustomerDTO,
    UpdateCustomerDTO,
    parse_request,
)
from modules.customers.models import Customer
from modules.customers.repositories.django_repository import CustomerDjangoRepository
from modules.customers.services import CustomerService


def _service() -> CustomerService:
    return CustomerService(repository=CustomerDjangoRepository())


class CustomerType(DjangoObjectType):
    created_at = graphene.Date(required=True)

    class Meta:
        model = Customer
        name = "Customer"
        fields = ("id", "full_name", "phone_number", "address", "created_at")

    @staticmethod
    def resolve_created_at(parent: Customer, info):
        return timezone.localdate(parent.created_at)


class CreateCustomerRequest(graphene.InputObjectType):
    full_name = graphene.String()
    phone_number = graphene.String()
    address = graphene.String()


class UpdateCustomerRequest(graphene.InputObjectType):
    full_name = graphene.String()
    phone_number = graphene.String()
    address = graphene.String()


class PartiallyUpdateCustomerRequest(graphene.InputObjectType):
    full_name = graphene.String()
    phone_number = graphene.String()
    address = graphene.String()


class Query(graphene.ObjectType):
    all_customers = graphene.List(graphene.NonNull(CustomerType), required=True)
    all_customers_with_filters = graphene.List(
        graphene.NonNull(CustomerType),
        required=True,
        full_name=graphene.String(),
        phone_number=graphene.String(),
        created_at=graphene.Date(),
    )
    customer_by_id = graphene.Field(CustomerType, customer_id=graphene.ID(required=True))

    @staticmethod
    def resolve_all_customers(root, info):
        return _service().get_all_customers()

    @staticmethod
    def resolve_all_customers_with_filters(
        root, info, full_name=None, phone_number=None, created_at=None
    ):
        return _service().get_customers_with_filters(full_name, phone_number, created_at)

    @staticmethod
    def resolve_customer_by_id(root, info, customer_id):
        return _service().get_customer(customer_id)


class Mutation(graphene.ObjectType):
    create_customer = graphene.Field(
        CustomerType,
        create_customer_request=CreateCustomerRequest(required=True),
    )
    update_customer = graphene.Field(
        CustomerType,
        customer_id=graphene.ID(required=True),
        update_customer_request=UpdateCustomerRequest(required=True),
    )
    partially_update_customer = graphene.Field(
        CustomerType,
        customer_id=graphene.ID(required=True),
        partially_update_customer_request=PartiallyUpdateCustomerRequest(required=True),
    )
    delete_customer = graphene.String(customer_id=graphene.ID(required=True))

    @staticmethod
    def resolve_create_customer(root, info, create_customer_request):
        dto = parse_request(CreateCustomerDTO, create_customer_request)
        return _service().create_customer(dto)

    @staticmethod
    def resolve_update_customer(root, info, customer_id, update_customer_request):
        dto = parse_request(UpdateCustomerDTO, update_customer_request)
        return _service().update_customer(customer_id, dto)

    @staticmethod
    def resolve_partially_update_customer(
        root, info, customer_id, partially_update_customer_request
    ):
        dto = parse_request(PartiallyUpdateCustomerDTO, partially_update_customer_request)
        return _service().partially_update_customer(customer_id, dto)

    @staticmethod
    def resolve_delete_customer(root, info, customer_id):
        _service().delete_customer(customer_id)
        return customer_id
