"""Unit tests for BaseModel and SoftDeleteModel, exercised through Customer."""

from __future__ import annotations

import uuid
from datetime import timedelta

import pytest
from django.utils import timezone
from freezegun import freeze_time

from modules.core.models import SoftDeleteQuerySet
from modules.customers.models import Customer

pytestmark = pytest.mark.unit


def _customer(phone_number="626.164.7481", **overrides) -> Customer:
    fields = {
        "full_name": "Ivan Polovyi",
        "phone_number": phone_number,
        "address": "399 Lachelle Crossing, New Eldenhaven",
    }
    fields.update(overrides)
    return Customer.objects.create(**fields)


# ---------------------------------------------------------------------------
# BaseModel
# ---------------------------------------------------------------------------


class TestBaseModel:
    def test_id_is_uuid_version_7(self):
        customer = _customer()
        assert isinstance(customer.id, uuid.UUID)
        assert customer.id.version == 7

    def test_ids_are_time_ordered(self):
        first = _customer("1")
        second = _customer("2")
        assert str(first.id) < str(second.id)

    def test_id_is_not_editable(self):
        assert Customer._meta.get_field("id").editable is False

    def test_timestamps_set_on_create(self):
        customer = _customer()
        assert customer.created_at is not None
        assert customer.updated_at is not None

    def test_save_with_update_fields_refreshes_updated_at(self):
        with freeze_time("2025-01-01 10:00:00"):
            customer = _customer()
        with freeze_time("2025-01-02 10:00:00"):
            customer.full_name = "Ivan P."
            customer.save(update_fields=["full_name"])

        customer.refresh_from_db()
        assert customer.updated_at - customer.created_at == timedelta(days=1)

    def test_created_at_does_not_change_on_save(self):
        customer = _customer()
        created_at = customer.created_at
        customer.address = "Elsewhere"
        customer.save()
        customer.refresh_from_db()
        assert customer.created_at == created_at


# ---------------------------------------------------------------------------
# SoftDeleteModel
# ---------------------------------------------------------------------------


class TestSoftDeleteModel:
    def test_new_instance_is_alive(self):
        customer = _customer()
        assert customer.is_deleted is False
        assert Customer.objects.alive().filter(pk=customer.pk).exists()

    @freeze_time("2025-06-15 12:00:00")
    def test_delete_stamps_deleted_at(self):
        customer = _customer()

        result = customer.delete()

        customer.refresh_from_db()
        assert result == (1, {"customers.Customer": 1})
        assert customer.deleted_at == timezone.now()
        assert customer.is_deleted is True

    def test_delete_twice_is_noop(self):
        customer = _customer()
        customer.delete()
        assert customer.delete() == (0, {})

    def test_soft_deleted_row_is_kept_but_not_alive(self):
        customer = _customer()
        customer.delete()
        assert Customer.objects.filter(pk=customer.pk).exists()
        assert not Customer.objects.alive().filter(pk=customer.pk).exists()


class TestSoftDeleteQuerySet:
    def test_queryset_type(self):
        assert isinstance(Customer.objects.all(), SoftDeleteQuerySet)

    def test_bulk_delete_skips_already_deleted(self):
        first = _customer("1")
        second = _customer("2")
        first.delete()

        count, details = Customer.objects.filter(pk__in=[first.pk, second.pk]).delete()

        assert count == 1
        assert details == {"customers.Customer": 1}
        assert Customer.objects.alive().count() == 0
