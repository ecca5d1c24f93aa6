"""Integration tests for Customer REST endpoints.

Covers:
- CRUD operations via /api/v1/customers/.
- Filtering, ordering and pagination of the list.
- Fault mapping: 400 (one entry per violation), 404, 422.
"""

from __future__ import annotations

import pytest
from freezegun import freeze_time

from modules.customers.models import Customer

pytestmark = pytest.mark.integration

URL = "/api/v1/customers/"

VALID_PAYLOAD = {
    "fullName": "Ana Souza",
    "phoneNumber": "1-669-210-0504",
    "address": "Suite 120 55 Harbor Road, Port Alden, OR 97001",
}


def _detail(customer) -> str:
    return f"{URL}{customer.id}/"


# ===========================================================================
# LIST
# ===========================================================================


class TestCustomerList:
    def test_list_empty(self, api_client):
        response = api_client.get(URL)
        assert response.status_code == 200
        assert response.data["results"] == []

    def test_list_returns_customers(self, api_client, sample_customer):
        response = api_client.get(URL)
        assert response.status_code == 200
        assert response.data["count"] == 1
        assert response.data["results"][0]["fullName"] == "Ivan Polovyi"

    def test_list_excludes_soft_deleted(self, api_client, sample_customer):
        sample_customer.delete()
        response = api_client.get(URL)
        assert response.data["count"] == 0

    def test_filter_by_full_name(self, api_client, sample_customer):
        Customer.objects.create(full_name="Ana Souza", phone_number="2", address="x")

        response = api_client.get(URL, {"fullName": "polo"})

        assert [c["fullName"] for c in response.data["results"]] == ["Ivan Polovyi"]

    def test_filter_by_phone_number(self, api_client, sample_customer):
        Customer.objects.create(full_name="Ana Souza", phone_number="2", address="x")

        response = api_client.get(URL, {"phoneNumber": "2"})

        assert [c["fullName"] for c in response.data["results"]] == ["Ana Souza"]

    def test_filter_by_created_at(self, api_client, sample_customer):
        with freeze_time("2015-09-01 12:00:00"):
            Customer.objects.create(full_name="Old Timer", phone_number="2", address="x")

        response = api_client.get(URL, {"createdAt": "2015-09-01"})

        assert [c["fullName"] for c in response.data["results"]] == ["Old Timer"]

    def test_ordering_by_full_name(self, api_client, sample_customer):
        Customer.objects.create(full_name="Ana Souza", phone_number="2", address="x")

        response = api_client.get(URL, {"ordering": "full_name"})

        assert [c["fullName"] for c in response.data["results"]] == [
            "Ana Souza",
            "Ivan Polovyi",
        ]

    def test_pagination(self, api_client):
        Customer.objects.bulk_create(
            Customer(full_name=f"Customer {i}", phone_number=str(i), address="x")
            for i in range(25)
        )

        response = api_client.get(URL, {"page": 2})

        assert response.data["count"] == 25
        assert len(response.data["results"]) == 5


# ===========================================================================
# RETRIEVE
# ===========================================================================


class TestCustomerRetrieve:
    def test_retrieve(self, api_client, sample_customer):
        response = api_client.get(_detail(sample_customer))
        assert response.status_code == 200
        assert response.data["phoneNumber"] == "626.164.7481"

    def test_retrieve_not_found(self, api_client):
        response = api_client.get(f"{URL}0190a1b2-0000-7000-8000-000000000001/")
        assert response.status_code == 404
        assert response.data == {
            "errors": [{"message": "Customer not found", "errorCode": 404}]
        }

    def test_retrieve_malformed_id(self, api_client):
        response = api_client.get(f"{URL}not-a-uuid/")
        assert response.status_code == 404


# ===========================================================================
# CREATE
# ===========================================================================


class TestCustomerCreate:
    def test_create(self, api_client):
        response = api_client.post(URL, VALID_PAYLOAD, format="json")

        assert response.status_code == 201
        assert response.data["fullName"] == "Ana Souza"
        assert Customer.objects.alive().count() == 1

    def test_create_missing_fields(self, api_client):
        response = api_client.post(URL, {}, format="json")

        assert response.status_code == 400
        assert response.data == {
            "errors": [
                {"message": "Field fullName cannot be null", "field": "fullName", "errorCode": 400},
                {"message": "Field phoneNumber cannot be null", "field": "phoneNumber", "errorCode": 400},
                {"message": "Field address cannot be null", "field": "address", "errorCode": 400},
            ]
        }

    def test_create_non_object_body(self, api_client):
        response = api_client.post(URL, ["not", "an", "object"], format="json")

        assert response.status_code == 400
        assert response.data["errors"][0]["message"] == "Request body must be a JSON object."

    def test_create_duplicate_phone_number(self, api_client, sample_customer):
        payload = {**VALID_PAYLOAD, "phoneNumber": sample_customer.phone_number}

        response = api_client.post(URL, payload, format="json")

        assert response.status_code == 422
        assert response.data == {
            "errors": [{"message": "Phone number already registered.", "errorCode": 422}]
        }


# ===========================================================================
# UPDATE / PARTIAL UPDATE
# ===========================================================================


class TestCustomerUpdate:
    def test_put(self, api_client, sample_customer):
        response = api_client.put(_detail(sample_customer), VALID_PAYLOAD, format="json")

        assert response.status_code == 200
        sample_customer.refresh_from_db()
        assert sample_customer.full_name == "Ana Souza"

    def test_put_requires_every_field(self, api_client, sample_customer):
        response = api_client.put(
            _detail(sample_customer), {"fullName": "Only Name"}, format="json"
        )

        assert response.status_code == 400
        assert [e["field"] for e in response.data["errors"]] == ["phoneNumber", "address"]

    def test_patch(self, api_client, sample_customer):
        response = api_client.patch(
            _detail(sample_customer), {"address": "New address"}, format="json"
        )

        assert response.status_code == 200
        assert response.data["address"] == "New address"
        assert response.data["fullName"] == "Ivan Polovyi"

    def test_patch_not_found(self, api_client):
        response = api_client.patch(
            f"{URL}0190a1b2-0000-7000-8000-000000000001/", {"address": "x"}, format="json"
        )
        assert response.status_code == 404


# ===========================================================================
# DELETE
# ===========================================================================


class TestCustomerDelete:
    def test_delete(self, api_client, sample_customer):
        response = api_client.delete(_detail(sample_customer))

        assert response.status_code == 204
        sample_customer.refresh_from_db()
        assert sample_customer.is_deleted is True

    def test_delete_twice(self, api_client, sample_customer):
        api_client.delete(_detail(sample_customer))
        response = api_client.delete(_detail(sample_customer))
        assert response.status_code == 404
