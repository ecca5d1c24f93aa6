import json

import pytest

from rest_framework.test import APIClient

from modules.customers.models import Customer


@pytest.fixture(autouse=True)
def _use_db(db):
    """Automatically use the test database for all tests."""


@pytest.fixture()
def api_client():
    """DRF APIClient for testing REST endpoints."""
    return APIClient()


@pytest.fixture()
def graphql(client):
    """POST a GraphQL document to ``/graphql``; returns the raw response."""

    def _execute(query, variables=None):
        return client.post(
            "/graphql",
            data=json.dumps({"query": query, "variables": variables or {}}),
            content_type="application/json",
        )

    return _execute


@pytest.fixture()
def sample_customer():
    """A persisted, live Customer."""
    return Customer.objects.create(
        full_name="Ivan Polovyi",
        phone_number="626.164.7481",
        address="Apt. 843 399 Lachelle Crossing, New Eldenhaven, LA 63962-9260",
    )
