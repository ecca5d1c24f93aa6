import logging
import uuid

import pytest

from config.settings import mask_sensitive_data


class TestCorrelationIdMiddleware:
    def test_returns_provided_request_id(self, client):
        custom_id = "my-custom-request-id-123"
        response = client.get("/health", HTTP_X_REQUEST_ID=custom_id)
        assert response["X-Request-ID"] == custom_id

    def test_generates_uuid_when_no_request_id(self, client):
        response = client.get("/health")
        request_id = response["X-Request-ID"]
        parsed = uuid.UUID(request_id, version=4)
        assert str(parsed) == request_id

    def test_graphql_requests_are_tagged(self, client):
        response = client.post(
            "/graphql",
            data='{"query": "{ allCustomers { id } }"}',
            content_type="application/json",
            HTTP_X_REQUEST_ID="graphql-request-1",
        )
        assert response["X-Request-ID"] == "graphql-request-1"

    def test_correlation_id_in_logs(self, client, caplog):
        custom_id = "log-test-correlation-456"
        with caplog.at_level(logging.INFO):
            client.get("/health", HTTP_X_REQUEST_ID=custom_id)
        found = any(custom_id in record.getMessage() for record in caplog.records)
        assert found, (
            f"correlation_id '{custom_id}' not found in log records: "
            f"{[r.getMessage() for r in caplog.records]}"
        )


class TestSensitiveDataMasking:
    @pytest.mark.parametrize("key", ["phone_number", "phoneNumber", "address"])
    def test_customer_personal_data_masked(self, key):
        event_dict = {"event": "customer.created", key: "626.164.7481"}
        result = mask_sensitive_data(None, None, event_dict)
        assert result[key] == "***MASKED***"

    def test_password_masked_in_log_output(self):
        event_dict = {"event": "test", "data": "password='s3cret123'"}
        result = mask_sensitive_data(None, None, event_dict)
        assert "s3cret123" not in result["data"]
        assert "***MASKED***" in result["data"]

    def test_token_masked_in_log_output(self):
        event_dict = {"event": "test", "header": "token=abc123xyz"}
        result = mask_sensitive_data(None, None, event_dict)
        assert "abc123xyz" not in result["header"]
        assert "***MASKED***" in result["header"]

    def test_non_sensitive_data_unchanged(self):
        event_dict = {"event": "customer.created", "customer_id": "0190a1b2"}
        result = mask_sensitive_data(None, None, event_dict)
        assert result["customer_id"] == "0190a1b2"
        assert result["event"] == "customer.created"
