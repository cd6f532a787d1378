"""Tests for error classification and messages."""

from __future__ import annotations

import httpx
import pytest

from statuscli.errors.messages import extract_error_message, get_status_remediation
from statuscli.errors.network import describe_transport_error, is_network_error
from statuscli.errors.types import (
    ClientError,
    DecodeError,
    ErrorCategory,
    InputError,
    RequestError,
    ResponseReadError,
    ServerError,
    StatusCliError,
    TransportError,
    UnknownServiceError,
    classify_status,
)


class TestErrorTypes:
    """Tests for the exception hierarchy."""

    @pytest.mark.parametrize(
        ("error_cls", "category", "retryable"),
        [
            (InputError, ErrorCategory.INPUT, False),
            (TransportError, ErrorCategory.TRANSPORT, True),
            (ResponseReadError, ErrorCategory.READ, False),
            (DecodeError, ErrorCategory.DECODE, False),
        ],
    )
    def test_categories(self, error_cls, category, retryable):
        error = error_cls("boom")

        assert error.category == category
        assert error.retryable is retryable
        assert isinstance(error, StatusCliError)

    def test_status_errors(self):
        server = ServerError("HTTP 503", status_code=503)
        client = ClientError("HTTP 404", status_code=404, body=b"nope")

        assert server.category == ErrorCategory.SERVER
        assert server.retryable is True
        assert client.category == ErrorCategory.CLIENT
        assert client.retryable is False
        assert client.body == b"nope"

    def test_request_errors_share_base(self):
        for error_cls in (InputError, TransportError, ResponseReadError):
            assert issubclass(error_cls, RequestError)

    def test_transport_error_counts_attempts(self):
        assert TransportError("down", attempts=4).attempts == 4

    def test_to_dict(self):
        error = InputError(
            "Invalid URL",
            url="nope",
            remediation="Use a full URL",
            details={"field": "url"},
        )

        data = error.to_dict()
        assert data["message"] == "Invalid URL"
        assert data["category"] == "input"
        assert data["url"] == "nope"
        assert data["remediation"] == "Use a full URL"
        assert data["details"] == {"field": "url"}
        assert "timestamp" in data

    def test_to_dict_omits_empty_fields(self):
        data = DecodeError("bad json").to_dict()

        assert "url" not in data
        assert "remediation" not in data
        assert "details" not in data

    def test_unknown_service_is_key_error(self):
        error = UnknownServiceError("Unknown service: nope")

        assert isinstance(error, KeyError)
        assert str(error) == "Unknown service: nope"
        assert error.category == ErrorCategory.CONFIGURATION


class TestClassifyStatus:
    """Tests for classify_status."""

    @pytest.mark.parametrize(
        ("status", "expected"),
        [
            (200, None),
            (304, None),
            (400, ErrorCategory.CLIENT),
            (429, ErrorCategory.CLIENT),
            (500, ErrorCategory.SERVER),
            (599, ErrorCategory.SERVER),
        ],
    )
    def test_classification(self, status, expected):
        assert classify_status(status) == expected


class TestIsNetworkError:
    """Tests for is_network_error."""

    @pytest.mark.parametrize(
        "error",
        [
            httpx.ConnectError("refused"),
            httpx.ReadError("reset"),
            httpx.WriteError("broken pipe"),
            httpx.ConnectTimeout("slow"),
            httpx.PoolTimeout("busy"),
            httpx.RemoteProtocolError("server disconnected"),
            TimeoutError(),
        ],
    )
    def test_network_errors(self, error):
        assert is_network_error(error) is True

    @pytest.mark.parametrize(
        "error",
        [
            httpx.ProxyError("proxy"),
            httpx.LocalProtocolError("bad request"),
            ValueError("nope"),
            KeyError("nope"),
        ],
    )
    def test_non_network_errors(self, error):
        assert is_network_error(error) is False


class TestDescribeTransportError:
    """Tests for describe_transport_error."""

    def test_connect_timeout(self):
        message, remediation = describe_transport_error(httpx.ConnectTimeout("slow"))

        assert message == "Connection timed out"
        assert remediation

    def test_read_timeout(self):
        message, _ = describe_transport_error(httpx.ReadTimeout("slow"))

        assert message == "Request timed out waiting for response"

    def test_attempt_deadline(self):
        message, remediation = describe_transport_error(TimeoutError())

        assert message == "Request exceeded its time limit"
        assert "--timeout" in remediation

    def test_connection_refused(self):
        message, _ = describe_transport_error(
            httpx.ConnectError("[Errno 111] Connection refused")
        )

        assert message == "Connection refused by server"

    def test_dns_failure(self):
        message, _ = describe_transport_error(
            httpx.ConnectError("[Errno -2] Name or service not known")
        )

        assert message == "Could not resolve server address"

    def test_generic_connect_error(self):
        message, _ = describe_transport_error(httpx.ConnectError("something odd"))

        assert message == "Failed to connect to server"

    def test_other_network_error(self):
        message, _ = describe_transport_error(httpx.ReadError("reset"))

        assert message == "Network error: reset"

    def test_fallback(self):
        message, _ = describe_transport_error(httpx.ProxyError("proxy said no"))

        assert message == "Transport error: proxy said no"


class TestMessages:
    """Tests for errors/messages.py."""

    @pytest.mark.parametrize("status", [401, 403, 404, 429])
    def test_known_remediations(self, status):
        assert get_status_remediation(status)

    def test_server_remediation(self):
        assert "--retries" in get_status_remediation(502)

    def test_generic_client_remediation(self):
        assert get_status_remediation(418) == "The request was rejected. Check the configured URL."

    def test_no_remediation_for_success(self):
        assert get_status_remediation(200) is None

    @pytest.mark.parametrize(
        ("body", "expected"),
        [
            (b'{"error": "rate limited"}', "rate limited"),
            (b'{"message": "maintenance"}', "maintenance"),
            (b'{"error": {"message": "nested"}}', "nested"),
            (b"Service Unavailable", "Service Unavailable"),
            (b"", "HTTP 503"),
            (b"x" * 500, "HTTP 503"),
        ],
    )
    def test_extract_error_message(self, body, expected):
        assert extract_error_message(body, 503) == expected
