"""
Tests for the KlarnaClient transport
"""
import base64
import json

import httpx
import pytest

from klarna_payments import HTTPMethod, KlarnaClient, KlarnaConfig
from klarna_payments.config import DEFAULT_USER_AGENT
from klarna_payments.models import (
    APIError,
    DecodingError,
    InvalidBodyError,
    InvalidMethodError,
    InvalidURLError,
    KlarnaServiceError,
    MissingCredentialsError,
    NetworkError,
    SessionResponse,
)


class TestClientInitialization:
    """Tests for client construction."""

    def test_create_client_from_config(self, config):
        """Should expose the configured base URL."""
        client = KlarnaClient(config)
        assert client.base_url == "https://api.playground.klarna.com"
        assert client.config is config

    def test_create_client_from_keywords(self):
        """Should build a config from keyword arguments."""
        client = KlarnaClient(username="user", password="secret", base_url="https://example.test")
        assert client.base_url == "https://example.test"
        assert client.config.has_credentials

    def test_reject_config_and_keywords(self, config):
        """Should not accept a config and overrides together."""
        with pytest.raises(ValueError):
            KlarnaClient(config, username="other")

    def test_resources_attached(self, client):
        """Should attach every resource."""
        for name in ("payments", "customer_tokens", "order_management", "disputes", "distribution", "hpp"):
            assert hasattr(client, name)

    async def test_context_manager(self, config):
        """Should work as an async context manager and close idempotently."""
        async with KlarnaClient(config) as client:
            assert client is not None
        await client.close()


class TestURLResolution:
    """Tests for path resolution against the base URL."""

    @pytest.mark.parametrize(
        "base, path",
        [
            ("https://api.playground.klarna.com", "/payments/v1/sessions"),
            ("https://api.playground.klarna.com/", "/payments/v1/sessions"),
            ("https://api.playground.klarna.com", "payments/v1/sessions"),
            ("https://api.playground.klarna.com/", "payments/v1/sessions"),
        ],
    )
    def test_join_with_single_slash(self, base, path):
        """Should join base and path with exactly one slash."""
        client = KlarnaClient(username="u", password="p", base_url=base)
        assert client.build_url(path) == "https://api.playground.klarna.com/payments/v1/sessions"

    def test_absolute_url_used_verbatim(self, client):
        """Should leave absolute URLs untouched."""
        url = "https://cdn.example.com/assets/qr.png?x=1"
        assert client.build_url(url) == url

    async def test_absolute_request_rejects_relative_url(self, client, httpx_mock):
        """Should reject URLs without scheme or host."""
        with pytest.raises(InvalidURLError):
            await client.perform_absolute_request("/payments/v1/sessions")
        assert httpx_mock.get_requests() == []


class TestRequestHeaders:
    """Tests for default and caller-supplied headers."""

    async def test_default_headers(self, client, httpx_mock, username, password):
        """Should send user agent, accept and basic auth."""
        httpx_mock.add_response(
            url="https://api.playground.klarna.com/payments/v1/sessions/abc",
            method="GET",
            json={"status": "complete"},
        )

        await client.perform_request("/payments/v1/sessions/abc")

        request = httpx_mock.get_request()
        expected = base64.b64encode(f"{username}:{password}".encode()).decode()
        assert request.headers["Authorization"] == f"Basic {expected}"
        assert request.headers["User-Agent"] == DEFAULT_USER_AGENT
        assert request.headers["Accept"] == "application/json"

    async def test_caller_headers_win(self, client, httpx_mock):
        """Should not override caller headers, matching names case-insensitively."""
        httpx_mock.add_response(url="https://api.playground.klarna.com/ping", method="GET")

        await client.perform_request(
            "/ping",
            headers={"user-agent": "custom/1.0", "authorization": "Bearer x"},
        )

        request = httpx_mock.get_request()
        assert request.headers["User-Agent"] == "custom/1.0"
        assert request.headers.get_list("Authorization") == ["Bearer x"]

    async def test_accept_argument_replaces_header(self, client, httpx_mock):
        """Should let the accept argument replace a caller Accept header."""
        httpx_mock.add_response(url="https://api.playground.klarna.com/ping", method="GET")

        await client.perform_request("/ping", headers={"Accept": "text/plain"}, accept="image/png")

        assert httpx_mock.get_request().headers.get_list("Accept") == ["image/png"]

    async def test_caller_accept_kept_without_argument(self, client, httpx_mock):
        """Should keep the caller Accept header when no accept value is given."""
        httpx_mock.add_response(url="https://api.playground.klarna.com/ping", method="GET")

        await client.perform_request("/ping", headers={"accept": "text/plain"}, accept=None)

        assert httpx_mock.get_request().headers["Accept"] == "text/plain"

    async def test_accept_omitted(self, client, httpx_mock):
        """Should send no Accept header when none is requested."""
        httpx_mock.add_response(url="https://api.playground.klarna.com/ping", method="GET")

        await client.perform_request("/ping", accept=None)

        assert "accept" not in httpx_mock.get_request().headers

    async def test_authorization_can_be_skipped(self, client, httpx_mock):
        """Should not attach credentials when asked not to."""
        httpx_mock.add_response(url="https://cdn.example.com/qr.png", method="GET")

        await client.perform_absolute_request("https://cdn.example.com/qr.png", include_authorization=False)

        assert "authorization" not in httpx_mock.get_request().headers

    async def test_json_body(self, client, httpx_mock):
        """Should serialize the body as JSON and set the content type."""
        httpx_mock.add_response(url="https://api.playground.klarna.com/echo", method="POST", status_code=204)

        await client.perform_request("/echo", "POST", body={"order_amount": 2000})

        request = httpx_mock.get_request()
        assert request.headers["Content-Type"] == "application/json"
        assert json.loads(request.content) == {"order_amount": 2000}


class TestCredentials:
    """Tests for missing credentials."""

    @pytest.mark.parametrize("username, password", [("", "secret"), ("user", ""), ("", "")])
    async def test_missing_credentials_before_io(self, httpx_mock, username, password):
        """Should raise before any request is sent."""
        client = KlarnaClient(
            KlarnaConfig(username=username, password=password, base_url="https://api.playground.klarna.com")
        )

        with pytest.raises(MissingCredentialsError):
            await client.perform_request("/payments/v1/sessions", "POST", body={})

        assert httpx_mock.get_requests() == []
        await client.close()

    async def test_unauthenticated_request_without_credentials(self, httpx_mock):
        """Should allow unauthenticated requests without credentials."""
        httpx_mock.add_response(url="https://cdn.example.com/qr.png", method="GET", content=b"png")
        client = KlarnaClient(KlarnaConfig(username="", password=""))

        response = await client.perform_absolute_request(
            "https://cdn.example.com/qr.png", include_authorization=False
        )

        assert response.content == b"png"
        await client.close()


class TestErrorClassification:
    """Tests for mapping responses and failures to errors."""

    @pytest.mark.parametrize("status_code", [200, 201, 204, 302])
    async def test_success_statuses(self, client, httpx_mock, status_code):
        """Should treat statuses below 400 as success."""
        headers = {"Location": "https://api.playground.klarna.com/next"} if status_code == 302 else None
        httpx_mock.add_response(
            url="https://api.playground.klarna.com/ping",
            method="GET",
            status_code=status_code,
            headers=headers,
        )
        if status_code == 302:
            httpx_mock.add_response(url="https://api.playground.klarna.com/next", method="GET")

        response = await client.perform_request("/ping")

        assert response.status_code in (200, 201, 204)

    @pytest.mark.parametrize("status_code", [400, 401, 403, 404, 500, 503])
    async def test_error_statuses(self, client, httpx_mock, status_code):
        """Should raise APIError carrying the status and body text."""
        httpx_mock.add_response(
            url="https://api.playground.klarna.com/ping",
            method="GET",
            status_code=status_code,
            text="something went wrong",
        )

        with pytest.raises(APIError) as exc_info:
            await client.perform_request("/ping")

        assert exc_info.value.status_code == status_code
        assert exc_info.value.raw_message == "something went wrong"

    async def test_empty_error_body(self, client, httpx_mock):
        """Should keep an empty body as an empty message."""
        httpx_mock.add_response(url="https://api.playground.klarna.com/ping", method="GET", status_code=500)

        with pytest.raises(APIError) as exc_info:
            await client.perform_request("/ping")

        assert exc_info.value.raw_message == ""

    async def test_undecodable_error_body(self, client, httpx_mock):
        """Should fall back to 'Unknown error' for a non-UTF-8 body."""
        httpx_mock.add_response(
            url="https://api.playground.klarna.com/ping",
            method="GET",
            status_code=502,
            content=b"\xff\xfe\xfa",
        )

        with pytest.raises(APIError) as exc_info:
            await client.perform_request("/ping")

        assert exc_info.value.raw_message == "Unknown error"

    async def test_structured_error_body(self, client, httpx_mock, mock_responses):
        """Should expose the parsed error document."""
        httpx_mock.add_response(
            url="https://api.playground.klarna.com/ping",
            method="GET",
            status_code=400,
            json=mock_responses["error"],
        )

        with pytest.raises(APIError) as exc_info:
            await client.perform_request("/ping")

        assert exc_info.value.error_response.error_code == "BAD_VALUE"
        assert exc_info.value.correlation_id == mock_responses["error"]["correlation_id"]

    async def test_network_error(self, client, httpx_mock):
        """Should wrap transport failures."""
        httpx_mock.add_exception(httpx.ConnectError("connection refused"))

        with pytest.raises(NetworkError) as exc_info:
            await client.perform_request("/ping")

        assert isinstance(exc_info.value.__cause__, httpx.ConnectError)

    async def test_invalid_body(self, client, httpx_mock):
        """Should reject bodies that are not JSON-serializable."""
        with pytest.raises(InvalidBodyError):
            await client.perform_request("/ping", "POST", body={"amount": object()})

        assert httpx_mock.get_requests() == []

    async def test_non_finite_number_body(self, client, httpx_mock):
        """Should reject NaN, which is not valid JSON."""
        with pytest.raises(InvalidBodyError):
            await client.perform_request("/ping", "POST", body={"amount": float("nan")})


class TestResponseDecoding:
    """Tests for KlarnaHTTPResponse helpers."""

    async def test_decode_model(self, client, httpx_mock, mock_responses):
        """Should decode JSON into a model."""
        httpx_mock.add_response(
            url="https://api.playground.klarna.com/payments/v1/sessions",
            method="POST",
            json=mock_responses["session"],
        )

        response = await client.perform_request("/payments/v1/sessions", "POST", body={})
        session = response.decode(SessionResponse)

        assert session.session_id == mock_responses["session"]["session_id"]
        assert response.content_type == "application/json"

    async def test_decode_failure(self, client, httpx_mock):
        """Should wrap validation failures in DecodingError."""
        httpx_mock.add_response(url="https://api.playground.klarna.com/ping", method="GET", text="not json")

        response = await client.perform_request("/ping")

        with pytest.raises(DecodingError):
            response.decode(SessionResponse)
        with pytest.raises(DecodingError):
            response.json()


class TestHTTPMethods:
    """Tests for HTTP method handling."""

    @pytest.mark.parametrize("method", ["get", "GET", HTTPMethod.GET])
    async def test_method_spellings(self, client, httpx_mock, method):
        """Should accept method names in any case and enum members."""
        httpx_mock.add_response(url="https://api.playground.klarna.com/ping", method="GET")

        await client.perform_request("/ping", method)

        assert httpx_mock.get_request().method == "GET"

    @pytest.mark.parametrize("method", ["HEAD", "TRACE", "nonsense"])
    async def test_unsupported_method(self, client, httpx_mock, method):
        """Should raise a service error before any request."""
        with pytest.raises(InvalidMethodError) as exc_info:
            await client.perform_request("/ping", method)

        assert isinstance(exc_info.value, KlarnaServiceError)
        assert exc_info.value.method == method
        assert httpx_mock.get_requests() == []
