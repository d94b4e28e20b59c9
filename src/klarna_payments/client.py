"""
Klarna Payments Python SDK

An async client for the Klarna Payments, Order Management, Customer Token,
Disputes and Hosted Payment Page APIs.

Example usage:
    ```python
    from klarna_payments import KlarnaClient, KlarnaConfig

    config = KlarnaConfig(username="PK123_abc", password="klarna_test_api_...")

    async with KlarnaClient(config) as client:
        session = await client.payments.create_session(session_request)

        # ... the client-side SDK authorizes and yields a token ...

        order = await client.payments.create_order(authorization_token, order_request)
        await client.order_management.capture_order(
            order.order_id,
            CaptureRequest(captured_amount=order_request.order_amount),
        )
    ```
"""
from __future__ import annotations

import base64
import json
import logging
import time
from dataclasses import dataclass
from enum import Enum
from typing import Any, Mapping, Optional, Type, TypeVar, Union, overload
from urllib.parse import urlsplit

import httpx
from pydantic import BaseModel, SecretStr, TypeAdapter, ValidationError

from .config import KlarnaConfig
from .logging import log_request, log_response, mask_url
from .models.errors import (
    APIError,
    DecodingError,
    InvalidBodyError,
    InvalidMethodError,
    InvalidResponseError,
    InvalidURLError,
    MissingCredentialsError,
    NetworkError,
)
from .resources.customer_tokens import CustomerTokensResource
from .resources.disputes import DisputesResource
from .resources.distribution import DistributionResource
from .resources.hpp import HostedPaymentPageResource
from .resources.order_management import OrderManagementResource
from .resources.payments import PaymentsResource

logger = logging.getLogger(__name__)

M = TypeVar("M", bound=BaseModel)

JSONBody = Union[BaseModel, Mapping[str, Any], list]


class HTTPMethod(str, Enum):
    """Supported HTTP verbs."""

    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    PATCH = "PATCH"
    DELETE = "DELETE"


@dataclass(frozen=True)
class KlarnaHTTPResponse:
    """A successful (status below 400) HTTP response from the provider."""

    content: bytes
    status_code: int
    headers: httpx.Headers
    url: str

    @property
    def content_type(self) -> Optional[str]:
        """The ``Content-Type`` header, looked up case-insensitively."""
        return self.headers.get("content-type")

    def text(self, encoding: str = "utf-8") -> Optional[str]:
        """The body as text, or None when it does not decode."""
        try:
            return self.content.decode(encoding)
        except UnicodeDecodeError:
            return None

    def json(self) -> Any:
        """Parse the body as JSON, raising ``DecodingError`` on failure."""
        try:
            return json.loads(self.content)
        except ValueError as exc:
            raise DecodingError(exc, target="json") from exc

    @overload
    def decode(self, model: Type[M]) -> M: ...

    @overload
    def decode(self, model: Any) -> Any: ...

    def decode(self, model: Any) -> Any:
        """Validate the body into ``model``, raising ``DecodingError`` on failure.

        ``model`` is either a pydantic model class or any type pydantic can
        validate, such as ``list[Capture]``.
        """
        target = getattr(model, "__name__", str(model))
        try:
            if isinstance(model, type) and issubclass(model, BaseModel):
                return model.model_validate_json(self.content)
            return TypeAdapter(model).validate_json(self.content)
        except (ValidationError, ValueError) as exc:
            raise DecodingError(exc, target=target) from exc


def _is_absolute(path: str) -> bool:
    parts = urlsplit(path)
    return bool(parts.scheme) and bool(parts.netloc)


class KlarnaClient:
    """
    Klarna API client.

    Provides authenticated HTTP access plus the API resources:
    - payments: Sessions, orders and customer tokens from an authorization
    - customer_tokens: Read tokens and place recurring orders
    - order_management: Read, capture, refund, cancel and release orders
    - disputes: List disputes
    - distribution: Fetch distribution assets (images or status + QR code)
    - hpp: Hosted Payment Page sessions

    Args:
        config: Client configuration. When omitted, one is built from the
            keyword arguments and ``KLARNA_*`` environment variables.
        username: API username (UID)
        password: API password (shared secret)
        base_url: API base URL; defaults to the playground
        http_client: Optional pre-configured ``httpx.AsyncClient``. The
            client does not close an instance it did not create.
    """

    DEFAULT_ACCEPT = "application/json"

    def __init__(
        self,
        config: Optional[KlarnaConfig] = None,
        *,
        username: Optional[str] = None,
        password: Optional[Union[str, SecretStr]] = None,
        base_url: Optional[str] = None,
        http_client: Optional[httpx.AsyncClient] = None,
    ):
        overrides = {
            key: value
            for key, value in (("username", username), ("password", password), ("base_url", base_url))
            if value is not None
        }
        if config is not None and overrides:
            raise ValueError("Pass either a config or individual settings, not both")
        self._config = config if config is not None else KlarnaConfig(**overrides)
        self._client: Optional[httpx.AsyncClient] = http_client
        self._owns_client = http_client is None

        # Initialize resources
        self.payments = PaymentsResource(self)
        self.customer_tokens = CustomerTokensResource(self)
        self.order_management = OrderManagementResource(self)
        self.disputes = DisputesResource(self)
        self.distribution = DistributionResource(self)
        self.hpp = HostedPaymentPageResource(self)

    @property
    def config(self) -> KlarnaConfig:
        return self._config

    @property
    def base_url(self) -> str:
        """The configured API base URL, for building absolute URLs elsewhere."""
        return self._config.api_base_url

    def _get_client(self) -> httpx.AsyncClient:
        """Get or create the HTTP client."""
        if self._client is None or self._client.is_closed:
            kwargs: dict[str, Any] = {"follow_redirects": True}
            if self._config.timeout is not None:
                kwargs["timeout"] = self._config.timeout
            self._client = httpx.AsyncClient(**kwargs)
            self._owns_client = True
        return self._client

    # ==================== Request Helpers ====================

    def _authorization_header(self) -> str:
        """Build the Basic auth header value from the configured credentials."""
        username = self._config.username
        password = self._config.password.get_secret_value()
        if not username or not password:
            raise MissingCredentialsError()
        credentials = base64.b64encode(f"{username}:{password}".encode("utf-8")).decode("ascii")
        return f"Basic {credentials}"

    def build_url(self, path: str) -> str:
        """Resolve ``path`` against the base URL unless it is already absolute."""
        if _is_absolute(path):
            return path
        base = self.base_url.rstrip("/")
        url = f"{base}/{path.lstrip('/')}"
        self._parse_url(url)
        return url

    @staticmethod
    def _parse_url(url: Union[str, httpx.URL]) -> httpx.URL:
        try:
            parsed = httpx.URL(url)
        except (httpx.InvalidURL, TypeError, ValueError) as exc:
            raise InvalidURLError(f"Invalid URL: {url}", url=str(url)) from exc
        if not parsed.scheme or not parsed.host:
            raise InvalidURLError(f"URL must be absolute: {url}", url=str(url))
        return parsed

    @staticmethod
    def _encode_body(body: JSONBody) -> bytes:
        try:
            if isinstance(body, BaseModel):
                payload: Any = body.model_dump(mode="json", exclude_none=True)
            else:
                payload = body
            return json.dumps(payload, separators=(",", ":"), allow_nan=False).encode("utf-8")
        except (TypeError, ValueError) as exc:
            raise InvalidBodyError(exc) from exc

    async def perform_request(
        self,
        path: str,
        method: Union[str, HTTPMethod] = HTTPMethod.GET,
        body: Optional[JSONBody] = None,
        headers: Optional[Mapping[str, str]] = None,
        accept: Optional[str] = DEFAULT_ACCEPT,
        include_authorization: bool = True,
        params: Optional[Mapping[str, str]] = None,
    ) -> KlarnaHTTPResponse:
        """Perform a request against the configured base URL.

        Args:
            path: Path relative to the base URL, or an absolute URL
            method: HTTP method
            body: JSON body (a model or plain JSON-compatible data)
            headers: Extra headers; these win over the defaults, except that
                a non-None ``accept`` replaces any ``Accept`` given here
            accept: ``Accept`` header value; ``None`` keeps the caller's
                ``Accept`` header, or sends none
            include_authorization: Attach Basic auth credentials
            params: Query parameters appended to the URL

        Returns:
            The response, when its status is below 400
        """
        url = self.build_url(path)
        return await self._send(url, method, body, headers, accept, include_authorization, params)

    async def perform_absolute_request(
        self,
        url: Union[str, httpx.URL],
        method: Union[str, HTTPMethod] = HTTPMethod.GET,
        body: Optional[JSONBody] = None,
        headers: Optional[Mapping[str, str]] = None,
        accept: Optional[str] = None,
        include_authorization: bool = True,
    ) -> KlarnaHTTPResponse:
        """Perform a request against an absolute URL (e.g. distribution assets)."""
        parsed = self._parse_url(url)
        return await self._send(str(parsed), method, body, headers, accept, include_authorization)

    async def _send(
        self,
        url: str,
        method: Union[str, HTTPMethod],
        body: Optional[JSONBody],
        headers: Optional[Mapping[str, str]],
        accept: Optional[str],
        include_authorization: bool,
        params: Optional[Mapping[str, str]] = None,
    ) -> KlarnaHTTPResponse:
        try:
            method_name = HTTPMethod(method.upper() if isinstance(method, str) else method).value
        except ValueError as exc:
            raise InvalidMethodError(str(method)) from exc

        final_headers = httpx.Headers(dict(headers or {}))
        if "user-agent" not in final_headers:
            final_headers["User-Agent"] = self._config.user_agent
        if accept is not None:
            final_headers["Accept"] = accept
        if include_authorization and "authorization" not in final_headers:
            final_headers["Authorization"] = self._authorization_header()

        content: Optional[bytes] = None
        if body is not None:
            content = self._encode_body(body)
            if "content-type" not in final_headers:
                final_headers["Content-Type"] = "application/json"

        client = self._get_client()
        try:
            request = client.build_request(
                method_name, url, headers=final_headers, content=content, params=params
            )
        except httpx.InvalidURL as exc:
            raise InvalidURLError(f"Invalid URL: {url}", url=url) from exc
        # httpx adds ``Accept: */*`` on its own; drop it when the caller asked for none
        if "accept" not in final_headers and "accept" in request.headers:
            del request.headers["accept"]

        log_request(logger, method_name, url, request.headers)
        started = time.perf_counter()
        try:
            response = await client.send(request)
        except httpx.DecodingError as exc:
            raise InvalidResponseError(f"Invalid response from Klarna API: {exc}") from exc
        except httpx.HTTPError as exc:
            logger.warning(f"HTTP {method_name} {mask_url(url)} failed: {type(exc).__name__}")
            raise NetworkError(exc) from exc
        duration_ms = (time.perf_counter() - started) * 1000

        status_code = response.status_code
        if not 100 <= status_code <= 599:
            raise InvalidResponseError(f"Invalid HTTP status code: {status_code}")

        log_response(logger, status_code, url=url, duration_ms=duration_ms)

        if status_code >= 400:
            raise APIError(status_code, self._error_message(response.content))

        return KlarnaHTTPResponse(
            content=response.content,
            status_code=status_code,
            headers=response.headers,
            url=str(response.url),
        )

    @staticmethod
    def _error_message(content: bytes) -> str:
        try:
            message = content.decode("utf-8")
        except UnicodeDecodeError:
            return "Unknown error"
        return message

    async def close(self) -> None:
        """Close the HTTP client."""
        if self._client is not None and self._owns_client and not self._client.is_closed:
            await self._client.aclose()
        if self._owns_client:
            self._client = None

    async def __aenter__(self) -> "KlarnaClient":
        """Async context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Async context manager exit."""
        await self.close()
