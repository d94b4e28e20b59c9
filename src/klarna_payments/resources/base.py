"""
Base resource classes for the Klarna Payments SDK.

This module provides the foundation for all API resource classes: thin
request helpers over ``KlarnaClient`` and safe interpolation of identifiers
into URL paths.
"""
from __future__ import annotations

from typing import (
    TYPE_CHECKING,
    Any,
    Awaitable,
    Callable,
    Dict,
    Mapping,
    Optional,
    TypeVar,
)
from urllib.parse import quote

from ..models.errors import InvalidURLError
from ..pagination import AsyncPaginator, Page

if TYPE_CHECKING:
    from ..client import JSONBody, KlarnaClient, KlarnaHTTPResponse

# Type variable for model types
T = TypeVar("T")


def quote_path_segment(value: str, name: str = "identifier") -> str:
    """Percent-encode ``value`` for use as a single URL path segment.

    Everything outside the unreserved set is escaped (``/`` included), so
    ``urllib.parse.unquote`` gives back the literal value.

    Raises:
        InvalidURLError: If the value is empty or cannot be encoded
    """
    if not value:
        raise InvalidURLError(f"{name} must not be empty")
    try:
        return quote(value, safe="")
    except UnicodeEncodeError as exc:
        raise InvalidURLError(f"{name} cannot be encoded into a URL path") from exc


class AsyncBaseResource:
    """Base class for async API resources.

    Attributes:
        _client: The client instance
    """

    def __init__(self, client: "KlarnaClient") -> None:
        self._client = client

    async def _get(
        self,
        path: str,
        headers: Optional[Mapping[str, str]] = None,
    ) -> "KlarnaHTTPResponse":
        """Make a GET request."""
        return await self._client.perform_request(path, "GET", headers=headers)

    async def _post(
        self,
        path: str,
        data: Optional["JSONBody"] = None,
        headers: Optional[Mapping[str, str]] = None,
    ) -> "KlarnaHTTPResponse":
        """Make a POST request."""
        return await self._client.perform_request(path, "POST", body=data, headers=headers)

    async def _delete(
        self,
        path: str,
        headers: Optional[Mapping[str, str]] = None,
    ) -> "KlarnaHTTPResponse":
        """Make a DELETE request."""
        return await self._client.perform_request(path, "DELETE", headers=headers)

    def _create_paginator(
        self,
        fetch_page: Callable[..., Awaitable[Page[T]]],
        initial_params: Optional[Dict[str, Any]] = None,
        cursor_param: str = "cursor",
        max_items: Optional[int] = None,
        max_pages: Optional[int] = None,
    ) -> AsyncPaginator[T]:
        """Create an async paginator for list operations."""
        return AsyncPaginator(
            fetch_page=fetch_page,
            initial_params=initial_params,
            cursor_param=cursor_param,
            max_items=max_items,
            max_pages=max_pages,
        )


__all__ = [
    "AsyncBaseResource",
    "quote_path_segment",
]
