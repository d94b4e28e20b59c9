"""Hosted Payment Page resource for the Klarna Payments SDK."""
from __future__ import annotations

from ..models.hpp import (
    HPPSessionId,
    HPPSessionIdentifier,
    HPPSessionRequest,
    HPPSessionResponse,
    HPPSessionURL,
)
from .base import AsyncBaseResource, quote_path_segment


class HostedPaymentPageResource(AsyncBaseResource):
    """Resource for Hosted Payment Page sessions.

    Example:
        ```python
        hpp = await client.hpp.create_session(
            HPPSessionRequest(
                payment_session_url=f"{client.base_url}/payments/v1/sessions/{session_id}",
                merchant_urls=merchant_urls,
            )
        )
        # Later, by id or by the URL the provider handed back
        state = await client.hpp.get_session(HPPSessionURL(hpp.session_url))
        ```
    """

    async def create_session(self, request: HPPSessionRequest) -> HPPSessionResponse:
        """Create a hosted payment page session for an existing payments session."""
        response = await self._post("/hpp/v1/sessions", request)
        return response.decode(HPPSessionResponse)

    async def get_session(self, identifier: HPPSessionIdentifier) -> HPPSessionResponse:
        """Read a hosted payment page session.

        Args:
            identifier: ``HPPSessionId`` to look up under the base URL, or
                ``HPPSessionURL`` to read an absolute session URL as given

        Returns:
            The session, including its status
        """
        if isinstance(identifier, HPPSessionURL):
            response = await self._client.perform_absolute_request(
                identifier.value, "GET", accept=self._client.DEFAULT_ACCEPT
            )
        elif isinstance(identifier, HPPSessionId):
            session_id = quote_path_segment(identifier.value, "session_id")
            response = await self._get(f"/hpp/v1/sessions/{session_id}")
        else:
            raise TypeError(f"Unsupported session identifier: {type(identifier).__name__}")
        return response.decode(HPPSessionResponse)
