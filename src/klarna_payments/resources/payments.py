"""
Payments resource for the Klarna Payments SDK.

Covers the session and authorization endpoints of the Payments API.
"""
from __future__ import annotations

from ..models.customer_token import CustomerTokenCreateRequest, CustomerTokenResponse
from ..models.payment import (
    OrderRequest,
    OrderResponse,
    SessionDetails,
    SessionRequest,
    SessionResponse,
)
from .base import AsyncBaseResource, quote_path_segment


class PaymentsResource(AsyncBaseResource):
    """Resource for payment sessions and authorizations.

    Example:
        ```python
        async with KlarnaClient(config) as client:
            # Create a session; hand client_token to the client-side SDK
            session = await client.payments.create_session(session_request)

            # Place the order with the token the SDK returned
            order = await client.payments.create_order(
                authorization_token,
                OrderRequest.from_session(session_request),
            )
        ```
    """

    async def create_session(self, request: SessionRequest) -> SessionResponse:
        """Create a payment session.

        Args:
            request: Purchase details and order lines

        Returns:
            SessionResponse carrying the client token
        """
        response = await self._post("/payments/v1/sessions", request)
        return response.decode(SessionResponse)

    async def read_session(self, session_id: str) -> SessionDetails:
        """Read back an existing payment session."""
        path = f"/payments/v1/sessions/{quote_path_segment(session_id, 'session_id')}"
        response = await self._get(path)
        return response.decode(SessionDetails)

    async def update_session(self, session_id: str, request: SessionRequest) -> None:
        """Replace the purchase details of an existing session.

        The provider answers ``204 No Content``.
        """
        path = f"/payments/v1/sessions/{quote_path_segment(session_id, 'session_id')}"
        await self._post(path, request)

    async def create_order(
        self,
        authorization_token: str,
        request: OrderRequest,
    ) -> OrderResponse:
        """Create an order from an authorization.

        Args:
            authorization_token: Token from the client-side authorization
            request: Order details; usually the same purchase as the session

        Returns:
            OrderResponse with the order id and fraud status
        """
        token = quote_path_segment(authorization_token, "authorization_token")
        response = await self._post(f"/payments/v1/authorizations/{token}/order", request)
        return response.decode(OrderResponse)

    async def create_customer_token(
        self,
        authorization_token: str,
        request: CustomerTokenCreateRequest,
    ) -> CustomerTokenResponse:
        """Turn an authorization into a reusable customer token."""
        token = quote_path_segment(authorization_token, "authorization_token")
        response = await self._post(
            f"/payments/v1/authorizations/{token}/customer-token", request
        )
        return response.decode(CustomerTokenResponse)

    async def cancel_authorization(self, authorization_token: str) -> None:
        """Cancel an authorization that will not be turned into an order."""
        token = quote_path_segment(authorization_token, "authorization_token")
        await self._delete(f"/payments/v1/authorizations/{token}")
