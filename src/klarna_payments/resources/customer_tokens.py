"""Customer token resource for the Klarna Payments SDK."""
from __future__ import annotations

from ..models.customer_token import CustomerTokenDetails
from ..models.payment import OrderRequest, OrderResponse
from .base import AsyncBaseResource, quote_path_segment


class CustomerTokensResource(AsyncBaseResource):
    """Resource for customer tokens (recurring purchases).

    Example:
        ```python
        details = await client.customer_tokens.read(token_id)
        if details.status == "ACTIVE":
            order = await client.customer_tokens.create_order(token_id, order_request)
        ```
    """

    async def read(self, token_id: str) -> CustomerTokenDetails:
        """Read a customer token.

        Args:
            token_id: The customer token id

        Returns:
            Token status, payment method and customer details
        """
        token = quote_path_segment(token_id, "token_id")
        response = await self._get(f"/customer-token/v1/tokens/{token}")
        return response.decode(CustomerTokenDetails)

    async def create_order(self, token_id: str, request: OrderRequest) -> OrderResponse:
        """Place an order charged to a customer token."""
        token = quote_path_segment(token_id, "token_id")
        response = await self._post(f"/customer-token/v1/tokens/{token}/order", request)
        return response.decode(OrderResponse)
