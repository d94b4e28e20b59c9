"""
Order Management resource for the Klarna Payments SDK.

Everything that happens to an order after it is placed: reading it back,
capturing, refunding, cancelling and releasing what is left of the
authorization.
"""
from __future__ import annotations

import logging
import uuid
from typing import Dict, List, Optional

from ..models.order_management import (
    CancelOrderRequest,
    Capture,
    CaptureRequest,
    CaptureResult,
    Order,
    RefundRequest,
    RefundResult,
)
from .base import AsyncBaseResource, quote_path_segment

logger = logging.getLogger(__name__)

IDEMPOTENCY_HEADER = "Klarna-Idempotency-Key"


def _idempotency_headers(idempotency_key: Optional[str]) -> Optional[Dict[str, str]]:
    if idempotency_key is None:
        return None
    return {IDEMPOTENCY_HEADER: idempotency_key}


class OrderManagementResource(AsyncBaseResource):
    """Resource for order management operations.

    Example:
        ```python
        result = await client.order_management.capture_order(
            order_id,
            CaptureRequest(captured_amount=2000),
            idempotency_key="capture-1234",
        )
        order = await client.order_management.get(order_id)
        print(order.captured_amount, order.remaining_authorized_amount)
        ```
    """

    @staticmethod
    def _order_path(order_id: str) -> str:
        return f"/ordermanagement/v1/orders/{quote_path_segment(order_id, 'order_id')}"

    async def get(self, order_id: str) -> Order:
        """Get an order by ID.

        Args:
            order_id: The order ID

        Returns:
            Order details including captures and refunds
        """
        response = await self._get(self._order_path(order_id))
        return response.decode(Order)

    async def get_captures(self, order_id: str) -> List[Capture]:
        """List the captures made on an order."""
        response = await self._get(f"{self._order_path(order_id)}/captures")
        return response.decode(List[Capture])

    async def capture_order(
        self,
        order_id: str,
        request: CaptureRequest,
        idempotency_key: Optional[str] = None,
    ) -> CaptureResult:
        """Capture all or part of an order.

        Args:
            order_id: The order ID
            request: Amount and, optionally, the lines being captured
            idempotency_key: Sent as ``Klarna-Idempotency-Key`` when given

        Returns:
            CaptureResult with the id from the ``Capture-Id`` header
        """
        response = await self._post(
            f"{self._order_path(order_id)}/captures",
            request,
            headers=_idempotency_headers(idempotency_key),
        )
        return CaptureResult(
            capture_id=response.headers.get("capture-id"),
            location=response.headers.get("location"),
        )

    async def refund_order(
        self,
        order_id: str,
        request: RefundRequest,
        idempotency_key: Optional[str] = None,
    ) -> RefundResult:
        """Refund all or part of a captured amount.

        Args:
            order_id: The order ID
            request: Amount and, optionally, the lines being refunded
            idempotency_key: Sent as ``Klarna-Idempotency-Key`` when given

        Returns:
            RefundResult with the id from the ``Refund-Id`` header
        """
        response = await self._post(
            f"{self._order_path(order_id)}/refunds",
            request,
            headers=_idempotency_headers(idempotency_key),
        )
        return RefundResult(
            refund_id=response.headers.get("refund-id"),
            location=response.headers.get("location"),
        )

    async def cancel_order(
        self,
        order_id: str,
        request: Optional[CancelOrderRequest] = None,
        idempotency_key: Optional[str] = None,
    ) -> None:
        """Cancel an order that has not been captured."""
        await self._post(
            f"{self._order_path(order_id)}/cancel",
            request,
            headers=_idempotency_headers(idempotency_key),
        )

    async def release_remaining_authorization(
        self,
        order_id: str,
        idempotency_key: Optional[str] = None,
    ) -> None:
        """Release the part of the authorization that will not be captured.

        A ``Klarna-Idempotency-Key`` is always sent. Without ``idempotency_key``
        a fresh random key is generated per call, so retrying such a call is
        NOT idempotent; pass your own key if you may retry.
        """
        key = idempotency_key
        if key is None:
            key = str(uuid.uuid4())
            logger.debug("Generated idempotency key for release-remaining-authorization")
        await self._post(
            f"{self._order_path(order_id)}/release-remaining-authorization",
            headers={IDEMPOTENCY_HEADER: key},
        )
