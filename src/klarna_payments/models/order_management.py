"""Order management models for the Klarna Payments SDK."""
from __future__ import annotations

from typing import Dict, List, Optional

from .base import KlarnaModel
from .payment import OrderLine


class ShippingInfo(KlarnaModel):
    shipping_company: Optional[str] = None
    tracking_number: Optional[str] = None
    tracking_uri: Optional[str] = None


class CaptureRequest(KlarnaModel):
    """Request to capture all or part of an order's authorized amount."""

    captured_amount: int
    description: Optional[str] = None
    reference: Optional[str] = None
    order_lines: Optional[List[OrderLine]] = None
    shipping_info: Optional[List[ShippingInfo]] = None
    metadata: Optional[Dict[str, str]] = None


class RefundRequest(KlarnaModel):
    """Request to refund all or part of a captured amount."""

    refunded_amount: int
    description: Optional[str] = None
    reference: Optional[str] = None
    order_lines: Optional[List[OrderLine]] = None


class CancelOrderRequest(KlarnaModel):
    cancellation_note: Optional[str] = None


class Capture(KlarnaModel):
    """A capture recorded against an order."""

    capture_id: str
    captured_amount: int
    captured_at: Optional[str] = None
    description: Optional[str] = None
    reference: Optional[str] = None
    order_lines: Optional[List[OrderLine]] = None
    shipping_info: Optional[List[ShippingInfo]] = None


class Refund(KlarnaModel):
    """A refund recorded against an order."""

    refund_id: Optional[str] = None
    refunded_amount: int
    refunded_at: Optional[str] = None
    description: Optional[str] = None
    reference: Optional[str] = None
    order_lines: Optional[List[OrderLine]] = None


class Order(KlarnaModel):
    """An order as read from ``GET /ordermanagement/v1/orders/{id}``."""

    order_id: str
    status: Optional[str] = None
    fraud_status: Optional[str] = None
    order_amount: Optional[int] = None
    original_order_amount: Optional[int] = None
    captured_amount: Optional[int] = None
    refunded_amount: Optional[int] = None
    remaining_authorized_amount: Optional[int] = None
    purchase_currency: Optional[str] = None
    purchase_country: Optional[str] = None
    locale: Optional[str] = None
    order_lines: Optional[List[OrderLine]] = None
    merchant_reference1: Optional[str] = None
    merchant_reference2: Optional[str] = None
    created_at: Optional[str] = None
    expires_at: Optional[str] = None
    captures: List[Capture] = []
    refunds: List[Refund] = []


class CaptureResult(KlarnaModel):
    """Outcome of a capture. The provider reports the id in response headers."""

    capture_id: Optional[str] = None
    location: Optional[str] = None


class RefundResult(KlarnaModel):
    """Outcome of a refund. The provider reports the id in response headers."""

    refund_id: Optional[str] = None
    location: Optional[str] = None
