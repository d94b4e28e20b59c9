"""Payment session and order models for the Klarna Payments SDK."""
from __future__ import annotations

from enum import Enum
from typing import List, Optional

from pydantic import Field

from .base import KlarnaModel


class SessionIntent(str, Enum):
    """What the session is for."""

    BUY = "buy"
    TOKENIZE = "tokenize"
    BUY_AND_TOKENIZE = "buy_and_tokenize"


class OrderLine(KlarnaModel):
    """A line item in a session or order.

    All monetary fields are integers in minor currency units. The provider
    expects ``total_amount == unit_price * quantity`` (less discounts); this
    is not checked locally.
    """

    type: str
    reference: str
    name: str
    quantity: int
    quantity_unit: str
    unit_price: int
    tax_rate: int
    total_amount: int
    total_tax_amount: int
    total_discount_amount: Optional[int] = None
    image_url: Optional[str] = None
    product_url: Optional[str] = None


class SessionRequest(KlarnaModel):
    """Request body for ``POST /payments/v1/sessions``."""

    purchase_country: str
    purchase_currency: str
    locale: str
    order_amount: int
    order_tax_amount: int
    order_lines: List[OrderLine]
    intent: Optional[SessionIntent] = None

    def lines_total(self) -> int:
        """Sum of ``total_amount`` across the order lines."""
        return sum(line.total_amount for line in self.order_lines)

    def is_balanced(self) -> bool:
        """Whether ``order_amount`` equals the sum of the line totals."""
        return self.order_amount == self.lines_total()


class AssetUrls(KlarnaModel):
    """Branding assets for a payment method category."""

    standard: Optional[str] = None
    descriptive: Optional[str] = None


class PaymentMethodCategory(KlarnaModel):
    """A payment method category offered for the session."""

    identifier: str
    name: Optional[str] = None
    asset_urls: Optional[AssetUrls] = None


class SessionResponse(KlarnaModel):
    """Response from session creation.

    ``client_token`` initializes the client-side SDK. It is kept out of
    ``repr`` so it does not end up in logs by accident.
    """

    client_token: str = Field(repr=False)
    session_id: Optional[str] = None
    payment_method_categories: Optional[List[PaymentMethodCategory]] = None


class SessionDetails(KlarnaModel):
    """A session as read back from ``GET /payments/v1/sessions/{id}``."""

    status: Optional[str] = None
    client_token: Optional[str] = Field(default=None, repr=False)
    purchase_country: Optional[str] = None
    purchase_currency: Optional[str] = None
    locale: Optional[str] = None
    order_amount: Optional[int] = None
    order_tax_amount: Optional[int] = None
    order_lines: Optional[List[OrderLine]] = None
    intent: Optional[str] = None
    expires_at: Optional[str] = None
    payment_method_categories: Optional[List[PaymentMethodCategory]] = None


class OrderRequest(KlarnaModel):
    """Request body for ``POST /payments/v1/authorizations/{token}/order``."""

    purchase_country: str
    purchase_currency: str
    locale: str
    order_amount: int
    order_tax_amount: int
    order_lines: List[OrderLine]
    merchant_reference1: Optional[str] = None
    merchant_reference2: Optional[str] = None

    @classmethod
    def from_session(
        cls,
        session: SessionRequest,
        merchant_reference1: Optional[str] = None,
        merchant_reference2: Optional[str] = None,
    ) -> "OrderRequest":
        """Build an order request carrying the same purchase as ``session``."""
        return cls(
            purchase_country=session.purchase_country,
            purchase_currency=session.purchase_currency,
            locale=session.locale,
            order_amount=session.order_amount,
            order_tax_amount=session.order_tax_amount,
            order_lines=list(session.order_lines),
            merchant_reference1=merchant_reference1,
            merchant_reference2=merchant_reference2,
        )

    def lines_total(self) -> int:
        return sum(line.total_amount for line in self.order_lines)

    def is_balanced(self) -> bool:
        return self.order_amount == self.lines_total()


class AuthorizedPaymentMethod(KlarnaModel):
    """The payment method the customer authorized."""

    type: Optional[str] = None
    number_of_installments: Optional[int] = None
    number_of_days: Optional[int] = None


class OrderResponse(KlarnaModel):
    """Response from order creation."""

    order_id: str
    fraud_status: Optional[str] = None
    authorized_payment_method: Optional[AuthorizedPaymentMethod] = None
    redirect_url: Optional[str] = None


class ErrorResponse(KlarnaModel):
    """Error body returned by the provider on 4xx/5xx responses."""

    correlation_id: Optional[str] = None
    error_code: Optional[str] = None
    error_messages: Optional[List[str]] = None
