"""Customer token models for the Klarna Payments SDK."""
from __future__ import annotations

from typing import Optional

from pydantic import AliasChoices, Field

from .base import KlarnaModel


class CustomerDetails(KlarnaModel):
    """Customer identity attached to a token."""

    date_of_birth: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    given_name: Optional[str] = None
    family_name: Optional[str] = None


class Address(KlarnaModel):
    """Postal address."""

    street_address: Optional[str] = None
    street_address2: Optional[str] = None
    postal_code: Optional[str] = None
    city: Optional[str] = None
    region: Optional[str] = None
    country: Optional[str] = None


class CustomerTokenCreateRequest(KlarnaModel):
    """Request body for ``POST /payments/v1/authorizations/{token}/customer-token``."""

    purchase_country: str
    purchase_currency: str
    locale: str
    description: str
    intended_use: str = "SUBSCRIPTION"
    customer: Optional[CustomerDetails] = None
    billing_address: Optional[Address] = None


class CustomerTokenResponse(KlarnaModel):
    """Response from customer token creation."""

    token_id: str = Field(validation_alias=AliasChoices("token_id", "customer_token_id"))
    redirect_url: Optional[str] = None


class CustomerTokenPaymentMethod(KlarnaModel):
    type: Optional[str] = None
    token_id: Optional[str] = None


class CustomerTokenDetails(KlarnaModel):
    """A customer token as read from ``GET /customer-token/v1/tokens/{id}``."""

    token_id: str = Field(validation_alias=AliasChoices("token_id", "customer_token_id"))
    status: Optional[str] = None
    payment_method_type: Optional[str] = None
    payment_method: Optional[CustomerTokenPaymentMethod] = None
    billing_address: Optional[Address] = None
    customer: Optional[CustomerDetails] = None
