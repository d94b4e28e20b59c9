"""Hosted Payment Page models for the Klarna Payments SDK."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union

from .base import KlarnaModel


class PlaceOrderMode(str, Enum):
    """What the hosted page does once the customer authorizes."""

    PLACE_ORDER = "PLACE_ORDER"
    CAPTURE_ORDER = "CAPTURE_ORDER"
    NONE = "NONE"


class HPPMerchantURLs(KlarnaModel):
    """Where the hosted page sends the customer (and status callbacks)."""

    success: str
    cancel: str
    back: str
    failure: str
    error: str
    status_update: Optional[str] = None


class HPPSessionOptions(KlarnaModel):
    place_order_mode: Optional[PlaceOrderMode] = None


class HPPSessionRequest(KlarnaModel):
    """Request body for ``POST /hpp/v1/sessions``.

    ``payment_session_url`` points at a payments session created earlier,
    e.g. ``https://api.playground.klarna.com/payments/v1/sessions/{id}``.
    """

    payment_session_url: str
    merchant_urls: HPPMerchantURLs
    options: Optional[HPPSessionOptions] = None


class HPPSessionResponse(KlarnaModel):
    session_id: Optional[str] = None
    session_url: Optional[str] = None
    payment_session_url: Optional[str] = None
    redirect_url: Optional[str] = None
    authorization_token: Optional[str] = None
    order_id: Optional[str] = None
    status: Optional[str] = None


@dataclass(frozen=True)
class HPPSessionId:
    """Look up a hosted payment page session by id."""

    value: str


@dataclass(frozen=True)
class HPPSessionURL:
    """Look up a hosted payment page session by its absolute URL."""

    value: str


HPPSessionIdentifier = Union[HPPSessionId, HPPSessionURL]
