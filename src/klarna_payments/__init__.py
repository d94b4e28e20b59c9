"""
Klarna Payments Python SDK

An async SDK for Klarna payment sessions, orders and order management.
"""
import logging as _logging

from .checkout import CheckoutFlow, CheckoutState, PostOrderAction
from .client import HTTPMethod, KlarnaClient, KlarnaHTTPResponse
from .config import Environment, KlarnaConfig, Region, base_url_for
from .models.errors import (
    APIError,
    CheckoutStateError,
    DecodingError,
    ErrorCode,
    InvalidBodyError,
    InvalidMethodError,
    InvalidResponseError,
    InvalidURLError,
    KlarnaServiceError,
    MissingCredentialsError,
    NetworkError,
)
from .models.events import (
    Authorized,
    Failed,
    Finalized,
    Initialized,
    Loaded,
    Reauthorized,
    Resized,
    SDKEvent,
    SDKEventHandler,
)
from .models.payment import (
    OrderLine,
    OrderRequest,
    OrderResponse,
    SessionIntent,
    SessionRequest,
    SessionResponse,
)
from .models.customer_token import CustomerTokenCreateRequest, CustomerTokenDetails
from .models.order_management import CaptureRequest, Order, RefundRequest
from .models.distribution import DistributionAsset, ImageAsset, OpaqueAsset, StatusAsset
from .models.hpp import HPPSessionId, HPPSessionRequest, HPPSessionURL
from .pagination import AsyncPaginator, Page, PageInfo

__version__ = "0.1.0"

_logging.getLogger(__name__).addHandler(_logging.NullHandler())

__all__ = [
    # Client
    "KlarnaClient",
    "KlarnaHTTPResponse",
    "HTTPMethod",
    # Configuration
    "KlarnaConfig",
    "Environment",
    "Region",
    "base_url_for",
    # Checkout
    "CheckoutFlow",
    "CheckoutState",
    "PostOrderAction",
    # Errors
    "KlarnaServiceError",
    "ErrorCode",
    "InvalidURLError",
    "NetworkError",
    "DecodingError",
    "APIError",
    "MissingCredentialsError",
    "InvalidResponseError",
    "InvalidBodyError",
    "InvalidMethodError",
    "CheckoutStateError",
    # SDK events
    "SDKEvent",
    "SDKEventHandler",
    "Initialized",
    "Loaded",
    "Authorized",
    "Reauthorized",
    "Finalized",
    "Resized",
    "Failed",
    # Payment models
    "OrderLine",
    "SessionIntent",
    "SessionRequest",
    "SessionResponse",
    "OrderRequest",
    "OrderResponse",
    # Customer token models
    "CustomerTokenCreateRequest",
    "CustomerTokenDetails",
    # Order management models
    "Order",
    "CaptureRequest",
    "RefundRequest",
    # Distribution
    "DistributionAsset",
    "ImageAsset",
    "StatusAsset",
    "OpaqueAsset",
    # Hosted Payment Page
    "HPPSessionRequest",
    "HPPSessionId",
    "HPPSessionURL",
    # Pagination
    "AsyncPaginator",
    "Page",
    "PageInfo",
]
