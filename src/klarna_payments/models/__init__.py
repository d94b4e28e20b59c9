"""Klarna Payments SDK Models."""
from .base import KlarnaModel
from .payment import (
    AssetUrls,
    AuthorizedPaymentMethod,
    ErrorResponse,
    OrderLine,
    OrderRequest,
    OrderResponse,
    PaymentMethodCategory,
    SessionDetails,
    SessionIntent,
    SessionRequest,
    SessionResponse,
)
from .customer_token import (
    Address,
    CustomerDetails,
    CustomerTokenCreateRequest,
    CustomerTokenDetails,
    CustomerTokenPaymentMethod,
    CustomerTokenResponse,
)
from .order_management import (
    CancelOrderRequest,
    Capture,
    CaptureRequest,
    CaptureResult,
    Order,
    Refund,
    RefundRequest,
    RefundResult,
    ShippingInfo,
)
from .dispute import DisputePagination, DisputeSummary, DisputesPage
from .distribution import DistributionAsset, DistributionStatus, ImageAsset, OpaqueAsset, StatusAsset
from .hpp import (
    HPPMerchantURLs,
    HPPSessionId,
    HPPSessionIdentifier,
    HPPSessionOptions,
    HPPSessionRequest,
    HPPSessionResponse,
    HPPSessionURL,
    PlaceOrderMode,
)
from .errors import (
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
    ServiceError,
)

__all__ = [
    "KlarnaModel",
    # Payments
    "AssetUrls",
    "AuthorizedPaymentMethod",
    "ErrorResponse",
    "OrderLine",
    "OrderRequest",
    "OrderResponse",
    "PaymentMethodCategory",
    "SessionDetails",
    "SessionIntent",
    "SessionRequest",
    "SessionResponse",
    # Customer tokens
    "Address",
    "CustomerDetails",
    "CustomerTokenCreateRequest",
    "CustomerTokenDetails",
    "CustomerTokenPaymentMethod",
    "CustomerTokenResponse",
    # Order management
    "CancelOrderRequest",
    "Capture",
    "CaptureRequest",
    "CaptureResult",
    "Order",
    "Refund",
    "RefundRequest",
    "RefundResult",
    "ShippingInfo",
    # Disputes
    "DisputePagination",
    "DisputeSummary",
    "DisputesPage",
    # Distribution
    "DistributionAsset",
    "DistributionStatus",
    "ImageAsset",
    "OpaqueAsset",
    "StatusAsset",
    # Hosted payment page
    "HPPMerchantURLs",
    "HPPSessionId",
    "HPPSessionIdentifier",
    "HPPSessionOptions",
    "HPPSessionRequest",
    "HPPSessionResponse",
    "HPPSessionURL",
    "PlaceOrderMode",
    # Errors
    "APIError",
    "CheckoutStateError",
    "DecodingError",
    "ErrorCode",
    "InvalidBodyError",
    "InvalidMethodError",
    "InvalidResponseError",
    "InvalidURLError",
    "KlarnaServiceError",
    "MissingCredentialsError",
    "NetworkError",
    "ServiceError",
]
