"""Klarna Payments SDK Resources."""
from .base import AsyncBaseResource, quote_path_segment
from .customer_tokens import CustomerTokensResource
from .disputes import DisputesResource
from .distribution import DistributionResource
from .hpp import HostedPaymentPageResource
from .order_management import OrderManagementResource
from .payments import PaymentsResource

__all__ = [
    "AsyncBaseResource",
    "quote_path_segment",
    "CustomerTokensResource",
    "DisputesResource",
    "DistributionResource",
    "HostedPaymentPageResource",
    "OrderManagementResource",
    "PaymentsResource",
]
