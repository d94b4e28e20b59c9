"""Dispute models for the Klarna Payments SDK."""
from __future__ import annotations

from typing import List, Optional

from .base import KlarnaModel


class DisputeSummary(KlarnaModel):
    """A read-only dispute record."""

    dispute_id: Optional[str] = None
    order_id: Optional[str] = None
    status: Optional[str] = None
    reason: Optional[str] = None
    created_at: Optional[str] = None
    updated_at: Optional[str] = None
    amount: Optional[int] = None
    currency: Optional[str] = None


class DisputePagination(KlarnaModel):
    continuation_token: Optional[str] = None


class DisputesPage(KlarnaModel):
    """One page of ``GET /disputes/v3/disputes``."""

    disputes: List[DisputeSummary] = []
    pagination: Optional[DisputePagination] = None

    @property
    def continuation_token(self) -> Optional[str]:
        return self.pagination.continuation_token if self.pagination else None
