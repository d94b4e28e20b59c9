"""Disputes resource for the Klarna Payments SDK."""
from __future__ import annotations

from typing import Dict, Optional

from ..models.dispute import DisputesPage, DisputeSummary
from ..pagination import AsyncPaginator, Page, PageInfo
from .base import AsyncBaseResource


class DisputesResource(AsyncBaseResource):
    """Read-only access to disputes.

    Example:
        ```python
        async for dispute in client.disputes.list_all(max_items=50):
            print(dispute.dispute_id, dispute.status)
        ```
    """

    async def list(self, continuation_token: Optional[str] = None) -> DisputesPage:
        """Fetch one page of disputes.

        Args:
            continuation_token: Token from the previous page, if any

        Returns:
            The page, with the token for the next one when there is more
        """
        params: Optional[Dict[str, str]] = None
        if continuation_token:
            params = {"continuation_token": continuation_token}
        response = await self._client.perform_request("/disputes/v3/disputes", "GET", params=params)
        return response.decode(DisputesPage)

    async def _fetch_page(self, continuation_token: Optional[str] = None) -> Page[DisputeSummary]:
        page = await self.list(continuation_token=continuation_token)
        return Page(
            items=list(page.disputes),
            page_info=PageInfo(next_cursor=page.continuation_token),
        )

    def list_all(
        self,
        max_items: Optional[int] = None,
        max_pages: Optional[int] = None,
    ) -> AsyncPaginator[DisputeSummary]:
        """Iterate over every dispute, following continuation tokens."""
        return self._create_paginator(
            self._fetch_page,
            cursor_param="continuation_token",
            max_items=max_items,
            max_pages=max_pages,
        )
