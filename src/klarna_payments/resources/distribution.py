"""
Distribution resource for the Klarna Payments SDK.

A distribution result URL serves either an image, a JSON status document
that may reference a QR code image, or some other payload. ``fetch`` turns
whichever arrives into a ``DistributionAsset``.
"""
from __future__ import annotations

import logging
import mimetypes
from typing import Optional, Tuple
from urllib.parse import urlsplit

from ..logging import mask_url
from ..models.distribution import (
    DistributionAsset,
    DistributionStatus,
    ImageAsset,
    OpaqueAsset,
    StatusAsset,
)
from ..models.errors import KlarnaServiceError
from .base import AsyncBaseResource

logger = logging.getLogger(__name__)

RESULT_ACCEPT = "image/png, image/jpeg, application/json;q=0.9, */*;q=0.8"
QR_ACCEPT = "image/png,image/jpeg,image/gif;q=0.9,*/*;q=0.8"
DEFAULT_CONTENT_TYPE = "application/octet-stream"


def _media_type(content_type: Optional[str]) -> str:
    if not content_type:
        return ""
    return content_type.split(";", 1)[0].strip().lower()


def _is_json(media_type: str) -> bool:
    return media_type == "application/json" or media_type.endswith("+json")


def _guess_content_type(content_type: Optional[str], url: str) -> str:
    if content_type:
        return content_type
    guessed, _ = mimetypes.guess_type(urlsplit(url).path)
    return guessed or DEFAULT_CONTENT_TYPE


class DistributionResource(AsyncBaseResource):
    """Fetch distribution assets.

    Example:
        ```python
        asset = await client.distribution.fetch(result_url)
        if asset.kind == "status":
            print(asset.distribution.status)
            if asset.qr_image_data:
                save_png(asset.qr_image_data)
        ```
    """

    async def fetch(self, result_url: str) -> DistributionAsset:
        """Fetch and classify the asset behind ``result_url``.

        Args:
            result_url: An absolute URL, or a path relative to the base URL

        Returns:
            ImageAsset, StatusAsset or OpaqueAsset depending on the content type
        """
        url = self._client.build_url(result_url)
        response = await self._client.perform_absolute_request(url, "GET", accept=RESULT_ACCEPT)
        content_type = response.content_type
        media_type = _media_type(content_type)

        if media_type.startswith("image/"):
            return ImageAsset(payload=response.content, content_type=content_type, source_url=url)

        if _is_json(media_type):
            status = response.decode(DistributionStatus)
            qr_data, qr_content_type = (None, None)
            if status.qr:
                qr_data, qr_content_type = await self._fetch_qr(status.qr)
            return StatusAsset(
                payload=response.content,
                content_type=content_type,
                source_url=url,
                distribution=status,
                qr_image_data=qr_data,
                qr_content_type=qr_content_type,
            )

        return OpaqueAsset(
            payload=response.content,
            content_type=_guess_content_type(content_type, url),
            source_url=url,
        )

    async def _fetch_qr(self, qr_url: str) -> Tuple[Optional[bytes], Optional[str]]:
        """Fetch the QR image without credentials; failures leave it unset."""
        try:
            url = self._client.build_url(qr_url)
            response = await self._client.perform_absolute_request(
                url,
                "GET",
                accept=QR_ACCEPT,
                include_authorization=False,
            )
        except KlarnaServiceError as exc:
            logger.warning(f"QR image fetch from {mask_url(qr_url)} failed: {exc}")
            return None, None
        return response.content, _guess_content_type(response.content_type, url)
