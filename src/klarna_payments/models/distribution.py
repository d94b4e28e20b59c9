"""Distribution asset models for the Klarna Payments SDK.

A distribution result URL answers with one of three shapes, depending on the
``Content-Type`` of the response: an image, a JSON status document (which may
point at a QR code image), or something else entirely. Each shape is its own
class and ``kind`` tells them apart.
"""
from __future__ import annotations

import base64
from dataclasses import dataclass, field
from typing import Literal, Optional, Union

from .base import KlarnaModel


class DistributionStatus(KlarnaModel):
    """JSON status document served from a distribution result URL."""

    status: Optional[str] = None
    qr: Optional[str] = None
    expires_at: Optional[str] = None


@dataclass(frozen=True)
class _BaseAsset:
    payload: bytes
    content_type: str
    source_url: str

    def _preview_bytes(self, prefer_qr: bool) -> tuple[bytes, str]:
        return self.payload, self.content_type

    def data_url(self, prefer_qr: bool = True) -> str:
        """Render the asset as a ``data:`` URL for previews and debugging."""
        data, content_type = self._preview_bytes(prefer_qr)
        encoded = base64.b64encode(data).decode("ascii")
        return f"data:{content_type};base64,{encoded}"


@dataclass(frozen=True)
class ImageAsset(_BaseAsset):
    """The result URL served an image directly."""

    kind: Literal["image"] = field(default="image", init=False)


@dataclass(frozen=True)
class StatusAsset(_BaseAsset):
    """The result URL served a JSON status document."""

    distribution: DistributionStatus = field(default_factory=DistributionStatus)
    qr_image_data: Optional[bytes] = None
    qr_content_type: Optional[str] = None
    kind: Literal["status"] = field(default="status", init=False)

    def _preview_bytes(self, prefer_qr: bool) -> tuple[bytes, str]:
        if prefer_qr and self.qr_image_data is not None:
            return self.qr_image_data, self.qr_content_type or "image/png"
        return self.payload, self.content_type


@dataclass(frozen=True)
class OpaqueAsset(_BaseAsset):
    """The result URL served something that is neither an image nor JSON."""

    kind: Literal["opaque"] = field(default="opaque", init=False)


DistributionAsset = Union[ImageAsset, StatusAsset, OpaqueAsset]
