"""Events emitted by the client-side payment view.

The rendering SDK lives outside this package. Whatever hosts it translates
its callbacks into the events below and hands them to a single
``SDKEventHandler`` (for example ``CheckoutFlow.handle_event``).
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Literal, Optional, Union


@dataclass(frozen=True)
class Initialized:
    kind: Literal["initialized"] = field(default="initialized", init=False)


@dataclass(frozen=True)
class Loaded:
    kind: Literal["loaded"] = field(default="loaded", init=False)


@dataclass(frozen=True)
class Authorized:
    """The customer finished the authorization step."""

    approved: bool
    token: Optional[str] = field(default=None, repr=False)
    finalize_required: bool = False
    kind: Literal["authorized"] = field(default="authorized", init=False)


@dataclass(frozen=True)
class Reauthorized:
    approved: bool
    token: Optional[str] = field(default=None, repr=False)
    kind: Literal["reauthorized"] = field(default="reauthorized", init=False)


@dataclass(frozen=True)
class Finalized:
    approved: bool
    token: Optional[str] = field(default=None, repr=False)
    kind: Literal["finalized"] = field(default="finalized", init=False)


@dataclass(frozen=True)
class Resized:
    height: float
    kind: Literal["resized"] = field(default="resized", init=False)


@dataclass(frozen=True)
class Failed:
    error_name: str
    message: str = ""
    is_fatal: bool = False
    kind: Literal["failed"] = field(default="failed", init=False)


SDKEvent = Union[Initialized, Loaded, Authorized, Reauthorized, Finalized, Resized, Failed]

SDKEventHandler = Callable[[SDKEvent], None]
