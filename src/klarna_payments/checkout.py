"""
Checkout orchestration for the Klarna Payments SDK.

``CheckoutFlow`` drives one checkout attempt through its steps:
session creation -> client-side authorization -> order placement, followed
by any number of order management actions.

    IDLE --start--> SESSION_CREATED --authorized--> AUTHORIZED --place_order--> ORDER_CREATED
                          |                           |
                          +--------declined-----------+--> DECLINED

Each step checks the current state before touching the network, so calling
a step out of order raises ``CheckoutStateError`` without sending anything.
"""
from __future__ import annotations

import logging
import uuid
from enum import Enum
from typing import TYPE_CHECKING, List, Optional

from .models.errors import CheckoutStateError
from .models.events import Authorized, Failed, Finalized, Reauthorized, SDKEvent
from .models.order_management import (
    CancelOrderRequest,
    CaptureRequest,
    CaptureResult,
    RefundRequest,
    RefundResult,
)
from .models.payment import OrderRequest, OrderResponse, SessionRequest, SessionResponse

if TYPE_CHECKING:
    from .client import KlarnaClient

logger = logging.getLogger(__name__)


class CheckoutState(str, Enum):
    """Where a checkout attempt currently is."""

    IDLE = "idle"
    SESSION_CREATED = "session_created"
    AUTHORIZED = "authorized"
    DECLINED = "declined"
    ORDER_CREATED = "order_created"


class PostOrderAction(str, Enum):
    """Order management actions taken after the order was placed."""

    CAPTURED = "captured"
    REFUNDED = "refunded"
    CANCELLED = "cancelled"
    RELEASED = "released"


_AUTHORIZABLE_STATES = (CheckoutState.SESSION_CREATED, CheckoutState.AUTHORIZED)


class CheckoutFlow:
    """
    Orchestrates a single checkout attempt.

    Not meant to be shared across tasks; create one flow per attempt.

    Example:
        ```python
        flow = CheckoutFlow(client)
        session = await flow.start(session_request)

        # Hand session.client_token to the payment view; feed its events back
        flow.handle_event(Authorized(approved=True, token=token))

        order = await flow.place_order(merchant_reference1="order-1001")
        await flow.capture()
        ```

    Attributes:
        state: Current checkout state
        actions: Post-order actions, in the order they happened
        events: Every SDK event passed to ``handle_event``
    """

    def __init__(self, client: "KlarnaClient"):
        self._client = client
        self.state = CheckoutState.IDLE
        self.session: Optional[SessionResponse] = None
        self.session_request: Optional[SessionRequest] = None
        self.order: Optional[OrderResponse] = None
        self.order_request: Optional[OrderRequest] = None
        self.actions: List[PostOrderAction] = []
        self.events: List[SDKEvent] = []
        self._authorization_token: Optional[str] = None
        self._release_key: Optional[str] = None
        self._cancel_key: Optional[str] = None

    def __repr__(self) -> str:
        return f"CheckoutFlow(state={self.state.value!r}, actions={[a.value for a in self.actions]!r})"

    # ==================== Helpers ====================

    @property
    def client_token(self) -> Optional[str]:
        return self.session.client_token if self.session else None

    @property
    def session_id(self) -> Optional[str]:
        return self.session.session_id if self.session else None

    @property
    def order_id(self) -> Optional[str]:
        return self.order.order_id if self.order else None

    @property
    def authorization_token(self) -> Optional[str]:
        return self._authorization_token

    def _require(self, operation: str, *allowed: CheckoutState) -> None:
        if self.state not in allowed:
            raise CheckoutStateError(self.state.value, operation)

    def _transition(self, new_state: CheckoutState) -> None:
        logger.info(f"Checkout {self.state.value} -> {new_state.value}")
        self.state = new_state

    def _require_order_id(self, operation: str) -> str:
        self._require(operation, CheckoutState.ORDER_CREATED)
        if self.order is None:
            raise CheckoutStateError(self.state.value, operation)
        return self.order.order_id

    # ==================== Session & Authorization ====================

    async def start(self, session_request: SessionRequest) -> SessionResponse:
        """Create the payment session.

        Args:
            session_request: Purchase details and order lines

        Returns:
            The session; pass ``client_token`` to the payment view

        Raises:
            CheckoutStateError: If the flow has already started
        """
        self._require("start", CheckoutState.IDLE)
        session = await self._client.payments.create_session(session_request)
        self.session = session
        self.session_request = session_request
        logger.info(f"Payment session created (session_id={session.session_id})")
        self._transition(CheckoutState.SESSION_CREATED)
        return session

    def record_authorization(self, approved: bool, authorization_token: Optional[str]) -> CheckoutState:
        """Record the outcome of the client-side authorization.

        Approved with a token moves the flow to AUTHORIZED; a later
        reauthorization replaces the token. Not approved is terminal. Approved
        without a token (finalization still pending) changes nothing.
        """
        self._require("record authorization", *_AUTHORIZABLE_STATES)
        if not approved:
            self._authorization_token = None
            self._transition(CheckoutState.DECLINED)
        elif authorization_token:
            self._authorization_token = authorization_token
            if self.state is not CheckoutState.AUTHORIZED:
                self._transition(CheckoutState.AUTHORIZED)
            else:
                logger.info("Authorization token replaced")
        else:
            logger.info("Authorization approved; waiting for finalization")
        return self.state

    def handle_event(self, event: SDKEvent) -> None:
        """Consume an event from the payment view.

        Can be registered directly as the ``SDKEventHandler``: it never raises.
        Authorization events that arrive once the flow is past authorization
        (late or duplicate callbacks) are recorded and otherwise ignored.
        """
        self.events.append(event)
        if isinstance(event, (Authorized, Reauthorized, Finalized)):
            if self.state not in _AUTHORIZABLE_STATES:
                logger.warning(f"Ignoring {event.kind} event while checkout is {self.state.value}")
                return
            self.record_authorization(event.approved, event.token)
        elif isinstance(event, Failed):
            logger.warning(f"Payment view reported {event.error_name} (fatal={event.is_fatal})")
            if event.is_fatal and self.state is CheckoutState.SESSION_CREATED:
                self._transition(CheckoutState.DECLINED)
        else:
            logger.debug(f"Payment view event: {event.kind}")

    # ==================== Order ====================

    async def place_order(
        self,
        order_request: Optional[OrderRequest] = None,
        merchant_reference1: Optional[str] = None,
    ) -> OrderResponse:
        """Create the order from the authorization.

        Args:
            order_request: Order body; built from the session request when omitted
            merchant_reference1: Merchant reference for the default order body

        Raises:
            CheckoutStateError: Unless the flow is AUTHORIZED

        On failure the flow stays AUTHORIZED so the order can be retried.
        """
        self._require("place order", CheckoutState.AUTHORIZED)
        if order_request is None:
            if self.session_request is None:
                raise CheckoutStateError(self.state.value, "place order")
            order_request = OrderRequest.from_session(
                self.session_request, merchant_reference1=merchant_reference1
            )
        if not self._authorization_token:
            raise CheckoutStateError(self.state.value, "place order")
        order = await self._client.payments.create_order(self._authorization_token, order_request)
        self.order = order
        self.order_request = order_request
        logger.info(f"Order created (order_id={order.order_id}, fraud_status={order.fraud_status})")
        self._transition(CheckoutState.ORDER_CREATED)
        return order

    # ==================== Order Management ====================

    def _record(self, action: PostOrderAction) -> None:
        self.actions.append(action)
        logger.info(f"Order {self.order_id} {action.value}")

    async def capture(
        self,
        request: Optional[CaptureRequest] = None,
        idempotency_key: Optional[str] = None,
    ) -> CaptureResult:
        """Capture the order; the full order amount when ``request`` is omitted."""
        order_id = self._require_order_id("capture")
        if request is None:
            if self.order_request is None:
                raise CheckoutStateError(self.state.value, "capture")
            request = CaptureRequest(captured_amount=self.order_request.order_amount)
        result = await self._client.order_management.capture_order(
            order_id, request, idempotency_key=idempotency_key
        )
        self._record(PostOrderAction.CAPTURED)
        return result

    async def refund(
        self,
        request: RefundRequest,
        idempotency_key: Optional[str] = None,
    ) -> RefundResult:
        """Refund part or all of the captured amount."""
        order_id = self._require_order_id("refund")
        result = await self._client.order_management.refund_order(
            order_id, request, idempotency_key=idempotency_key
        )
        self._record(PostOrderAction.REFUNDED)
        return result

    async def cancel(self, request: Optional[CancelOrderRequest] = None) -> None:
        """Cancel the order. Retries within this flow reuse the same key."""
        order_id = self._require_order_id("cancel")
        if self._cancel_key is None:
            self._cancel_key = str(uuid.uuid4())
        await self._client.order_management.cancel_order(
            order_id, request, idempotency_key=self._cancel_key
        )
        self._record(PostOrderAction.CANCELLED)

    async def release_remaining_authorization(self, idempotency_key: Optional[str] = None) -> None:
        """Release the uncaptured remainder. Retries within this flow reuse the same key."""
        order_id = self._require_order_id("release remaining authorization")
        if idempotency_key is None:
            if self._release_key is None:
                self._release_key = str(uuid.uuid4())
            idempotency_key = self._release_key
        await self._client.order_management.release_remaining_authorization(
            order_id, idempotency_key=idempotency_key
        )
        self._record(PostOrderAction.RELEASED)
