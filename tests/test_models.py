"""
Tests for request and response models
"""
from urllib.parse import unquote

import pytest
from pydantic import ValidationError

from klarna_payments.models import (
    CaptureRequest,
    Order,
    OrderRequest,
    SessionRequest,
    SessionResponse,
)
from klarna_payments.resources.base import quote_path_segment
from klarna_payments.models import InvalidURLError


class TestSessionRequest:
    """Tests for SessionRequest."""

    def test_wire_round_trip(self, tshirt_session_request):
        """Should validate back to equal field values."""
        wire = tshirt_session_request.to_dict()

        assert SessionRequest.model_validate(wire) == tshirt_session_request
        assert "total_discount_amount" not in wire["order_lines"][0]

    def test_balanced_amount(self, tshirt_session_request):
        """Should report a balanced order."""
        assert tshirt_session_request.is_balanced()
        assert tshirt_session_request.lines_total() == 2000

    def test_unbalanced_amount_is_accepted(self, tshirt_session_request):
        """Should not reject an unbalanced order locally."""
        unbalanced = SessionRequest.model_validate({**tshirt_session_request.to_dict(), "order_amount": 999})

        assert not unbalanced.is_balanced()
        assert unbalanced.order_amount == 999

    def test_models_are_frozen(self, tshirt_session_request):
        """Should not allow mutation."""
        with pytest.raises(ValidationError):
            tshirt_session_request.order_amount = 1


class TestOrderRequest:
    """Tests for OrderRequest."""

    def test_from_session(self, tshirt_session_request):
        """Should copy the purchase from the session."""
        order = OrderRequest.from_session(tshirt_session_request, merchant_reference2="ext-2")

        assert order.order_amount == tshirt_session_request.order_amount
        assert order.order_lines == tshirt_session_request.order_lines
        assert order.to_dict()["merchant_reference2"] == "ext-2"
        assert "merchant_reference1" not in order.to_dict()


class TestResponses:
    """Tests for response models."""

    def test_client_token_hidden_from_repr(self, mock_responses):
        """Should keep the client token out of repr."""
        session = SessionResponse.model_validate(mock_responses["session"])

        assert session.client_token not in repr(session)

    def test_unknown_fields_ignored(self, mock_responses):
        """Should ignore fields it does not know."""
        order = Order.model_validate({**mock_responses["om_order"], "new_field": "x"})

        assert order.order_id == mock_responses["om_order"]["order_id"]

    def test_capture_request_excludes_none(self):
        """Should omit unset optional fields on the wire."""
        assert CaptureRequest(captured_amount=100).to_dict() == {"captured_amount": 100}


class TestPathSegmentEncoding:
    """Tests for identifier percent-encoding."""

    @pytest.mark.parametrize("value", ["abc", "a/b", "a?b=c", "a#frag", "spaces here", "ümlaut", "%2F", "a+b&c"])
    def test_reversible(self, value):
        """Should escape reserved characters and decode back to the literal."""
        encoded = quote_path_segment(value)

        assert "/" not in encoded
        assert "?" not in encoded
        assert "#" not in encoded
        assert unquote(encoded) == value

    def test_empty_rejected(self):
        """Should fail closed on empty identifiers."""
        with pytest.raises(InvalidURLError):
            quote_path_segment("")

    def test_unencodable_rejected(self):
        """Should fail closed on identifiers that are not valid UTF-8."""
        with pytest.raises(InvalidURLError):
            quote_path_segment("bad\udc80surrogate")
