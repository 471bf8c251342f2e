"""Unit tests for checkout input parsing.

Run with: pytest tests/test_requests.py -v
"""

import uuid
from datetime import datetime, timezone
from decimal import Decimal

import pytest

from common.errors import CheckoutValidationError
from events.domain import EventId, Money, Offer, OfferId, Quantity
from orders.domain import parse_checkout_request


def _payload(**overrides):
    data = {
        "offerId": str(uuid.uuid4()),
        "quantity": 2,
        "paymentToken": "tok_visa",
    }
    data.update(overrides)
    return data


def _fields(exc_info) -> dict[str, str]:
    return {e.field: e.message for e in exc_info.value.errors}


class TestParseCheckoutRequest:
    """Tests for parse_checkout_request."""

    def test_minimal_valid_payload(self):
        request = parse_checkout_request(_payload())
        assert request.quantity == 2
        assert request.payment_token == "tok_visa"
        assert request.contact.email == ""
        assert request.idempotency_key is None

    def test_contact_fields_are_captured(self):
        request = parse_checkout_request(
            _payload(
                firstName=" Ada ",
                lastName="Lovelace",
                email="ada@example.com",
                mobileNumber="+15551234567",
                idempotencyKey="retry-123",
            )
        )
        assert request.contact.first_name == "Ada"
        assert request.contact.last_name == "Lovelace"
        assert request.contact.email == "ada@example.com"
        assert request.contact.mobile_number == "+15551234567"
        assert request.idempotency_key == "retry-123"

    def test_numeric_string_quantity_is_accepted(self):
        assert parse_checkout_request(_payload(quantity="3")).quantity == 3

    def test_all_errors_are_collected(self):
        """Every invalid field is reported in one error."""
        with pytest.raises(CheckoutValidationError) as exc_info:
            parse_checkout_request(
                {
                    "offerId": "nope",
                    "quantity": 0,
                    "paymentToken": "",
                    "firstName": "x" * 51,
                    "email": "not-an-email",
                    "mobileNumber": "12ab",
                }
            )
        assert set(_fields(exc_info)) == {
            "offerId",
            "quantity",
            "paymentToken",
            "firstName",
            "email",
            "mobileNumber",
        }

    def test_missing_required_fields(self):
        with pytest.raises(CheckoutValidationError) as exc_info:
            parse_checkout_request({})
        fields = _fields(exc_info)
        assert fields["offerId"] == "The offerId field cannot be empty."
        assert fields["quantity"] == "The quantity field cannot be empty."
        assert fields["paymentToken"] == "The paymentToken field cannot be empty."

    @pytest.mark.parametrize("quantity", [-1, 0, 1.5, "two", True])
    def test_rejects_non_positive_or_non_integer_quantity(self, quantity):
        with pytest.raises(CheckoutValidationError) as exc_info:
            parse_checkout_request(_payload(quantity=quantity))
        assert "quantity" in _fields(exc_info)

    def test_rejects_malformed_token(self):
        with pytest.raises(CheckoutValidationError) as exc_info:
            parse_checkout_request(_payload(paymentToken="tok visa; drop"))
        assert _fields(exc_info) == {"paymentToken": "The paymentToken field is malformed."}

    def test_rejects_overlong_email(self):
        with pytest.raises(CheckoutValidationError) as exc_info:
            parse_checkout_request(_payload(email=("a" * 45) + "@example.com"))
        assert "email" in _fields(exc_info)

    def test_blank_optional_fields_are_ignored(self):
        request = parse_checkout_request(_payload(email="  ", mobileNumber="", lastName=None))
        assert request.contact.email == ""
        assert request.contact.mobile_number == ""


def _limited_offer(offer_id: OfferId, min_order_quantity=1, max_order_quantity=4) -> Offer:
    now = datetime(2026, 5, 1, tzinfo=timezone.utc)
    return Offer(
        id=offer_id,
        event_id=EventId(uuid.uuid4()),
        name="GA",
        price=Money(Decimal("10.00")),
        quantity=Quantity(20),
        min_order_quantity=min_order_quantity,
        max_order_quantity=max_order_quantity,
        start_sale_date=None,
        end_sale_date=None,
        created_at=now,
        updated_at=now,
    )


class TestOrderLimits:
    """Offer order limits are checked together with the other fields."""

    def test_limit_error_reported_with_contact_errors(self):
        offer_id = uuid.uuid4()
        with pytest.raises(CheckoutValidationError) as exc_info:
            parse_checkout_request(
                _payload(offerId=str(offer_id), quantity=5, email="not-an-email"),
                find_offer=lambda oid: _limited_offer(oid),
            )
        fields = _fields(exc_info)
        assert set(fields) == {"quantity", "email"}
        assert fields["quantity"] == "The quantity field must be between 1 and 4."

    def test_quantity_within_limits_is_accepted(self):
        request = parse_checkout_request(_payload(quantity=4), find_offer=lambda oid: _limited_offer(oid))
        assert request.quantity == 4

    def test_below_minimum(self):
        with pytest.raises(CheckoutValidationError) as exc_info:
            parse_checkout_request(
                _payload(quantity=1),
                find_offer=lambda oid: _limited_offer(oid, min_order_quantity=2),
            )
        assert "quantity" in _fields(exc_info)

    def test_unknown_offer_is_left_to_checkout(self):
        request = parse_checkout_request(_payload(quantity=99), find_offer=lambda oid: None)
        assert request.quantity == 99

    def test_lookup_skipped_when_quantity_is_invalid(self):
        looked_up = []
        with pytest.raises(CheckoutValidationError):
            parse_checkout_request(_payload(quantity=0), find_offer=looked_up.append)
        assert looked_up == []
