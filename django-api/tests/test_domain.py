"""Unit tests for domain primitives.

These test invariants that must hold at construction time.
Run with: pytest tests/test_domain.py -v
"""

from datetime import datetime, timedelta, timezone
from decimal import Decimal
from uuid import uuid4

import pytest

from common.errors import ErrorKind, InsufficientInventoryError, PaymentDeclinedError
from events.domain import EventId, Money, Offer, OfferId, Quantity


def _offer(**overrides) -> Offer:
    now = datetime(2026, 5, 1, tzinfo=timezone.utc)
    fields = dict(
        id=OfferId(uuid4()),
        event_id=EventId(uuid4()),
        name="GA",
        price=Money(Decimal("10.00")),
        quantity=Quantity(5),
        min_order_quantity=1,
        max_order_quantity=50,
        start_sale_date=None,
        end_sale_date=None,
        created_at=now,
        updated_at=now,
    )
    fields.update(overrides)
    return Offer(**fields)


class TestMoney:
    """Tests for Money value object."""

    def test_money_accepts_positive_amount(self):
        """Money can be created with positive amount."""
        assert Money(Decimal("12.50")).amount == Decimal("12.50")

    def test_money_accepts_zero(self):
        """Money can be created with zero."""
        assert Money(Decimal("0")).amount == 0

    def test_money_rejects_negative_amount(self):
        """Money raises ValueError for negative amount."""
        with pytest.raises(ValueError):
            Money(Decimal("-0.01"))

    def test_money_str_format(self):
        """Money string representation is formatted to 2 decimal places."""
        assert str(Money(Decimal("7.5"))) == "7.50"

    def test_multiplication_by_quantity(self):
        assert Money(Decimal("10.00")) * 3 == Money(Decimal("30.00"))

    def test_minor_units(self):
        """Amounts convert to cents, rounding half up."""
        assert Money(Decimal("19.99")).to_minor_units() == 1999
        assert (Money(Decimal("19.99")) * 3).to_minor_units() == 5997
        assert Money(Decimal("0.005")).to_minor_units() == 1


class TestQuantity:
    """Tests for Quantity value object."""

    def test_quantity_accepts_zero(self):
        assert Quantity(0).value == 0

    def test_quantity_rejects_negative_value(self):
        """Quantity raises ValueError for negative value."""
        with pytest.raises(ValueError):
            Quantity(-1)


class TestIds:
    """Tests for identifier value objects."""

    def test_from_string_valid_uuid(self):
        """EventId.from_string parses valid UUID."""
        value = uuid4()
        assert EventId.from_string(str(value)).value == value

    def test_from_string_invalid_uuid(self):
        """OfferId.from_string raises ValueError for invalid UUID."""
        with pytest.raises(ValueError):
            OfferId.from_string("not-a-uuid")


class TestOffer:
    """Tests for Offer invariants and rules."""

    def test_rejects_max_below_min(self):
        with pytest.raises(ValueError):
            _offer(min_order_quantity=5, max_order_quantity=2)

    def test_rejects_zero_minimum(self):
        with pytest.raises(ValueError):
            _offer(min_order_quantity=0)

    def test_order_limits_are_inclusive(self):
        offer = _offer(min_order_quantity=2, max_order_quantity=4)
        assert not offer.accepts_order_of(1)
        assert offer.accepts_order_of(2)
        assert offer.accepts_order_of(4)
        assert not offer.accepts_order_of(5)

    def test_open_sale_window_is_always_on_sale(self):
        assert _offer().is_on_sale_at(datetime(2030, 1, 1, tzinfo=timezone.utc))

    def test_sale_window_bounds(self):
        start = datetime(2026, 6, 1, tzinfo=timezone.utc)
        end = start + timedelta(days=10)
        offer = _offer(start_sale_date=start, end_sale_date=end)
        assert not offer.is_on_sale_at(start - timedelta(seconds=1))
        assert offer.is_on_sale_at(start)
        assert offer.is_on_sale_at(end)
        assert not offer.is_on_sale_at(end + timedelta(seconds=1))

    def test_covers(self):
        offer = _offer(quantity=Quantity(3))
        assert offer.covers(3)
        assert not offer.covers(4)


class TestErrorKinds:
    """Errors expose a category callers can branch on."""

    def test_inventory_error_kind(self):
        assert InsufficientInventoryError("x", 3).kind is ErrorKind.INSUFFICIENT_INVENTORY

    def test_declined_is_payment_kind(self):
        err = PaymentDeclinedError("card_declined")
        assert err.kind is ErrorKind.PAYMENT
        assert str(err) == "CARD_DECLINED: Card declined"
