"""Unit tests for OrderService.

These test error handling and domain error mapping.
Run with: pytest tests/test_services.py -v
"""

from datetime import timedelta
from uuid import uuid4

import pytest
from django.contrib.auth.models import AnonymousUser
from django.utils import timezone

from common.errors import AuthenticationRequiredError, ForbiddenError, OrderNotFoundError
from orders.models import Order as OrderRow
from orders.services import OrderService
from orders.stores import DjangoOrderStore


@pytest.fixture
def service() -> OrderService:
    return OrderService(DjangoOrderStore())


@pytest.fixture
def place_order(make_service, make_request, offer):
    def _place(buyer, quantity=1):
        return make_service().checkout(buyer, make_request(offer, quantity))

    return _place


@pytest.mark.django_db
class TestListOrders:
    """Tests for OrderService.list_orders."""

    def test_lists_only_own_orders_newest_first(self, service, place_order, buyer, other_buyer):
        older = place_order(buyer)
        newer = place_order(buyer, quantity=2)
        place_order(other_buyer)
        OrderRow.objects.filter(id=older.id.value).update(
            created_at=timezone.now() - timedelta(days=1)
        )

        orders = service.list_orders(buyer)

        assert [o.id for o in orders] == [newer.id, older.id]
        assert len(orders[0].tickets) == 2

    def test_empty_history(self, service, buyer):
        assert service.list_orders(buyer) == []

    def test_anonymous_buyer_raises_error(self, service):
        with pytest.raises(AuthenticationRequiredError):
            service.list_orders(AnonymousUser())


@pytest.mark.django_db
class TestGetOrder:
    """Tests for OrderService.get_order."""

    def test_returns_own_order(self, service, place_order, buyer):
        placed = place_order(buyer, quantity=3)
        order = service.get_order(buyer, str(placed.id))
        assert order.id == placed.id
        assert len(order.tickets) == 3

    def test_invalid_id_raises_not_found(self, service, buyer):
        """A malformed UUID is reported the same way as a missing order."""
        with pytest.raises(OrderNotFoundError):
            service.get_order(buyer, "not-a-uuid")

    def test_missing_order_raises_not_found(self, service, buyer):
        with pytest.raises(OrderNotFoundError):
            service.get_order(buyer, str(uuid4()))

    def test_other_buyers_order_is_forbidden(self, service, place_order, buyer, other_buyer):
        placed = place_order(buyer)
        with pytest.raises(ForbiddenError):
            service.get_order(other_buyer, str(placed.id))

    def test_anonymous_buyer_raises_error(self, service, place_order, buyer):
        placed = place_order(buyer)
        with pytest.raises(AuthenticationRequiredError):
            service.get_order(AnonymousUser(), str(placed.id))
