"""Order service - read access to a buyer's orders.

Services:
- Depend only on interfaces (stores)
- Validate domain invariants
- Perform orchestration and error mapping
- Return domain models or domain errors
"""

from common.errors import AuthenticationRequiredError, ForbiddenError, OrderNotFoundError
from orders.domain import Order, OrderId
from orders.stores.interfaces import OrderStore


class OrderService:
    """Service for order history operations."""

    def __init__(self, store: OrderStore) -> None:
        self._store = store

    def list_orders(self, buyer) -> list[Order]:
        """Return the buyer's orders, newest first.

        Raises:
            AuthenticationRequiredError: If the buyer is anonymous.
        """
        if buyer is None or not buyer.is_authenticated:
            raise AuthenticationRequiredError()
        return self._store.list_orders_for_buyer(buyer.pk)

    def get_order(self, buyer, order_id: str) -> Order:
        """Return one of the buyer's orders by ID.

        Raises:
            AuthenticationRequiredError: If the buyer is anonymous.
            OrderNotFoundError: If the order_id is malformed or the order does not exist.
            ForbiddenError: If the order belongs to another buyer.
        """
        if buyer is None or not buyer.is_authenticated:
            raise AuthenticationRequiredError()
        try:
            oid = OrderId.from_string(order_id)
        except ValueError:
            raise OrderNotFoundError(order_id)

        order = self._store.get_order(oid)
        if order is None:
            raise OrderNotFoundError(order_id)
        if order.buyer_id != buyer.pk:
            raise ForbiddenError()
        return order
