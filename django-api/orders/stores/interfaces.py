"""Store interfaces (repository pattern).

Stores must be swappable and return domain models.
"""

from abc import ABC, abstractmethod

from events.domain import EventId, Money, OfferId
from orders.domain import ContactInfo, Order, OrderId


class DuplicateBarcodeError(Exception):
    """Raised when a ticket insert hits the (event, barcode) unique constraint."""


class DuplicateOrderError(Exception):
    """Raised when an order with the same charge or idempotency key already exists."""


class OrderStore(ABC):
    """Interface for order and ticket persistence operations."""

    @abstractmethod
    def get_order(self, order_id: OrderId) -> Order | None:
        """Return an order with its tickets, or None if not found."""
        ...

    @abstractmethod
    def find_by_idempotency_key(self, key: str) -> Order | None:
        """Return the committed order created under ``key``, if any."""
        ...

    @abstractmethod
    def list_orders_for_buyer(self, buyer_id: int) -> list[Order]:
        """Return a buyer's orders ordered by created_at descending."""
        ...

    @abstractmethod
    def create_order(
        self,
        event_id: EventId,
        buyer_id: int,
        contact: ContactInfo,
        charge_id: str,
        idempotency_key: str,
    ) -> OrderId:
        """Insert an order row.

        Raises:
            DuplicateOrderError: If the charge or idempotency key is already used.
        """
        ...

    @abstractmethod
    def barcode_exists(self, event_id: EventId, barcode: str) -> bool:
        """Check if a ticket for the event already carries ``barcode``."""
        ...

    @abstractmethod
    def add_ticket(
        self,
        order_id: OrderId,
        offer_id: OfferId,
        event_id: EventId,
        price: Money,
        barcode: str,
    ) -> None:
        """Insert one unused ticket.

        Raises:
            DuplicateBarcodeError: If the barcode is already taken for the event.
        """
        ...

    @abstractmethod
    def record_compensated_charge(
        self,
        idempotency_key: str,
        buyer_id: int,
        charge_id: str,
        amount: int,
        currency: str,
        refunded: bool,
    ) -> None:
        """Record a charge whose checkout did not commit. Recording a charge again updates it."""
        ...

    @abstractmethod
    def count_compensated_charges(self, idempotency_key: str) -> int:
        """Return how many charges under ``idempotency_key`` were compensated."""
        ...
