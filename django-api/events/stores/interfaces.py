"""Store interfaces (repository pattern).

Stores must be swappable and return domain models.
"""

from abc import ABC, abstractmethod

from events.domain import Event, EventId, Offer, OfferId


class EventStore(ABC):
    """Interface for event persistence operations."""

    @abstractmethod
    def get_event(self, event_id: EventId) -> Event | None:
        """Return an event by ID, or None if not found."""
        ...


class OfferStore(ABC):
    """Interface for offer persistence, including the inventory ledger."""

    @abstractmethod
    def get_offer(self, offer_id: OfferId) -> Offer | None:
        """Return an offer by ID with its current remaining quantity, or None."""
        ...

    @abstractmethod
    def reserve(self, offer_id: OfferId, quantity: int) -> bool:
        """Atomically take ``quantity`` units from an offer.

        Implemented as a single conditional update that only applies when the
        remaining quantity covers the request. Returns True if the row was
        updated, False if stock was insufficient or the offer is gone.
        """
        ...

    @abstractmethod
    def release(self, offer_id: OfferId, quantity: int) -> None:
        """Return ``quantity`` units to an offer (administrative restock)."""
        ...
