"""Domain models representing persisted state.

These are pure domain objects with no API input rules.
Django ORM models are in events/models.py (persistence layer).
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Any

from events.domain.value_objects import EventId, EventStatus, Money, OfferId, Quantity


@dataclass(frozen=True)
class Event:
    """Domain representation of an Event."""

    id: EventId
    name: str
    status: EventStatus
    timezone: str
    venue: dict[str, Any] | None
    start_date: datetime | None
    end_date: datetime | None
    created_at: datetime
    updated_at: datetime

    @property
    def is_on_sale(self) -> bool:
        return self.status is EventStatus.ACTIVE


@dataclass(frozen=True)
class Offer:
    """Domain representation of an Offer (a purchasable ticket tier)."""

    id: OfferId
    event_id: EventId
    name: str
    price: Money
    quantity: Quantity
    min_order_quantity: int
    max_order_quantity: int
    start_sale_date: datetime | None
    end_sale_date: datetime | None
    created_at: datetime
    updated_at: datetime

    def __post_init__(self) -> None:
        if self.min_order_quantity < 1:
            raise ValueError("Minimum order quantity must be at least 1")
        if self.max_order_quantity < self.min_order_quantity:
            raise ValueError("Maximum order quantity cannot be less than the minimum")

    def accepts_order_of(self, quantity: int) -> bool:
        return self.min_order_quantity <= quantity <= self.max_order_quantity

    def is_on_sale_at(self, moment: datetime) -> bool:
        """Return True if ``moment`` falls inside the sale window. Open ends are unbounded."""
        if self.start_sale_date is not None and moment < self.start_sale_date:
            return False
        if self.end_sale_date is not None and moment > self.end_sale_date:
            return False
        return True

    def covers(self, quantity: int) -> bool:
        return self.quantity.value >= quantity
