from events.domain.models import Event, Offer
from events.domain.value_objects import EventId, EventStatus, Money, OfferId, Quantity

__all__ = [
    "Event",
    "Offer",
    "EventId",
    "OfferId",
    "EventStatus",
    "Money",
    "Quantity",
]
