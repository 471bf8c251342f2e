"""Domain models for orders and the tickets issued with them."""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import Self
from uuid import UUID

from events.domain import EventId, Money, OfferId


@dataclass(frozen=True)
class OrderId:
    """Unique identifier for an Order."""

    value: UUID

    @classmethod
    def from_string(cls, value: str) -> Self:
        return cls(value=UUID(value))

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class TicketId:
    """Unique identifier for a Ticket."""

    value: UUID

    def __str__(self) -> str:
        return str(self.value)


class TicketStatus(Enum):
    UNUSED = "unused"
    USED = "used"
    REFUNDED = "refunded"


@dataclass(frozen=True)
class ContactInfo:
    """Buyer contact details captured at checkout time."""

    first_name: str = ""
    last_name: str = ""
    email: str = ""
    mobile_number: str = ""


@dataclass(frozen=True)
class Ticket:
    """Domain representation of an issued Ticket."""

    id: TicketId
    order_id: OrderId
    offer_id: OfferId
    event_id: EventId
    price: Money
    barcode: str
    status: TicketStatus
    scanned_at: datetime | None
    created_at: datetime


@dataclass(frozen=True)
class Order:
    """Domain representation of an Order with its tickets."""

    id: OrderId
    event_id: EventId
    buyer_id: int
    contact: ContactInfo
    charge_id: str
    idempotency_key: str
    is_refunded: bool
    created_at: datetime
    updated_at: datetime
    tickets: tuple[Ticket, ...] = ()

    @property
    def total(self) -> Money:
        return Money(sum((t.price.amount for t in self.tickets), Decimal("0")))
