"""Django ORM implementation of the event and offer stores."""

from django.db.models import F

from events import models
from events.domain import (
    Event,
    EventId,
    EventStatus,
    Money,
    Offer,
    OfferId,
    Quantity,
)
from events.stores.interfaces import EventStore, OfferStore


def _to_event(row: models.Event) -> Event:
    return Event(
        id=EventId(row.id),
        name=row.name,
        status=EventStatus(row.status),
        timezone=row.timezone,
        venue=row.venue,
        start_date=row.start_date,
        end_date=row.end_date,
        created_at=row.created_at,
        updated_at=row.updated_at,
    )


def _to_offer(row: models.Offer) -> Offer:
    return Offer(
        id=OfferId(row.id),
        event_id=EventId(row.event_id),
        name=row.name,
        price=Money(row.price),
        quantity=Quantity(row.quantity),
        min_order_quantity=row.min_order_quantity,
        max_order_quantity=row.max_order_quantity,
        start_sale_date=row.start_sale_date,
        end_sale_date=row.end_sale_date,
        created_at=row.created_at,
        updated_at=row.updated_at,
    )


class DjangoEventStore(EventStore):
    """PostgreSQL-backed event store using Django ORM."""

    def get_event(self, event_id: EventId) -> Event | None:
        row = models.Event.objects.filter(id=event_id.value).first()
        return _to_event(row) if row else None


class DjangoOfferStore(OfferStore):
    """PostgreSQL-backed offer store using Django ORM."""

    def get_offer(self, offer_id: OfferId) -> Offer | None:
        row = models.Offer.objects.filter(id=offer_id.value).first()
        return _to_offer(row) if row else None

    def reserve(self, offer_id: OfferId, quantity: int) -> bool:
        updated = models.Offer.objects.filter(
            id=offer_id.value, quantity__gte=quantity
        ).update(quantity=F("quantity") - quantity)
        return updated == 1

    def release(self, offer_id: OfferId, quantity: int) -> None:
        models.Offer.objects.filter(id=offer_id.value).update(
            quantity=F("quantity") + quantity
        )
