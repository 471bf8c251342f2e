"""Django ORM implementation of the OrderStore."""

from django.db import IntegrityError, transaction

from events.domain import EventId, Money, OfferId
from orders import models
from orders.domain import ContactInfo, Order, OrderId, Ticket, TicketId, TicketStatus
from orders.stores.interfaces import DuplicateBarcodeError, DuplicateOrderError, OrderStore


def _to_ticket(row: models.Ticket) -> Ticket:
    return Ticket(
        id=TicketId(row.id),
        order_id=OrderId(row.order_id),
        offer_id=OfferId(row.offer_id),
        event_id=EventId(row.event_id),
        price=Money(row.price),
        barcode=row.barcode,
        status=TicketStatus(row.status),
        scanned_at=row.scanned_at,
        created_at=row.created_at,
    )


def _to_order(row: models.Order) -> Order:
    return Order(
        id=OrderId(row.id),
        event_id=EventId(row.event_id),
        buyer_id=row.user_id,
        contact=ContactInfo(
            first_name=row.first_name,
            last_name=row.last_name,
            email=row.email,
            mobile_number=row.mobile_number,
        ),
        charge_id=row.charge_id,
        idempotency_key=row.idempotency_key,
        is_refunded=row.is_refunded,
        created_at=row.created_at,
        updated_at=row.updated_at,
        tickets=tuple(_to_ticket(t) for t in row.tickets.all()),
    )


class DjangoOrderStore(OrderStore):
    """PostgreSQL-backed order store using Django ORM."""

    def _orders(self):
        return models.Order.objects.prefetch_related("tickets")

    def get_order(self, order_id: OrderId) -> Order | None:
        row = self._orders().filter(id=order_id.value).first()
        return _to_order(row) if row else None

    def find_by_idempotency_key(self, key: str) -> Order | None:
        row = self._orders().filter(idempotency_key=key).first()
        return _to_order(row) if row else None

    def list_orders_for_buyer(self, buyer_id: int) -> list[Order]:
        rows = self._orders().filter(user_id=buyer_id).order_by("-created_at")
        return [_to_order(row) for row in rows]

    def create_order(
        self,
        event_id: EventId,
        buyer_id: int,
        contact: ContactInfo,
        charge_id: str,
        idempotency_key: str,
    ) -> OrderId:
        try:
            with transaction.atomic():
                row = models.Order.objects.create(
                    event_id=event_id.value,
                    user_id=buyer_id,
                    first_name=contact.first_name,
                    last_name=contact.last_name,
                    email=contact.email,
                    mobile_number=contact.mobile_number,
                    charge_id=charge_id,
                    idempotency_key=idempotency_key,
                )
        except IntegrityError as exc:
            raise DuplicateOrderError(charge_id) from exc
        return OrderId(row.id)

    def barcode_exists(self, event_id: EventId, barcode: str) -> bool:
        return models.Ticket.objects.filter(event_id=event_id.value, barcode=barcode).exists()

    def add_ticket(
        self,
        order_id: OrderId,
        offer_id: OfferId,
        event_id: EventId,
        price: Money,
        barcode: str,
    ) -> None:
        # Savepoint so a constraint hit leaves the outer transaction usable.
        try:
            with transaction.atomic():
                models.Ticket.objects.create(
                    order_id=order_id.value,
                    offer_id=offer_id.value,
                    event_id=event_id.value,
                    price=price.amount,
                    barcode=barcode,
                    status=models.Ticket.Status.UNUSED,
                )
        except IntegrityError as exc:
            raise DuplicateBarcodeError(barcode) from exc

    def record_compensated_charge(
        self,
        idempotency_key: str,
        buyer_id: int,
        charge_id: str,
        amount: int,
        currency: str,
        refunded: bool,
    ) -> None:
        models.CompensatedCharge.objects.update_or_create(
            charge_id=charge_id,
            defaults={
                "idempotency_key": idempotency_key,
                "user_id": buyer_id,
                "amount": amount,
                "currency": currency,
                "refunded": refunded,
            },
        )

    def count_compensated_charges(self, idempotency_key: str) -> int:
        return models.CompensatedCharge.objects.filter(idempotency_key=idempotency_key).count()
