"""Checkout service - turns an offer, a quantity and a payment token into an order.

Services:
- Depend only on interfaces (stores, gateways)
- Validate domain invariants
- Perform orchestration and error mapping
- Return domain models or domain errors

The reservation, the charge and the order insert share one database
transaction. Any failure before commit rolls the reservation back. A charge
that succeeded before a failed commit is refunded and recorded, and later
attempts under the same idempotency key charge under a fresh processor key.
"""

import logging
import uuid
from collections.abc import Callable
from datetime import datetime

from django.db import DatabaseError, transaction
from django.utils import timezone

from common.errors import (
    AuthenticationRequiredError,
    CheckoutValidationError,
    EventNotFoundError,
    EventNotOnSaleError,
    ForbiddenError,
    InsufficientInventoryError,
    OfferNotFoundError,
    PaymentError,
    PaymentGatewayError,
)
from events.domain import Event, Money, Offer
from events.stores.interfaces import EventStore, OfferStore
from orders.domain import CheckoutRequest, Order, OrderId, quantity_limit_error
from orders.gateways.notifications import OrderNotifier
from orders.gateways.payments import Charge, PaymentGateway
from orders.services.barcodes import BarcodeGenerator
from orders.stores.interfaces import DuplicateOrderError, OrderStore

logger = logging.getLogger(__name__)


class CheckoutService:
    """Service for the checkout transaction."""

    def __init__(
        self,
        offers: OfferStore,
        events: EventStore,
        orders: OrderStore,
        payments: PaymentGateway,
        notifier: OrderNotifier,
        barcodes: BarcodeGenerator,
        currency: str = "usd",
        description: str = "Seatsupply",
        clock: Callable[[], datetime] = timezone.now,
    ) -> None:
        self._offers = offers
        self._events = events
        self._orders = orders
        self._payments = payments
        self._notifier = notifier
        self._barcodes = barcodes
        self._currency = currency
        self._description = description
        self._clock = clock

    def checkout(self, buyer, request: CheckoutRequest) -> Order:
        """Purchase ``request.quantity`` tickets of an offer for ``buyer``.

        A request whose idempotency key already produced an order returns that
        order without charging again.

        Raises:
            AuthenticationRequiredError: If the buyer is anonymous.
            ForbiddenError: If the idempotency key belongs to another buyer's order.
            CheckoutValidationError: If the quantity is outside the offer's limits.
            OfferNotFoundError: If the offer does not exist or is not on sale.
            EventNotFoundError: If the offer's event does not exist.
            EventNotOnSaleError: If the event is not active.
            InsufficientInventoryError: If the offer cannot cover the quantity.
            PaymentDeclinedError: If the card was declined.
            PaymentGatewayError: If the processor failed or replayed a refunded charge.
        """
        if buyer is None or not buyer.is_authenticated:
            raise AuthenticationRequiredError()

        if request.idempotency_key:
            existing = self._replay(buyer, request.idempotency_key)
            if existing is not None:
                return existing
        idempotency_key = request.idempotency_key or uuid.uuid4().hex

        offer = self._offers.get_offer(request.offer_id)
        if offer is None or not offer.is_on_sale_at(self._clock()):
            raise OfferNotFoundError(str(request.offer_id))
        if not offer.accepts_order_of(request.quantity):
            raise CheckoutValidationError([quantity_limit_error(offer)])

        logger.info(
            "Checkout started: buyer=%s offer=%s quantity=%d",
            buyer.pk,
            offer.id,
            request.quantity,
        )

        payment_key = self._payment_key(idempotency_key)
        charge: Charge | None = None
        try:
            with transaction.atomic():
                offer, event = self._reserve(request, offer)
                subtotal = offer.price * request.quantity
                charge = self._payments.charge(
                    token=request.payment_token,
                    amount=subtotal.to_minor_units(),
                    currency=self._currency,
                    description=self._description,
                    idempotency_key=payment_key,
                )
                if charge.refunded:
                    raise PaymentGatewayError()
                order_id = self._orders.create_order(
                    event_id=event.id,
                    buyer_id=buyer.pk,
                    contact=request.contact,
                    charge_id=charge.charge_id,
                    idempotency_key=idempotency_key,
                )
                for _ in range(request.quantity):
                    self._issue_ticket(order_id, offer, event)
        except PaymentError as exc:
            if charge is not None:
                logger.warning("Processor replayed refunded charge %s", charge.charge_id)
                self._record_compensation(buyer, idempotency_key, charge, refunded=True)
            logger.warning("Checkout payment failed for offer %s: %s", offer.id, exc.code.value)
            raise
        except DuplicateOrderError:
            existing = self._orders.find_by_idempotency_key(idempotency_key)
            # A concurrent request with the same key may own this very charge.
            if existing is None or existing.charge_id != charge.charge_id:
                self._compensate(buyer, idempotency_key, charge)
            if existing is None:
                raise
            if existing.buyer_id != buyer.pk:
                raise ForbiddenError()
            return existing
        except Exception:
            if charge is not None:
                self._compensate(buyer, idempotency_key, charge)
            raise

        order = self._orders.get_order(order_id)
        logger.info("Checkout committed: order=%s charge=%s", order.id, order.charge_id)

        self._notify(buyer, order, event, offer.price, request.quantity, subtotal)
        return order

    def _replay(self, buyer, idempotency_key: str) -> Order | None:
        existing = self._orders.find_by_idempotency_key(idempotency_key)
        if existing is None:
            return None
        if existing.buyer_id != buyer.pk:
            raise ForbiddenError()
        logger.info("Checkout replayed for idempotency key %s: order=%s", idempotency_key, existing.id)
        return existing

    def _reserve(self, request: CheckoutRequest, offer: Offer) -> tuple[Offer, Event]:
        """Recheck stock, load the event and take the inventory. Must run inside the transaction."""
        current = self._offers.get_offer(offer.id)
        if current is None:
            raise OfferNotFoundError(str(offer.id))
        if not current.covers(request.quantity):
            logger.warning(
                "Insufficient inventory for offer %s: requested=%d remaining=%d",
                current.id,
                request.quantity,
                current.quantity.value,
            )
            raise InsufficientInventoryError(str(current.id), request.quantity)

        event = self._events.get_event(current.event_id)
        if event is None:
            raise EventNotFoundError(str(current.event_id))
        if not event.is_on_sale:
            raise EventNotOnSaleError(str(event.id), event.status.value)

        if not self._offers.reserve(current.id, request.quantity):
            logger.warning("Reservation lost the race for offer %s", current.id)
            raise InsufficientInventoryError(str(current.id), request.quantity)
        return current, event

    def _issue_ticket(self, order_id: OrderId, offer: Offer, event: Event) -> None:
        self._barcodes.assign(
            event.id,
            lambda barcode: self._orders.add_ticket(
                order_id=order_id,
                offer_id=offer.id,
                event_id=event.id,
                price=offer.price,
                barcode=barcode,
            ),
        )

    def _payment_key(self, idempotency_key: str) -> str:
        """Key sent to the processor. Each compensated charge under a key moves it to a fresh attempt."""
        attempt = self._orders.count_compensated_charges(idempotency_key)
        return idempotency_key if attempt == 0 else f"{idempotency_key}:{attempt}"

    def _compensate(self, buyer, idempotency_key: str, charge: Charge) -> None:
        refunded = self._refund(charge)
        self._record_compensation(buyer, idempotency_key, charge, refunded=refunded)

    def _refund(self, charge: Charge) -> bool:
        try:
            self._payments.refund(charge.charge_id)
        except PaymentError:
            logger.error(
                "Compensating refund failed; charge %s needs reconciliation", charge.charge_id
            )
            return False
        logger.warning("Refunded charge %s after failed checkout", charge.charge_id)
        return True

    def _record_compensation(self, buyer, idempotency_key: str, charge: Charge, refunded: bool) -> None:
        try:
            self._orders.record_compensated_charge(
                idempotency_key=idempotency_key,
                buyer_id=buyer.pk,
                charge_id=charge.charge_id,
                amount=charge.amount,
                currency=charge.currency,
                refunded=refunded,
            )
        except DatabaseError:
            logger.exception("Could not record compensated charge %s", charge.charge_id)

    def _notify(self, buyer, order: Order, event: Event, unit_price: Money, quantity: int, total: Money) -> None:
        try:
            self._notifier.send(
                template="order",
                data={
                    "buyer": buyer,
                    "order": order,
                    "event": event,
                    "unit_price": unit_price,
                    "quantity": quantity,
                    "total": total,
                },
            )
        except Exception:
            logger.exception("Order confirmation failed for order %s", order.id)
