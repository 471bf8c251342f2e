"""Pytest configuration and shared fixtures."""

import dataclasses
import uuid
from decimal import Decimal

import pytest
from rest_framework.test import APIClient

from common.errors import PaymentDeclinedError, PaymentGatewayError
from events.domain import OfferId
from events.models import Event, Offer
from events.stores import DjangoEventStore, DjangoOfferStore
from orders.domain import ContactInfo, CheckoutRequest
from orders.gateways import Charge, OrderNotifier, PaymentGateway
from orders.services import BarcodeGenerator, CheckoutService
from orders.stores import DjangoOrderStore


class FakePaymentGateway(PaymentGateway):
    """In-memory gateway. Set ``decline`` or ``fail`` to simulate processor errors.

    Like Stripe, a repeated idempotency key replays the original charge,
    including its refunded state.
    """

    def __init__(self) -> None:
        self.decline = False
        self.fail = False
        self.refund_fails = False
        self.charges: list[dict] = []
        self.refunds: list[str] = []
        self._by_key: dict[str, Charge] = {}

    def charge(self, token, amount, currency, description, idempotency_key):
        if self.decline:
            raise PaymentDeclinedError(decline_code="card_declined")
        if self.fail:
            raise PaymentGatewayError()
        if idempotency_key in self._by_key:
            return self._by_key[idempotency_key]
        charge = Charge(charge_id=f"ch_{uuid.uuid4().hex}", amount=amount, currency=currency)
        self._by_key[idempotency_key] = charge
        self.charges.append(
            {
                "token": token,
                "amount": amount,
                "currency": currency,
                "description": description,
                "idempotency_key": idempotency_key,
                "charge_id": charge.charge_id,
            }
        )
        return charge

    def refund(self, charge_id):
        if self.refund_fails:
            raise PaymentGatewayError()
        self.refunds.append(charge_id)
        for key, charge in self._by_key.items():
            if charge.charge_id == charge_id:
                self._by_key[key] = dataclasses.replace(charge, refunded=True)


class FakeNotifier(OrderNotifier):
    def __init__(self) -> None:
        self.sent: list[tuple[str, dict]] = []
        self.error: Exception | None = None

    def send(self, template, data):
        if self.error is not None:
            raise self.error
        self.sent.append((template, data))


@pytest.fixture
def api_client() -> APIClient:
    return APIClient()


@pytest.fixture
def buyer(db, django_user_model):
    return django_user_model.objects.create_user(
        username="buyer", password="pass12345", email="buyer@example.com"
    )


@pytest.fixture
def other_buyer(db, django_user_model):
    return django_user_model.objects.create_user(
        username="other", password="pass12345", email="other@example.com"
    )


@pytest.fixture
def make_offer(db):
    def _make(quantity=5, price="10.00", status=Event.Status.ACTIVE, **kwargs) -> Offer:
        event = Event.objects.create(name="Spring Concert", status=status)
        return Offer.objects.create(
            event=event,
            name="General Admission",
            price=Decimal(price),
            quantity=quantity,
            **kwargs,
        )

    return _make


@pytest.fixture
def offer(make_offer) -> Offer:
    return make_offer()


@pytest.fixture
def payments() -> FakePaymentGateway:
    return FakePaymentGateway()


@pytest.fixture
def notifier() -> FakeNotifier:
    return FakeNotifier()


@pytest.fixture
def make_service(payments, notifier):
    def _make(offers=None, barcodes=None, orders=None, **kwargs) -> CheckoutService:
        orders = orders or DjangoOrderStore()
        return CheckoutService(
            offers=offers or DjangoOfferStore(),
            events=DjangoEventStore(),
            orders=orders,
            payments=payments,
            notifier=notifier,
            barcodes=barcodes or BarcodeGenerator(orders),
            **kwargs,
        )

    return _make


@pytest.fixture
def make_request():
    def _make(offer: Offer, quantity: int, token="tok_visa", key=None, **contact) -> CheckoutRequest:
        return CheckoutRequest(
            offer_id=OfferId(offer.id),
            quantity=quantity,
            payment_token=token,
            contact=ContactInfo(**contact),
            idempotency_key=key,
        )

    return _make
