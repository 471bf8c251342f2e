"""Payment processor client.

``PaymentGateway`` is the seam the checkout depends on. ``StripePaymentGateway``
is the production implementation; tests substitute their own.
"""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass

import stripe

from common.errors import PaymentDeclinedError, PaymentGatewayError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Charge:
    """A captured payment.

    ``refunded`` is set when the processor replays a charge that was already
    refunded.
    """

    charge_id: str
    amount: int
    currency: str
    refunded: bool = False


class PaymentGateway(ABC):
    """Interface for charging and refunding buyers."""

    @abstractmethod
    def charge(
        self,
        token: str,
        amount: int,
        currency: str,
        description: str,
        idempotency_key: str,
    ) -> Charge:
        """Capture ``amount`` minor currency units from ``token``.

        Raises:
            PaymentDeclinedError: If the card was declined.
            PaymentGatewayError: For any other processor failure.
        """
        ...

    @abstractmethod
    def refund(self, charge_id: str) -> None:
        """Refund a captured charge in full.

        Raises:
            PaymentGatewayError: If the refund could not be issued.
        """
        ...


class StripePaymentGateway(PaymentGateway):
    """Stripe Charges API client."""

    def __init__(self, api_key: str, statement_descriptor: str = "") -> None:
        self._api_key = api_key
        self._statement_descriptor = statement_descriptor

    def charge(
        self,
        token: str,
        amount: int,
        currency: str,
        description: str,
        idempotency_key: str,
    ) -> Charge:
        params = {
            "source": token,
            "amount": amount,
            "currency": currency,
            "description": description,
        }
        if self._statement_descriptor:
            params["statement_descriptor_suffix"] = self._statement_descriptor
        try:
            charge = stripe.Charge.create(
                api_key=self._api_key,
                idempotency_key=idempotency_key,
                **params,
            )
        except stripe.CardError as exc:
            logger.warning("Card declined (code=%s)", exc.code)
            raise PaymentDeclinedError(decline_code=exc.code) from exc
        except stripe.StripeError as exc:
            logger.error("Stripe charge failed: %s", type(exc).__name__)
            raise PaymentGatewayError() from exc
        return Charge(
            charge_id=charge.id, amount=amount, currency=currency, refunded=bool(charge.refunded)
        )

    def refund(self, charge_id: str) -> None:
        try:
            stripe.Refund.create(api_key=self._api_key, charge=charge_id)
        except stripe.StripeError as exc:
            logger.error("Stripe refund failed for charge %s: %s", charge_id, type(exc).__name__)
            raise PaymentGatewayError() from exc
