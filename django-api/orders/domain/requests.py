"""Checkout input parsing.

Turns a raw request payload into a ``CheckoutRequest``. Every invalid field is
reported together in one ``CheckoutValidationError``, including a quantity
outside the offer's order limits when the caller can look the offer up.
"""

import re
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Any

from email_validator import EmailNotValidError, validate_email

from common.errors import CheckoutValidationError, FieldError
from events.domain import Offer, OfferId
from orders.domain.models import ContactInfo

NAME_MAX_LENGTH = 50
EMAIL_MAX_LENGTH = 50

MOBILE_NUMBER_RE = re.compile(r"^\+?\d{8,15}$")
PAYMENT_TOKEN_RE = re.compile(r"^[A-Za-z0-9_]{1,255}$")
IDEMPOTENCY_KEY_RE = re.compile(r"^[A-Za-z0-9_\-:.]{1,100}$")


@dataclass(frozen=True)
class CheckoutRequest:
    """A validated checkout request."""

    offer_id: OfferId
    quantity: int
    payment_token: str
    contact: ContactInfo
    idempotency_key: str | None = None


def _optional_text(data: Mapping[str, Any], key: str) -> str:
    value = data.get(key)
    if value is None:
        return ""
    return str(value).strip()


def _parse_quantity(raw: Any) -> int | None:
    if isinstance(raw, bool):
        return None
    if isinstance(raw, int):
        return raw
    if isinstance(raw, str) and raw.strip().isdigit():
        return int(raw.strip())
    return None


def quantity_limit_error(offer: Offer) -> FieldError:
    return FieldError(
        "quantity",
        f"The quantity field must be between {offer.min_order_quantity} "
        f"and {offer.max_order_quantity}.",
    )


def parse_checkout_request(
    data: Mapping[str, Any],
    find_offer: Callable[[OfferId], Offer | None] | None = None,
) -> CheckoutRequest:
    """Validate a checkout payload.

    With ``find_offer``, a well-formed quantity is also checked against the
    offer's order limits. An unknown offer is left to the checkout to report.

    Raises:
        CheckoutValidationError: With one FieldError per invalid field.
    """
    errors: list[FieldError] = []

    offer_id = None
    raw_offer_id = _optional_text(data, "offerId")
    if not raw_offer_id:
        errors.append(FieldError("offerId", "The offerId field cannot be empty."))
    else:
        try:
            offer_id = OfferId.from_string(raw_offer_id)
        except ValueError:
            errors.append(FieldError("offerId", "The offerId field must be a valid offer ID."))

    quantity = None
    if data.get("quantity") is None:
        errors.append(FieldError("quantity", "The quantity field cannot be empty."))
    else:
        quantity = _parse_quantity(data.get("quantity"))
        if quantity is None:
            errors.append(FieldError("quantity", "The quantity field must be an integer."))
        elif quantity < 1:
            errors.append(FieldError("quantity", "The quantity field must be greater than 0."))

    if find_offer is not None and offer_id is not None and quantity is not None and quantity >= 1:
        offer = find_offer(offer_id)
        if offer is not None and not offer.accepts_order_of(quantity):
            errors.append(quantity_limit_error(offer))

    payment_token = _optional_text(data, "paymentToken")
    if not payment_token:
        errors.append(FieldError("paymentToken", "The paymentToken field cannot be empty."))
    elif not PAYMENT_TOKEN_RE.match(payment_token):
        errors.append(FieldError("paymentToken", "The paymentToken field is malformed."))

    first_name = _optional_text(data, "firstName")
    if len(first_name) > NAME_MAX_LENGTH:
        errors.append(
            FieldError("firstName", "The firstName field cannot be longer than 50 characters long.")
        )

    last_name = _optional_text(data, "lastName")
    if len(last_name) > NAME_MAX_LENGTH:
        errors.append(
            FieldError("lastName", "The lastName field cannot be longer than 50 characters long.")
        )

    email = _optional_text(data, "email")
    if email:
        try:
            email = validate_email(email, check_deliverability=False).normalized
        except EmailNotValidError:
            errors.append(FieldError("email", "The email field must be a valid email."))
        else:
            if len(email) > EMAIL_MAX_LENGTH:
                errors.append(
                    FieldError("email", "The email field cannot be longer than 50 characters long.")
                )

    mobile_number = _optional_text(data, "mobileNumber")
    if mobile_number and not MOBILE_NUMBER_RE.match(mobile_number):
        errors.append(
            FieldError("mobileNumber", "The mobileNumber field must be a valid phone number.")
        )

    idempotency_key = _optional_text(data, "idempotencyKey") or None
    if idempotency_key is not None and not IDEMPOTENCY_KEY_RE.match(idempotency_key):
        errors.append(FieldError("idempotencyKey", "The idempotencyKey field is malformed."))

    if errors:
        raise CheckoutValidationError(errors)

    return CheckoutRequest(
        offer_id=offer_id,
        quantity=quantity,
        payment_token=payment_token,
        contact=ContactInfo(
            first_name=first_name,
            last_name=last_name,
            email=email,
            mobile_number=mobile_number,
        ),
        idempotency_key=idempotency_key,
    )
