"""Domain error codes shared by the events and orders modules.

Every error carries an ``ErrorCode`` and a user-safe message. Callers branch
on ``error.kind`` rather than on message text.
"""

from dataclasses import dataclass
from enum import Enum


class ErrorKind(Enum):
    """Error categories exposed to callers."""

    VALIDATION = "VALIDATION"
    NOT_FOUND = "NOT_FOUND"
    INSUFFICIENT_INVENTORY = "INSUFFICIENT_INVENTORY"
    PAYMENT = "PAYMENT"
    FORBIDDEN = "FORBIDDEN"
    INTERNAL = "INTERNAL"


class ErrorCode(Enum):
    """Domain error codes."""

    VALIDATION_FAILED = "VALIDATION_FAILED"
    EVENT_NOT_FOUND = "EVENT_NOT_FOUND"
    EVENT_NOT_ON_SALE = "EVENT_NOT_ON_SALE"
    OFFER_NOT_FOUND = "OFFER_NOT_FOUND"
    ORDER_NOT_FOUND = "ORDER_NOT_FOUND"
    INSUFFICIENT_INVENTORY = "INSUFFICIENT_INVENTORY"
    CARD_DECLINED = "CARD_DECLINED"
    PAYMENT_GATEWAY_ERROR = "PAYMENT_GATEWAY_ERROR"
    AUTHENTICATION_REQUIRED = "AUTHENTICATION_REQUIRED"
    FORBIDDEN = "FORBIDDEN"
    BARCODE_EXHAUSTED = "BARCODE_EXHAUSTED"

    @property
    def kind(self) -> ErrorKind:
        return _KIND_BY_CODE[self]


_KIND_BY_CODE = {
    ErrorCode.VALIDATION_FAILED: ErrorKind.VALIDATION,
    ErrorCode.EVENT_NOT_FOUND: ErrorKind.NOT_FOUND,
    ErrorCode.EVENT_NOT_ON_SALE: ErrorKind.NOT_FOUND,
    ErrorCode.OFFER_NOT_FOUND: ErrorKind.NOT_FOUND,
    ErrorCode.ORDER_NOT_FOUND: ErrorKind.NOT_FOUND,
    ErrorCode.INSUFFICIENT_INVENTORY: ErrorKind.INSUFFICIENT_INVENTORY,
    ErrorCode.CARD_DECLINED: ErrorKind.PAYMENT,
    ErrorCode.PAYMENT_GATEWAY_ERROR: ErrorKind.PAYMENT,
    ErrorCode.AUTHENTICATION_REQUIRED: ErrorKind.FORBIDDEN,
    ErrorCode.FORBIDDEN: ErrorKind.FORBIDDEN,
    ErrorCode.BARCODE_EXHAUSTED: ErrorKind.INTERNAL,
}


@dataclass(eq=False)
class DomainError(Exception):
    """Base domain error with code and user-safe message."""

    code: ErrorCode
    message: str

    @property
    def kind(self) -> ErrorKind:
        return self.code.kind

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"


@dataclass(frozen=True)
class FieldError:
    """A single invalid input field."""

    field: str
    message: str


class CheckoutValidationError(DomainError):
    """Raised with every invalid checkout field at once."""

    def __init__(self, errors: list[FieldError]) -> None:
        super().__init__(
            code=ErrorCode.VALIDATION_FAILED,
            message="One or more fields are invalid",
        )
        self.errors = list(errors)


class EventNotFoundError(DomainError):
    """Raised when an event is not found."""

    def __init__(self, event_id: str) -> None:
        super().__init__(
            code=ErrorCode.EVENT_NOT_FOUND,
            message="Event not found",
        )
        self.event_id = event_id


class EventNotOnSaleError(DomainError):
    """Raised when an event exists but is not in a sellable status."""

    def __init__(self, event_id: str, status: str) -> None:
        super().__init__(
            code=ErrorCode.EVENT_NOT_ON_SALE,
            message="Event not found",
        )
        self.event_id = event_id
        self.status = status


class OfferNotFoundError(DomainError):
    """Raised when an offer is not found or is outside its sale window."""

    def __init__(self, offer_id: str) -> None:
        super().__init__(
            code=ErrorCode.OFFER_NOT_FOUND,
            message="Offer not found",
        )
        self.offer_id = offer_id


class OrderNotFoundError(DomainError):
    """Raised when an order is not found for the requesting buyer."""

    def __init__(self, order_id: str) -> None:
        super().__init__(
            code=ErrorCode.ORDER_NOT_FOUND,
            message="Order not found",
        )
        self.order_id = order_id


class InsufficientInventoryError(DomainError):
    """Raised when an offer cannot cover the requested quantity."""

    def __init__(self, offer_id: str, requested: int) -> None:
        super().__init__(
            code=ErrorCode.INSUFFICIENT_INVENTORY,
            message="Not enough tickets available",
        )
        self.offer_id = offer_id
        self.requested = requested


class PaymentError(DomainError):
    """Base for payment processor failures."""


class PaymentDeclinedError(PaymentError):
    """Raised when the card was declined. The buyer can retry with another card."""

    def __init__(self, decline_code: str | None = None) -> None:
        super().__init__(
            code=ErrorCode.CARD_DECLINED,
            message="Card declined",
        )
        self.decline_code = decline_code


class PaymentGatewayError(PaymentError):
    """Raised when the payment processor failed to handle the charge."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.PAYMENT_GATEWAY_ERROR,
            message="Payment could not be processed",
        )


class AuthenticationRequiredError(DomainError):
    """Raised when an anonymous caller attempts a buyer-only action."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.AUTHENTICATION_REQUIRED,
            message="Authentication required",
        )


class ForbiddenError(DomainError):
    """Raised when the caller lacks permission for an action."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.FORBIDDEN,
            message="You do not have permission to perform this action",
        )


class BarcodeExhaustedError(DomainError):
    """Raised when no unique barcode could be produced within the retry bound."""

    def __init__(self, event_id: str, attempts: int) -> None:
        super().__init__(
            code=ErrorCode.BARCODE_EXHAUSTED,
            message="Could not issue tickets",
        )
        self.event_id = event_id
        self.attempts = attempts


__all__ = [
    "ErrorKind",
    "ErrorCode",
    "DomainError",
    "FieldError",
    "CheckoutValidationError",
    "EventNotFoundError",
    "EventNotOnSaleError",
    "OfferNotFoundError",
    "OrderNotFoundError",
    "InsufficientInventoryError",
    "PaymentError",
    "PaymentDeclinedError",
    "PaymentGatewayError",
    "AuthenticationRequiredError",
    "ForbiddenError",
    "BarcodeExhaustedError",
]
